"""Small response models shared by several routers."""

from .base import CamelModel


class SuccessResponse(CamelModel):
    success: bool = True

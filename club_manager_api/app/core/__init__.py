"""Configuration, logging, security, storage and error primitives."""

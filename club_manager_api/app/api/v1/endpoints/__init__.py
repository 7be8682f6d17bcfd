"""
Endpoint subpackage for API v1.

Each module in this package defines an APIRouter for one domain
(auth, events, bookings, notifications, settings, users).  The routers
are aggregated in ``router.py`` at the package level.
"""

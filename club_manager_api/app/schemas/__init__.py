"""
Pydantic schema definitions for API payloads.

Each domain (users, events, bookings, notifications, settings) defines
its own request and response models.  Field names are snake_case in
Python and camelCase on the wire and in the stored document.
"""

"""User role enum for routing and dashboard access."""

from enum import Enum as PyEnum


class UserRole(str, PyEnum):
    """
    Roles a user of the building can hold.

    - OWNER: sees the building dashboard (occupancy, rent collection)
    - TENANT: registers for a room, then submits monthly payment proof
    """

    OWNER = "owner"
    TENANT = "tenant"

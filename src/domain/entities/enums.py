"""
Content API Domain Enums

Enumeration types used across domain entities.
"""

from enum import Enum


class AccountRole(str, Enum):
    """Roles an account may hold. Only the admin role is recognised."""

    admin = "admin"


class ErrorKind(str, Enum):
    """Kinds carried by ``Error`` values and rendered as the ``error`` field"""

    bad_request = "bad_request"
    unauthorized = "unauthorized"
    not_found = "not_found"
    page_not_found = "page_not_found"
    conflict = "conflict"
    internal_error = "internal_error"

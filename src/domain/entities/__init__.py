"""
Content API Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import AccountRole, ErrorKind

# Export all entities
from .account import Account
from .session import Session
from .page import Page
from .entity import Entity

__all__ = [
    # Enums
    "AccountRole",
    "ErrorKind",
    # Entities
    "Account",
    "Session",
    "Page",
    "Entity",
]

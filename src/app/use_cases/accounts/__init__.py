"""
Account Use Cases

Out-of-band account administration (used by the CLI, never by the API).
"""

from .provision_admin_use_case import ProvisionAdminUseCase
from .set_account_disabled_use_case import SetAccountDisabledUseCase
from .list_account_sessions_use_case import ListAccountSessionsUseCase
from .dtos import (
    AccountSessionsResponse,
    AccountStatusResponse,
    ProvisionAdminResponse,
    SessionSummary,
)

__all__ = [
    "ProvisionAdminUseCase",
    "SetAccountDisabledUseCase",
    "ListAccountSessionsUseCase",
    "ProvisionAdminResponse",
    "AccountStatusResponse",
    "AccountSessionsResponse",
    "SessionSummary",
]

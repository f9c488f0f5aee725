"""
Admin Session Use Cases

Login, the per-request session gate, logout and introspection.
"""

from .login_use_case import LoginUseCase
from .authenticate_session_use_case import AuthenticateSessionUseCase
from .logout_use_case import LogoutUseCase
from .introspect_session_use_case import IntrospectSessionUseCase
from .dtos import (
    INVALID_CREDENTIALS,
    INVALID_SESSION,
    MISSING_SESSION,
    AdminContext,
    ClientContext,
    IntrospectionResponse,
    LoginResponse,
    LogoutResponse,
)

__all__ = [
    # Use Cases
    "LoginUseCase",
    "AuthenticateSessionUseCase",
    "LogoutUseCase",
    "IntrospectSessionUseCase",
    # DTOs - Commands
    "ClientContext",
    # DTOs - Responses
    "LoginResponse",
    "AdminContext",
    "LogoutResponse",
    "IntrospectionResponse",
    # Errors
    "INVALID_CREDENTIALS",
    "MISSING_SESSION",
    "INVALID_SESSION",
]

from fastapi import Response

from config import ApplicationConfig

SESSION_COOKIE_NAME = "admin_session"
SESSION_COOKIE_MAX_AGE = 10 * 365 * 24 * 60 * 60


def _cookie_attributes() -> dict:
    return {
        "httponly": True,
        "secure": ApplicationConfig.is_production(),
        "samesite": "none",
        "path": "/",
    }


def set_session_cookie(response: Response, raw_token: str) -> None:
    response.set_cookie(
        SESSION_COOKIE_NAME,
        raw_token,
        max_age=SESSION_COOKIE_MAX_AGE,
        **_cookie_attributes(),
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(SESSION_COOKIE_NAME, **_cookie_attributes())

from httpx import AsyncClient

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "correct horse battery staple"
SESSION_COOKIE = "admin_session"


async def login(client: AsyncClient, username=ADMIN_USERNAME, password=ADMIN_PASSWORD, **extra):
    return await client.post(
        "/admin/login", json={"username": username, "password": password, **extra}
    )


def use_token(client: AsyncClient, token: str) -> None:
    """Replace whatever the cookie jar holds with this admin_session value"""
    client.cookies.clear()
    client.cookies.set(SESSION_COOKIE, token)

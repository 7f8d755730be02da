from config import ApplicationConfig


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def token_header(token: str) -> dict:
    return {ApplicationConfig.TOKEN_HEADER: token}

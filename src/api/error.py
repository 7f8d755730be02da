from typing import NoReturn

from fastapi import status
from libs.result import Error

# Client-correctable error codes and the HTTP status they surface as
STATUS_BY_CODE = {
    "INVALID_CREDENTIAL": status.HTTP_401_UNAUTHORIZED,
    "NOT_AUTHENTICATED": status.HTTP_401_UNAUTHORIZED,
    "TOKEN_EXPIRED": status.HTTP_401_UNAUTHORIZED,
    "TOKEN_KICKED_OUT": status.HTTP_401_UNAUTHORIZED,
    "TOKEN_REPLACED": status.HTTP_401_UNAUTHORIZED,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error) -> NoReturn:
    """Raise ClientError for known codes, ServerError for anything else"""
    status_code = STATUS_BY_CODE.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)

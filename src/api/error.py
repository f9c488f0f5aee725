import logging

from fastapi import status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.domain.entities import ErrorKind
from src.libs.result import Error

logger = logging.getLogger(__name__)

INTERNAL_ERROR = Error(ErrorKind.internal_error.value, "Internal server error")

_KIND_BY_STATUS = {
    status.HTTP_400_BAD_REQUEST: ErrorKind.bad_request,
    status.HTTP_401_UNAUTHORIZED: ErrorKind.unauthorized,
    status.HTTP_404_NOT_FOUND: ErrorKind.not_found,
    status.HTTP_409_CONFLICT: ErrorKind.conflict,
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


def normalize_error(exc: Exception) -> Error:
    """
    Map any exception raised while handling a request to an Error value.

    ClientError and 4xx HTTP errors keep their message. Anything else becomes
    the generic internal error; exception text never reaches a response body.
    """
    if isinstance(exc, ClientError):
        return exc.base_error
    if isinstance(exc, ServerError):
        return Error(exc.base_error.kind, INTERNAL_ERROR.message)
    if isinstance(exc, RequestValidationError):
        return Error(ErrorKind.bad_request.value, "Invalid request")
    if isinstance(exc, StarletteHTTPException) and exc.status_code < 500:
        kind = _KIND_BY_STATUS.get(exc.status_code, ErrorKind.bad_request)
        return Error(kind.value, str(exc.detail))
    return INTERNAL_ERROR


def status_code_for(exc: Exception) -> int:
    if isinstance(exc, ClientError):
        return exc.status_code
    if isinstance(exc, RequestValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, StarletteHTTPException):
        return exc.status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR

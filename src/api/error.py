from fastapi import status

from src.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(
        self,
        base_error: Error,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    ):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


# Error codes produced by use cases and the HTTP status they map to
CLIENT_ERROR_STATUS = {
    "GROUP_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "MEMBERSHIP_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "PARENT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "MEMBER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "SELF_MEMBERSHIP": status.HTTP_400_BAD_REQUEST,
    "CYCLE_REJECTED": status.HTTP_409_CONFLICT,
    "EMAIL_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "MEMBERSHIP_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "GROUP_HAS_CHILDREN": status.HTTP_409_CONFLICT,
    "INTEGRITY_CONFLICT": status.HTTP_409_CONFLICT,
}

SERVER_ERROR_STATUS = {
    "STORE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def raise_for_error(error: Error):
    """Raise the HTTP-facing exception for a use case error"""
    if error.code in CLIENT_ERROR_STATUS:
        raise ClientError(error, status_code=CLIENT_ERROR_STATUS[error.code])
    raise ServerError(
        error,
        status_code=SERVER_ERROR_STATUS.get(
            error.code, status.HTTP_500_INTERNAL_SERVER_ERROR
        ),
    )

from uuid import UUID

from fastapi import status

from src.api.error import ClientError
from src.libs.result import Error


def parse_uuid(value: str, code: str, message: str) -> UUID:
    """Parse a path parameter, answering 400 with `code` when malformed"""
    try:
        return UUID(value)
    except ValueError:
        raise ClientError(Error(code, message), status_code=status.HTTP_400_BAD_REQUEST)

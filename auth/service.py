"""
Core authentication logic.

This module handles validation of credentials.
Currently uses an in-memory user store, but can be
extended to check against a database or external provider.
"""

import secrets

from fastapi import HTTPException, status

from .config import USERS
from .schemas import Principal
from .utils import hash_password


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Basic"},
    )


def authenticate_user(username: str, password: str) -> Principal:
    """
    Authenticate a user by validating their username and password.

    Args:
        username (str): The username provided by the client.
        password (str): The password provided by the client.

    Returns:
        Principal: The authenticated caller and whether it is an admin.

    Raises:
        HTTPException: If authentication fails (401 Unauthorized).
    """
    record = USERS.get(username)
    if record is None:
        raise _unauthorized("User not found")

    stored_password = record["password"].encode("utf-8")
    # Allow both plain-text (demo) and hashed password comparison.
    # compare_digest only accepts ASCII str, so compare UTF-8 bytes.
    if secrets.compare_digest(stored_password, password.encode("utf-8")) or secrets.compare_digest(
        stored_password, hash_password(password).encode("utf-8")
    ):
        return Principal(username=username, is_elevated=record["is_admin"])

    raise _unauthorized("Invalid password")

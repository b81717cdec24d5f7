"""
Password helpers for the auth module.
"""

import hashlib


def hash_password(password: str) -> str:
    """
    Return the hex SHA-256 digest of `password`.

    Lets USERS hold either a plain demo password or its digest
    (e.g. ADMIN_USER_PASSWORD set to a precomputed hash).
    Not a substitute for a salted KDF such as passlib[bcrypt].
    """
    return hashlib.sha256(password.encode("utf-8")).hexdigest()

"""
Configuration for the auth module.

This defines how users are loaded. For demo purposes,
this uses an in-memory dictionary.
In production, this can be extended to load users from a database or external service.
"""

from typing import Dict, TypedDict
import os


class UserRecord(TypedDict):
    password: str
    is_admin: bool


# Demo in-memory user store (username → record)
# Replace with DB-backed logic in production.
USERS: Dict[str, UserRecord] = {
    "shortlink_demo": {
        "password": os.getenv("DEMO_USER_PASSWORD", "shortlink_demo"),
        "is_admin": False,
    },
    "shortlink_other": {
        "password": os.getenv("OTHER_USER_PASSWORD", "shortlink_other"),
        "is_admin": False,
    },
    "shortlink_admin": {
        "password": os.getenv("ADMIN_USER_PASSWORD", "shortlink_admin"),
        "is_admin": True,
    },
}

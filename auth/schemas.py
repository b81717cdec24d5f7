"""
Pydantic schemas for the auth module.
"""

from pydantic import BaseModel


class Principal(BaseModel):
    """Authenticated caller as seen by the deletion rules."""
    username: str
    is_elevated: bool = False

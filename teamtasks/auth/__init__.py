"""Authentication module"""

from teamtasks.auth.jwt import create_access_token, verify_token, get_current_user

__all__ = [
    "create_access_token",
    "verify_token",
    "get_current_user",
]

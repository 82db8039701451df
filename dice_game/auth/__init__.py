from .dependencies import CurrentUser, get_current_active_user, get_current_user
from .utils import authenticate_user, create_access_token, get_password_hash

__all__ = [
    "CurrentUser",
    "get_current_active_user",
    "get_current_user",
    "authenticate_user",
    "create_access_token",
    "get_password_hash",
]

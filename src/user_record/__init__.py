"""Person record teaching package."""
from user_record.errors import InvalidInputError, UserRecordError
from user_record.models import SealedUser, User, format_user_details, new_user

__all__ = [
    "InvalidInputError",
    "SealedUser",
    "User",
    "UserRecordError",
    "format_user_details",
    "new_user",
]

from userapi.models.user import User

__all__ = [
    "User",
]

import datetime as dt

from pydantic import BaseModel, field_serializer, field_validator

from userapi.services.sanitize import sanitize_username


class UserIn(BaseModel):
    username: str

    @field_validator("username")
    @classmethod
    def _sanitize(cls, value: str) -> str:
        return sanitize_username(value)


class UserOut(BaseModel):
    id: str
    username: str
    joined_at: dt.datetime

    model_config = {"from_attributes": True}

    @field_serializer("joined_at")
    def _joined_at_utc(self, value: dt.datetime) -> str:
        # Stored as naive UTC
        if value.tzinfo is None:
            value = value.replace(tzinfo=dt.timezone.utc)
        return value.isoformat()


class UserResult(BaseModel):
    result: UserOut


class UserListResult(BaseModel):
    result: list[UserOut]

from fastapi import APIRouter, Depends, Query, Response

from userapi.api.v1.auth import require_admin_token
from userapi.deps import get_user_repository
from userapi.errors import NotFound
from userapi.repositories.users import UserRepository
from userapi.schemas.user import UserIn, UserListResult, UserOut, UserResult

router = APIRouter()

_AUTH_RESPONSES = {
    401: {"description": "Unauthorized."},
    403: {"description": "Forbidden."},
}


def _user_result(user) -> UserResult:
    return UserResult(result=UserOut.model_validate(user))


@router.get(
    "",
    response_model=UserListResult,
    responses={500: {"description": "Server-side error."}},
)
def list_users(
    limit: str | None = Query(
        None,
        description="How many users to return (documented range 5-100, default 10).",
    ),
    offset: str | None = Query(None, description="Offset used for paginating the results."),
    order: str | None = Query(
        None, description="ASC or DESC by joined_at, case-insensitive. Defaults to DESC."
    ),
    users: UserRepository = Depends(get_user_repository),
):
    """Returns a paginated array of users sorted by their joined_at timestamp."""
    found = users.list(limit=limit, offset=offset, order=order)
    return UserListResult(result=[UserOut.model_validate(u) for u in found])


@router.post(
    "",
    status_code=201,
    response_model=UserResult,
    dependencies=[Depends(require_admin_token)],
    responses={
        400: {"description": "Malformed request."},
        409: {"description": "Username already exists."},
        **_AUTH_RESPONSES,
    },
)
def create_user(
    data: UserIn,
    users: UserRepository = Depends(get_user_repository),
):
    """Creates a new user. The given username must be unique."""
    return _user_result(users.create(data.username))


@router.get(
    "/{user_id}",
    response_model=UserResult,
    responses={400: {"description": "Invalid user id."}, 404: {"description": "User not found."}},
)
def get_user(
    user_id: str,
    users: UserRepository = Depends(get_user_repository),
):
    user = users.get_by_id(user_id)
    if user is None:
        raise NotFound()
    return _user_result(user)


@router.put(
    "/{user_id}",
    status_code=204,
    response_class=Response,
    dependencies=[Depends(require_admin_token)],
    responses={
        400: {"description": "Invalid user id or malformed request."},
        404: {"description": "User not found."},
        409: {"description": "Username already exists."},
        **_AUTH_RESPONSES,
    },
)
def update_user(
    user_id: str,
    data: UserIn,
    users: UserRepository = Depends(get_user_repository),
):
    """Replaces the username of an existing user."""
    if users.update_by_id(user_id, data.username) is None:
        raise NotFound()
    return Response(status_code=204)


@router.delete(
    "/{user_id}",
    response_model=UserResult,
    dependencies=[Depends(require_admin_token)],
    responses={
        400: {"description": "Invalid user id."},
        404: {"description": "User not found."},
        **_AUTH_RESPONSES,
    },
)
def delete_user(
    user_id: str,
    users: UserRepository = Depends(get_user_repository),
):
    """Deletes a user and returns its last stored contents."""
    user = users.delete_by_id(user_id)
    if user is None:
        raise NotFound()
    return _user_result(user)

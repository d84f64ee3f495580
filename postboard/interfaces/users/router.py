"""
FastAPI router for accounts, sessions and user profiles.

Sign-up and sign-in are public and rate limited. Every other route
requires a bearer token. Profile writes are restricted to the
caller's own record by the use cases.
"""

from fastapi import APIRouter, Depends, Request, Response, status

from postboard.application.users.change_password import ChangePasswordUseCase
from postboard.application.users.delete_user import DeleteUserUseCase
from postboard.application.users.dtos import (
    ChangePasswordCommand,
    DeleteUserCommand,
    ShowUserQuery,
    SignInCommand,
    SignUpCommand,
    UpdateUserCommand,
)
from postboard.application.users.show_user import ShowUserUseCase
from postboard.application.users.sign_in import SignInUseCase
from postboard.application.users.sign_out import SignOutUseCase
from postboard.application.users.sign_up import SignUpUseCase
from postboard.application.users.update_user import UpdateUserUseCase
from postboard.core.config import settings
from postboard.domain.entities import User
from postboard.interfaces.dependencies import (
    get_change_password_use_case,
    get_current_user,
    get_delete_user_use_case,
    get_show_user_use_case,
    get_sign_in_use_case,
    get_sign_out_use_case,
    get_sign_up_use_case,
    get_update_user_use_case,
)
from postboard.interfaces.schemas import ErrorResponse
from postboard.interfaces.users.schemas import (
    ChangePasswordRequest,
    SignedInUserItem,
    SignInRequest,
    SignInResponse,
    SignUpRequest,
    UpdateUserRequest,
    UserItem,
    UserResponse,
)
from postboard.shared.security.rate_limiting import limiter

router = APIRouter(tags=["users"])


@router.post(
    "/sign-up",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
    summary="Register",
)
@limiter.limit(settings.rate_limit_auth)
def sign_up(
    request: Request,
    payload: SignUpRequest,
    use_case: SignUpUseCase = Depends(get_sign_up_use_case),
) -> UserResponse:
    """Create an account. Email and nickname must be unused."""
    creds = payload.credentials
    command = SignUpCommand(
        email=creds.email,
        password=creds.password,
        password_confirmation=creds.password_confirmation,
        nickname=creds.nickname,
        profile_picture=creds.profile_picture,
    )
    return UserResponse(user=UserItem.from_result(use_case.execute(command)))


@router.post(
    "/sign-in",
    response_model=SignInResponse,
    status_code=status.HTTP_201_CREATED,
    responses={401: {"model": ErrorResponse}},
    summary="Sign in",
)
@limiter.limit(settings.rate_limit_auth)
def sign_in(
    request: Request,
    payload: SignInRequest,
    use_case: SignInUseCase = Depends(get_sign_in_use_case),
) -> SignInResponse:
    """Exchange credentials for a new bearer token."""
    command = SignInCommand(
        email=payload.credentials.email,
        password=payload.credentials.password,
    )
    return SignInResponse(user=SignedInUserItem.from_result(use_case.execute(command)))


@router.patch(
    "/change-password",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={401: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Change password",
)
def change_password(
    payload: ChangePasswordRequest,
    caller: User = Depends(get_current_user),
    use_case: ChangePasswordUseCase = Depends(get_change_password_use_case),
) -> Response:
    use_case.execute(
        ChangePasswordCommand(
            caller=caller,
            old_password=payload.passwords.old,
            new_password=payload.passwords.new,
        )
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/sign-out",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={401: {"model": ErrorResponse}},
    summary="Sign out",
)
def sign_out(
    caller: User = Depends(get_current_user),
    use_case: SignOutUseCase = Depends(get_sign_out_use_case),
) -> Response:
    """Invalidate the caller's current token."""
    use_case.execute(caller)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/users/{user_id}",
    response_model=UserResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Show a user",
)
def show_user(
    user_id: str,
    _caller: User = Depends(get_current_user),
    use_case: ShowUserUseCase = Depends(get_show_user_use_case),
) -> UserResponse:
    result = use_case.execute(ShowUserQuery(user_id=user_id))
    return UserResponse(user=UserItem.from_result(result))


@router.patch(
    "/users/{user_id}",
    response_model=UserResponse,
    responses={
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
    summary="Update my profile",
)
def update_user(
    user_id: str,
    payload: UpdateUserRequest,
    caller: User = Depends(get_current_user),
    use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
) -> UserResponse:
    """Patch the caller's own nickname or profile picture."""
    command = UpdateUserCommand(
        caller=caller,
        user_id=user_id,
        changes=payload.user.model_dump(exclude_unset=True),
    )
    return UserResponse(user=UserItem.from_result(use_case.execute(command)))


@router.delete(
    "/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Delete my account",
)
def delete_user(
    user_id: str,
    caller: User = Depends(get_current_user),
    use_case: DeleteUserUseCase = Depends(get_delete_user_use_case),
) -> Response:
    """Delete the caller's account together with their posts."""
    use_case.execute(DeleteUserCommand(caller=caller, user_id=user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

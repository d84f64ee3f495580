"""
Dependency injection for the HTTP layer.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection, and resolves
the bearer token into the calling user.
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.engine import Engine

from postboard.application.posts.create_post import CreatePostUseCase
from postboard.application.posts.delete_post import DeletePostUseCase
from postboard.application.posts.get_my_latest_post import GetMyLatestPostUseCase
from postboard.application.posts.list_my_posts import ListMyPostsUseCase
from postboard.application.posts.list_posts import ListPostsUseCase
from postboard.application.posts.show_post import ShowPostUseCase
from postboard.application.posts.update_post import UpdatePostUseCase
from postboard.application.users.change_password import ChangePasswordUseCase
from postboard.application.users.delete_user import DeleteUserUseCase
from postboard.application.users.show_user import ShowUserUseCase
from postboard.application.users.sign_in import SignInUseCase
from postboard.application.users.sign_out import SignOutUseCase
from postboard.application.users.sign_up import SignUpUseCase
from postboard.application.users.update_user import UpdateUserUseCase
from postboard.core.config import settings
from postboard.domain.entities import User
from postboard.domain.errors import AuthenticationError
from postboard.domain.ports import (
    PasswordHasher,
    PostRepository,
    TokenGenerator,
    UserRepository,
)
from postboard.infrastructure.database import create_db_engine
from postboard.infrastructure.post_repository import SqlPostRepository
from postboard.infrastructure.security import Pbkdf2PasswordHasher, SecretTokenGenerator
from postboard.infrastructure.user_repository import SqlUserRepository

bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache
def get_engine() -> Engine:
    """Build the process-wide SQLAlchemy engine from application settings."""
    return create_db_engine(settings.database_url)


def get_user_repository(engine: Engine = Depends(get_engine)) -> UserRepository:
    return SqlUserRepository(engine)


def get_post_repository(engine: Engine = Depends(get_engine)) -> PostRepository:
    return SqlPostRepository(engine)


def get_password_hasher() -> PasswordHasher:
    return Pbkdf2PasswordHasher(iterations=settings.password_hash_iterations)


def get_token_generator() -> TokenGenerator:
    return SecretTokenGenerator(nbytes=settings.token_bytes)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    user_repo: UserRepository = Depends(get_user_repository),
) -> User:
    """Resolve ``Authorization: Bearer <token>`` to the calling user.

    Raises:
        AuthenticationError: If the header is missing or the token is unknown.
    """
    if credentials is None:
        raise AuthenticationError()
    user = user_repo.get_by_token(credentials.credentials)
    if user is None:
        raise AuthenticationError()
    return user


# --- Posts ---


def get_list_posts_use_case(
    post_repo: PostRepository = Depends(get_post_repository),
) -> ListPostsUseCase:
    return ListPostsUseCase(post_repo=post_repo)


def get_list_my_posts_use_case(
    post_repo: PostRepository = Depends(get_post_repository),
) -> ListMyPostsUseCase:
    return ListMyPostsUseCase(post_repo=post_repo)


def get_my_latest_post_use_case(
    post_repo: PostRepository = Depends(get_post_repository),
) -> GetMyLatestPostUseCase:
    return GetMyLatestPostUseCase(post_repo=post_repo)


def get_show_post_use_case(
    post_repo: PostRepository = Depends(get_post_repository),
) -> ShowPostUseCase:
    return ShowPostUseCase(post_repo=post_repo)


def get_create_post_use_case(
    post_repo: PostRepository = Depends(get_post_repository),
) -> CreatePostUseCase:
    return CreatePostUseCase(post_repo=post_repo)


def get_update_post_use_case(
    post_repo: PostRepository = Depends(get_post_repository),
) -> UpdatePostUseCase:
    return UpdatePostUseCase(post_repo=post_repo)


def get_delete_post_use_case(
    post_repo: PostRepository = Depends(get_post_repository),
) -> DeletePostUseCase:
    return DeletePostUseCase(post_repo=post_repo)


# --- Users ---


def get_sign_up_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> SignUpUseCase:
    return SignUpUseCase(user_repo=user_repo, hasher=hasher)


def get_sign_in_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenGenerator = Depends(get_token_generator),
) -> SignInUseCase:
    return SignInUseCase(user_repo=user_repo, hasher=hasher, tokens=tokens)


def get_sign_out_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
    tokens: TokenGenerator = Depends(get_token_generator),
) -> SignOutUseCase:
    return SignOutUseCase(user_repo=user_repo, tokens=tokens)


def get_change_password_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> ChangePasswordUseCase:
    return ChangePasswordUseCase(user_repo=user_repo, hasher=hasher)


def get_show_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> ShowUserUseCase:
    return ShowUserUseCase(user_repo=user_repo)


def get_update_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> UpdateUserUseCase:
    return UpdateUserUseCase(user_repo=user_repo)


def get_delete_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> DeleteUserUseCase:
    return DeleteUserUseCase(user_repo=user_repo)

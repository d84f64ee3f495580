"""
Tests for the post use cases.

Use cases run against in-memory fake repositories.
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from postboard.application.posts.create_post import CreatePostUseCase
from postboard.application.posts.delete_post import DeletePostUseCase
from postboard.application.posts.dtos import (
    CreatePostCommand,
    DeletePostCommand,
    ShowPostQuery,
    UpdatePostCommand,
)
from postboard.application.posts.get_my_latest_post import GetMyLatestPostUseCase
from postboard.application.posts.list_my_posts import ListMyPostsUseCase
from postboard.application.posts.list_posts import ListPostsUseCase
from postboard.application.posts.show_post import ShowPostUseCase
from postboard.application.posts.update_post import UpdatePostUseCase, clean_post_changes
from postboard.domain.entities import Post, User
from postboard.domain.errors import BadParamsError, DocumentNotFoundError, OwnershipError
from tests.fakes import FakePostRepository

BASE = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def _user(nickname: str) -> User:
    return User(
        id=uuid4(),
        email=f"{nickname}@example.com",
        hashed_password="x",
        nickname=nickname,
        created_at=BASE,
        updated_at=BASE,
    )


def _post(owner: User, title: str, minutes: int = 0) -> Post:
    at = BASE + timedelta(minutes=minutes)
    return Post(
        id=uuid4(),
        title=title,
        body="text",
        owner=owner.id,
        created_at=at,
        updated_at=at,
        owner_nickname=owner.nickname,
    )


@pytest.fixture
def alice() -> User:
    return _user("alice")


@pytest.fixture
def bob() -> User:
    return _user("bob")


class TestListPosts:

    def test_newest_first(self, alice: User, bob: User) -> None:
        repo = FakePostRepository(
            [_post(alice, "old", 0), _post(bob, "new", 10), _post(alice, "mid", 5)]
        )
        results = ListPostsUseCase(repo).execute()
        assert [r.title for r in results] == ["new", "mid", "old"]
        assert results[0].owner_nickname == "bob"

    def test_my_posts_filters_by_owner(self, alice: User, bob: User) -> None:
        repo = FakePostRepository(
            [_post(alice, "a1", 0), _post(bob, "b1", 1), _post(alice, "a2", 2)]
        )
        results = ListMyPostsUseCase(repo).execute(alice)
        assert [r.title for r in results] == ["a2", "a1"]
        assert all(r.owner_id == alice.id for r in results)

    def test_latest_post(self, alice: User, bob: User) -> None:
        repo = FakePostRepository([_post(alice, "a1", 0), _post(alice, "a2", 3), _post(bob, "b", 9)])
        result = GetMyLatestPostUseCase(repo).execute(alice)
        assert result is not None
        assert result.title == "a2"

    def test_latest_post_none_when_no_posts(self, alice: User, bob: User) -> None:
        repo = FakePostRepository([_post(bob, "b", 0)])
        assert GetMyLatestPostUseCase(repo).execute(alice) is None


class TestShowPost:

    def test_found(self, alice: User) -> None:
        post = _post(alice, "hello")
        result = ShowPostUseCase(FakePostRepository([post])).execute(
            ShowPostQuery(post_id=str(post.id))
        )
        assert result.id == post.id

    @pytest.mark.parametrize("raw_id", [str(uuid4()), "not-a-uuid", ""])
    def test_missing_or_malformed_id(self, raw_id: str) -> None:
        with pytest.raises(DocumentNotFoundError):
            ShowPostUseCase(FakePostRepository()).execute(ShowPostQuery(post_id=raw_id))


class TestCreatePost:

    def test_caller_becomes_owner(self, alice: User) -> None:
        repo = FakePostRepository()
        result = CreatePostUseCase(repo).execute(
            CreatePostCommand(caller=alice, title="  First  ", body="hi")
        )
        assert result.owner_id == alice.id
        assert result.title == "First"
        assert result.owner_nickname == "alice"
        assert repo.get_by_id(result.id) is not None

    def test_blank_title_rejected(self, alice: User) -> None:
        with pytest.raises(BadParamsError):
            CreatePostUseCase(FakePostRepository()).execute(
                CreatePostCommand(caller=alice, title="   ")
            )


class TestUpdatePost:

    def test_owner_can_update(self, alice: User) -> None:
        post = _post(alice, "draft")
        repo = FakePostRepository([post])
        result = UpdatePostUseCase(repo).execute(
            UpdatePostCommand(caller=alice, post_id=str(post.id), changes={"title": "final"})
        )
        assert result.title == "final"
        assert result.body == "text"

    def test_non_owner_rejected_before_write(self, alice: User, bob: User) -> None:
        post = _post(alice, "draft")
        repo = FakePostRepository([post])
        with pytest.raises(OwnershipError):
            UpdatePostUseCase(repo).execute(
                UpdatePostCommand(caller=bob, post_id=str(post.id), changes={"title": "hacked"})
            )
        assert repo.get_by_id(post.id).title == "draft"

    def test_owner_cannot_be_reassigned(self, alice: User, bob: User) -> None:
        post = _post(alice, "draft")
        repo = FakePostRepository([post])
        result = UpdatePostUseCase(repo).execute(
            UpdatePostCommand(
                caller=alice,
                post_id=str(post.id),
                changes={"owner": bob.id, "body": ""},
            )
        )
        assert result.owner_id == alice.id
        assert result.body == "text"

    def test_missing_post(self, alice: User) -> None:
        with pytest.raises(DocumentNotFoundError):
            UpdatePostUseCase(FakePostRepository()).execute(
                UpdatePostCommand(caller=alice, post_id=str(uuid4()), changes={"title": "x"})
            )

    def test_blank_title_rejected(self, alice: User) -> None:
        post = _post(alice, "draft")
        repo = FakePostRepository([post])
        with pytest.raises(BadParamsError):
            UpdatePostUseCase(repo).execute(
                UpdatePostCommand(caller=alice, post_id=str(post.id), changes={"title": "   "})
            )
        assert repo.get_by_id(post.id).title == "draft"

    def test_clean_post_changes(self) -> None:
        assert clean_post_changes(
            {"title": "", "body": "b", "owner": "x", "id": "y", "created_at": None}
        ) == {"body": "b"}
        assert clean_post_changes({"title": "  final "}) == {"title": "final"}


class TestDeletePost:

    def test_owner_can_delete(self, alice: User) -> None:
        post = _post(alice, "bye")
        repo = FakePostRepository([post])
        DeletePostUseCase(repo).execute(DeletePostCommand(caller=alice, post_id=str(post.id)))
        assert repo.get_by_id(post.id) is None

    def test_non_owner_cannot_delete(self, alice: User, bob: User) -> None:
        post = _post(alice, "keep")
        repo = FakePostRepository([post])
        with pytest.raises(OwnershipError):
            DeletePostUseCase(repo).execute(DeletePostCommand(caller=bob, post_id=str(post.id)))
        assert repo.get_by_id(post.id) is not None

    def test_missing_post(self, alice: User) -> None:
        with pytest.raises(DocumentNotFoundError):
            DeletePostUseCase(FakePostRepository()).execute(
                DeletePostCommand(caller=alice, post_id=str(uuid4()))
            )

"""Unit tests for row/domain mappers."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from feed.domain.error import ValidationError
from feed.domain.model import Comment, Like, Post
from feed.domain.value import (
    CommentId,
    CommentTarget,
    LikeableKind,
    LikeId,
    PostId,
    PostTarget,
    UserId,
    Visibility,
)
from feed.persistence.mappers import (
    comment_to_dict,
    like_to_dict,
    post_to_dict,
    row_to_comment,
    row_to_like,
    row_to_post,
)

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


class TestLikeMapping:
    """The tagged target is flattened to two columns and back."""

    def test_like_to_dict_flattens_target(self):
        comment_id = CommentId(uuid4())
        like = Like(
            id=LikeId(uuid4()),
            owner_id=UserId(uuid4()),
            target=CommentTarget(id=comment_id),
            created_at=NOW,
        )

        data = like_to_dict(like)

        assert data["likeable_kind"] == "comment"
        assert data["likeable_id"] == comment_id
        assert "target" not in data

    def test_row_to_like_builds_tagged_target(self):
        post_id = uuid4()
        row = {
            "id": str(uuid4()),
            "owner_id": str(uuid4()),
            "likeable_kind": "post",
            "likeable_id": str(post_id),
            "created_at": NOW,
        }

        like = row_to_like(row)

        assert isinstance(like.target, PostTarget)
        assert like.target.kind == LikeableKind.POST
        assert like.target.id == post_id

    def test_row_with_unknown_kind_rejected(self):
        row = {
            "id": uuid4(),
            "owner_id": uuid4(),
            "likeable_kind": "user",
            "likeable_id": uuid4(),
            "created_at": NOW,
        }

        with pytest.raises(ValidationError):
            row_to_like(row)


class TestPostMapping:
    def test_visibility_stored_as_plain_value(self):
        post = Post(
            id=PostId(uuid4()),
            owner_id=UserId(uuid4()),
            content="hello",
            visibility=Visibility.PRIVATE,
            created_at=NOW,
            updated_at=NOW,
        )

        data = post_to_dict(post)

        assert data["visibility"] == "private"
        assert row_to_post(data) == post


class TestCommentMapping:
    def test_reply_keeps_parent_and_depth(self):
        comment = Comment(
            id=CommentId(uuid4()),
            post_id=PostId(uuid4()),
            owner_id=UserId(uuid4()),
            parent_id=CommentId(uuid4()),
            content="reply",
            depth=1,
            created_at=NOW,
        )

        restored = row_to_comment(comment_to_dict(comment))

        assert restored == comment
        assert restored.is_reply

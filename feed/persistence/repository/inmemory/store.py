"""Shared backing store for the in-memory repositories."""

from dataclasses import dataclass, field

from feed.domain.model import Comment, Like, Post, User
from feed.domain.value import CommentId, PostId, UserId


@dataclass
class InMemoryStore:
    """Tables held in plain Python containers.

    Repositories built on the same store see each other's writes, the way
    repositories sharing a database do.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    posts: dict[PostId, Post] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    likes: list[Like] = field(default_factory=list)

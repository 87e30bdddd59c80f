"""Unit tests for domain error to HTTP translation."""

import pytest

from feed.adapter.error import MediaStorageError
from feed.domain.error import (
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from feed.interface.error import http_error, invalid_identifier, storage_error


@pytest.mark.parametrize(
    ("error", "status_code"),
    [
        (ValidationError("Post content must not be empty"), 422),
        (AuthorizationError("post", "p1", "u1"), 403),
        (NotFoundError("Post", "p1"), 404),
        (ConflictError("The email has already been taken."), 409),
        (DomainError("something else"), 400),
    ],
)
def test_status_codes(error, status_code):
    assert http_error(error, "Test").status_code == status_code


def test_authorization_detail_hides_ids():
    exc = http_error(AuthorizationError("post", "p1", "u1"), "Post update")

    assert exc.detail == "Unauthorized"


def test_not_found_detail_names_resource():
    exc = http_error(NotFoundError("Post", "p1"), "Post lookup")

    assert exc.detail == "Post not found: p1"


def test_invalid_identifier_is_bad_request():
    exc = invalid_identifier(ValueError("badly formed hexadecimal UUID string"))

    assert exc.status_code == 400


def test_storage_error_is_service_unavailable():
    exc = storage_error(MediaStorageError("Could not store cat.png"), "Post creation")

    assert exc.status_code == 503
    assert exc.detail == "Media storage is unavailable"

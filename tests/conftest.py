"""
Shared fixtures for django-miniblog tests.
"""
import pytest
from django.contrib.auth import get_user_model

from miniblog.models import Comment, Post

User = get_user_model()


@pytest.fixture
def user(db):
    """The author of the `post` fixture."""
    return User.objects.create_user(
        username="alice",
        email="alice@example.com",
        password="testpass123",
        first_name="Alice",
        last_name="Author",
    )


@pytest.fixture
def other_user(db):
    """A second user who owns nothing by default."""
    return User.objects.create_user(
        username="bob",
        email="bob@example.com",
        password="testpass123",
    )


@pytest.fixture
def post(db, user):
    return Post.objects.create(
        title="Hello",
        body="World",
        author=user,
    )


@pytest.fixture
def comment(db, post, other_user):
    """A comment on `post` written by `other_user`."""
    return Comment.objects.create(
        post=post,
        author=other_user,
        body="Nice post!",
    )

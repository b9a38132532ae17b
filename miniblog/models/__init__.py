"""
Models for django-miniblog.

All models are importable from miniblog.models:

    from miniblog.models import Post, Comment
"""
from .posts import Post
from .comments import Comment

__all__ = [
    "Post",
    "Comment",
]

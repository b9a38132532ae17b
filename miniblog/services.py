"""
Post and comment operations for django-miniblog.

Views call these functions instead of touching the ORM directly. They
raise Django's own exceptions so the usual handlers apply:

- ``ValidationError`` with a ``message_dict`` when a field is invalid;
  nothing has been written when it is raised.
- ``PermissionDenied`` when the actor does not own the resource.
- ``Http404`` when the post or comment does not exist.
"""
import logging

from django.core.exceptions import PermissionDenied
from django.core.paginator import Paginator
from django.db import transaction
from django.shortcuts import get_object_or_404

from .conf import blog_settings
from .models import Comment, Post
from .permissions import (
    can_change_post,
    can_comment,
    can_create_post,
    can_delete_comment,
    can_delete_post,
)

logger = logging.getLogger(__name__)


def _clean_text(value):
    return (value or "").strip()


def _paginate(queryset, page, page_size):
    return Paginator(queryset, page_size).get_page(page)


def _deny(actor, action, resource):
    logger.warning(
        "User %s may not %s %s %s",
        getattr(actor, "pk", None),
        action,
        resource._meta.model_name,
        resource.pk,
    )
    raise PermissionDenied(f"You may not {action} this {resource._meta.verbose_name}.")


# Posts


def list_posts(page=1, page_size=None):
    """Return a page of posts, newest first, with authors loaded."""
    queryset = Post.objects.select_related("author")
    return _paginate(queryset, page, page_size or blog_settings.POSTS_PER_PAGE)


def create_post(actor, title, body):
    """Validate and save a new post owned by `actor`."""
    if not can_create_post(actor):
        raise PermissionDenied("You must be logged in to create posts.")

    post = Post(author=actor, title=_clean_text(title), body=_clean_text(body))
    post.full_clean()
    post.save()

    logger.info("Post %s created by user %s", post.pk, actor.pk)
    return post


def get_post(post_id):
    return get_object_or_404(Post.objects.select_related("author"), pk=post_id)


def update_post(actor, post_id, title, body):
    """Replace the title and body of a post owned by `actor`."""
    post = get_post(post_id)
    if not can_change_post(actor, post):
        _deny(actor, "change", post)

    post.title = _clean_text(title)
    post.body = _clean_text(body)
    post.full_clean()
    post.save()

    logger.info("Post %s updated by user %s", post.pk, actor.pk)
    return post


def delete_post(actor, post_id):
    """
    Delete a post owned by `actor` together with all of its comments.

    The comments are removed explicitly in the same transaction as the
    post. Returns the number of comments deleted.
    """
    post = get_post(post_id)
    if not can_delete_post(actor, post):
        _deny(actor, "delete", post)

    with transaction.atomic():
        removed, _ = Comment.objects.filter(post=post).delete()
        post.delete()

    logger.info(
        "Post %s deleted by user %s (%s comments removed)",
        post_id,
        actor.pk,
        removed,
    )
    return removed


# Comments


def list_comments(post_id, page=1, page_size=None):
    """Return a page of a post's comments, newest first."""
    queryset = Comment.objects.filter(post_id=post_id).select_related("author")
    return _paginate(queryset, page, page_size or blog_settings.COMMENTS_PER_PAGE)


def create_comment(actor, post_id, body):
    """Validate and save a comment by `actor` on an existing post."""
    if not can_comment(actor):
        raise PermissionDenied("You must be logged in to comment.")

    post = get_object_or_404(Post, pk=post_id)
    comment = Comment(post=post, author=actor, body=_clean_text(body))
    comment.full_clean()
    comment.save()

    logger.info("Comment %s added to post %s by user %s", comment.pk, post.pk, actor.pk)
    return comment


def delete_comment(actor, post_id, comment_id):
    """Delete a comment; only its own author may do so."""
    comment = get_object_or_404(Comment, pk=comment_id, post_id=post_id)
    if not can_delete_comment(actor, comment):
        _deny(actor, "delete", comment)

    comment.delete()
    logger.info("Comment %s on post %s deleted by user %s", comment_id, post_id, actor.pk)

"""
Template filters exposing the ownership checks.

    {% load miniblog_tags %}
    {% if post|editable_by:user %}...{% endif %}
    {% if comment|deletable_by:user %}...{% endif %}
"""
from django import template

from ..models import Comment, Post
from ..permissions import can_change_post, can_delete_comment, can_delete_post

register = template.Library()


@register.filter
def editable_by(post, user):
    return can_change_post(user, post)


@register.filter
def deletable_by(resource, user):
    if isinstance(resource, Post):
        return can_delete_post(user, resource)
    if isinstance(resource, Comment):
        return can_delete_comment(user, resource)
    return False

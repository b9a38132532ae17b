"""
Post model for django-miniblog.
"""
from django.conf import settings
from django.db import models
from django.urls import reverse
from django.utils import timezone

from ..rendering import render_markdown


def display_name(user):
    """Return the name shown next to a user's posts and comments."""
    return user.get_full_name() or user.get_username()


class Post(models.Model):
    """
    Blog post written in Markdown.

    `body_html` is derived from `body` on every save and is the only
    form of the body that templates should output unescaped.
    """

    title = models.CharField(max_length=255)
    body = models.TextField(help_text="Markdown source")
    body_html = models.TextField(
        blank=True,
        editable=False,
        help_text="Sanitized HTML rendered from body",
    )

    # Author - uses Django's AUTH_USER_MODEL
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="miniblog_posts",
    )

    # Timestamps
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["author", "-created_at"], name="miniblog_post_author_idx"),
        ]

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        self.body_html = render_markdown(self.body)

        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "body" in update_fields:
            kwargs["update_fields"] = {*update_fields, "body_html"}

        super().save(*args, **kwargs)

    def get_absolute_url(self):
        return reverse("miniblog:post_detail", kwargs={"pk": self.pk})

    def get_comments_url(self):
        return self.get_absolute_url() + "#comments"

    @property
    def author_name(self):
        return display_name(self.author)

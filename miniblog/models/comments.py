"""
Comment model for django-miniblog.
"""
from django.conf import settings
from django.db import models
from django.urls import reverse
from django.utils import timezone

from .posts import display_name


class Comment(models.Model):
    """Short plain-text comment on a post."""

    post = models.ForeignKey(
        "miniblog.Post",
        on_delete=models.CASCADE,
        related_name="comments",
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="miniblog_comments",
    )
    body = models.CharField(max_length=255)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["post", "-created_at"], name="miniblog_comment_post_idx"),
        ]

    def __str__(self):
        return f"Comment by {self.author} on {self.post}"

    def get_absolute_url(self):
        return reverse("miniblog:post_detail", kwargs={"pk": self.post_id}) + "#comments"

    @property
    def preview(self):
        """Return truncated body for admin display."""
        if len(self.body) > 100:
            return self.body[:100] + "..."
        return self.body

    @property
    def author_name(self):
        return display_name(self.author)

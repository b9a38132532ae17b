"""
Django admin configuration for miniblog.
"""
from django.contrib import admin

from .models import Comment, Post


class CommentInline(admin.TabularInline):
    """Inline for reviewing comments on a post."""

    model = Comment
    extra = 0
    raw_id_fields = ["author"]
    fields = ["author", "body", "created_at"]
    readonly_fields = ["created_at"]


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ["title_preview", "author", "comment_count", "created_at", "updated_at"]
    list_filter = ["created_at"]
    search_fields = ["title", "body", "author__username"]
    raw_id_fields = ["author"]
    date_hierarchy = "created_at"
    inlines = [CommentInline]
    readonly_fields = ["body_html", "updated_at"]

    fieldsets = (
        (None, {
            "fields": ("title", "body", "author")
        }),
        ("Rendered", {
            "fields": ("body_html",),
            "classes": ("collapse",),
        }),
        ("Metadata", {
            "fields": ("created_at", "updated_at"),
            "classes": ("collapse",),
        }),
    )

    @admin.display(description="Title")
    def title_preview(self, obj):
        """Truncated title for list display."""
        return obj.title[:60] + "..." if len(obj.title) > 60 else obj.title

    @admin.display(description="Comments")
    def comment_count(self, obj):
        return obj.comments.count()


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ["preview", "author", "post", "created_at"]
    list_filter = ["created_at"]
    search_fields = ["body", "author__username", "post__title"]
    raw_id_fields = ["post", "author"]
    readonly_fields = ["created_at"]

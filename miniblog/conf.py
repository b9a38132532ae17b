"""
Configuration settings for django-miniblog.

Override these in your Django settings.py:

    MINIBLOG = {
        'POSTS_PER_PAGE': 20,
        'MARKDOWN_ALLOWED_SCHEMES': ['https'],
        ...
    }
"""
from django.conf import settings

DEFAULTS = {
    # Pagination
    "POSTS_PER_PAGE": 10,
    "COMMENTS_PER_PAGE": 10,

    # Markdown rendering
    "MARKDOWN_EXTENSIONS": ["fenced_code", "tables", "sane_lists"],
    "MARKDOWN_ALLOWED_TAGS": [
        "p", "br", "hr",
        "h1", "h2", "h3", "h4", "h5", "h6",
        "ul", "ol", "li",
        "strong", "em", "b", "i",
        "code", "pre", "blockquote",
        "table", "thead", "tbody", "tr", "th", "td",
        "a", "img",
    ],
    "MARKDOWN_ALLOWED_SCHEMES": ["http", "https", "mailto"],

    # seed_blog management command
    "SEED_POSTS": 30,
    "SEED_COMMENTS_PER_POST": 15,
}


class MiniblogSettings:
    """
    Lazy settings object that reads from Django settings.

    Access via: from miniblog.conf import blog_settings
    """

    def __getattr__(self, name):
        if name not in DEFAULTS:
            raise AttributeError(f"Invalid miniblog setting: {name}")

        user_settings = getattr(settings, "MINIBLOG", {})
        return user_settings.get(name, DEFAULTS[name])


blog_settings = MiniblogSettings()

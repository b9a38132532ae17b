"""
django-miniblog - a small Django blog app.

Features:
- Markdown posts rendered to sanitized HTML on save
- Comments scoped to a post, newest first
- Ownership-based permissions for editing and deleting
"""

__version__ = "0.1.0"

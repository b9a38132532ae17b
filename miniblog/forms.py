"""
Forms for the miniblog views.

The services run the same model validation again before saving; the
forms exist so a failed submission can be re-rendered with per-field
errors and the values the user typed.
"""
from django import forms

from .models import Comment, Post


class PostForm(forms.ModelForm):
    class Meta:
        model = Post
        fields = ["title", "body"]
        widgets = {
            "body": forms.Textarea(attrs={"rows": 20}),
        }
        labels = {
            "body": "Content",
        }


class CommentForm(forms.ModelForm):
    class Meta:
        model = Comment
        fields = ["body"]
        widgets = {
            "body": forms.Textarea(attrs={"rows": 5}),
        }
        labels = {
            "body": "Comment",
        }

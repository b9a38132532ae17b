"""
URL configuration for django-miniblog.

Include in your project urls.py:

    path('', include('miniblog.urls')),
"""
from django.urls import path

from . import views

app_name = "miniblog"

urlpatterns = [
    # Posts
    path("posts/", views.PostListView.as_view(), name="post_list"),
    path("posts/new/", views.PostCreateView.as_view(), name="post_create"),
    path("posts/<int:pk>/", views.PostDetailView.as_view(), name="post_detail"),
    path("posts/<int:pk>/edit/", views.PostUpdateView.as_view(), name="post_update"),

    # Comments
    path("posts/<int:pk>/comments/", views.CommentListView.as_view(), name="comment_list"),
    path(
        "posts/<int:pk>/comments/<int:comment_pk>/",
        views.CommentDetailView.as_view(),
        name="comment_detail",
    ),
]

"""
Views for django-miniblog.
"""
from django.contrib import messages
from django.contrib.auth.mixins import AccessMixin, LoginRequiredMixin
from django.core.exceptions import PermissionDenied, ValidationError
from django.http import QueryDict
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views import View

from . import services
from .forms import CommentForm, PostForm
from .permissions import can_change_post


class MethodOverrideMixin:
    """
    Let HTML forms reach put() and delete() handlers.

    Browsers only submit GET and POST, so a POST carrying
    ``_method=PUT`` (or DELETE) is dispatched as that method. Submitted
    fields end up in ``self.form_data`` whichever way the request came
    in, since Django only parses the body of real POST requests.
    """

    override_methods = ("put", "delete")

    def dispatch(self, request, *args, **kwargs):
        if request.method == "POST":
            self.form_data = request.POST
            override = request.POST.get("_method", "").lower()
            if override in self.override_methods:
                request.method = override.upper()
        else:
            self.form_data = self.parse_body(request)
        return super().dispatch(request, *args, **kwargs)

    def parse_body(self, request):
        if request.method != "PUT":
            return QueryDict()
        if request.content_type == "multipart/form-data":
            data, _files = request.parse_file_upload(request.META, request)
            return data
        if request.content_type == "application/x-www-form-urlencoded":
            return QueryDict(request.body, encoding=request.encoding)
        return QueryDict()


def render_post_detail(request, post, comment_form=None):
    """Render a post with one page of its comments."""
    comments = services.list_comments(post.pk, request.GET.get("comments_page"))
    return render(
        request,
        "miniblog/post_detail.html",
        {
            "post": post,
            "comments": comments,
            "comment_form": comment_form or CommentForm(),
        },
    )


def get_owned_post(request, pk):
    """Fetch a post the current user may edit, or raise 404/403."""
    post = services.get_post(pk)
    if not can_change_post(request.user, post):
        raise PermissionDenied("You may not change this post.")
    return post


class PostFormMixin:
    template_name = "miniblog/post_form.html"

    def render_form(self, form, post=None):
        return render(self.request, self.template_name, {"form": form, "post": post})


class PostListView(AccessMixin, PostFormMixin, View):
    """List posts (GET) and create a post (POST)."""

    def get(self, request):
        page = services.list_posts(request.GET.get("page"))
        return render(
            request,
            "miniblog/post_list.html",
            {
                "posts": page.object_list,
                "page_obj": page,
                "paginator": page.paginator,
                "is_paginated": page.has_other_pages(),
            },
        )

    def post(self, request):
        if not request.user.is_authenticated:
            return self.handle_no_permission()

        form = PostForm(request.POST)
        if form.is_valid():
            try:
                post = services.create_post(
                    request.user,
                    form.cleaned_data["title"],
                    form.cleaned_data["body"],
                )
            except ValidationError as exc:
                form.add_error(None, exc)
            else:
                messages.success(request, "Post created.")
                return redirect(post)
        return self.render_form(form)


class PostCreateView(LoginRequiredMixin, PostFormMixin, View):
    """Show the empty post form."""

    def get(self, request):
        return self.render_form(PostForm())


class PostDetailView(MethodOverrideMixin, AccessMixin, PostFormMixin, View):
    """Show (GET), update (PUT) or delete (DELETE) a single post."""

    def get(self, request, pk):
        return render_post_detail(request, services.get_post(pk))

    def put(self, request, pk):
        if not request.user.is_authenticated:
            return self.handle_no_permission()

        post = get_owned_post(request, pk)
        form = PostForm(self.form_data)
        if form.is_valid():
            try:
                post = services.update_post(
                    request.user,
                    pk,
                    form.cleaned_data["title"],
                    form.cleaned_data["body"],
                )
            except ValidationError as exc:
                form.add_error(None, exc)
            else:
                messages.success(request, "Post updated.")
                return redirect(post)
        return self.render_form(form, post=post)

    def delete(self, request, pk):
        if not request.user.is_authenticated:
            return self.handle_no_permission()

        services.delete_post(request.user, pk)
        messages.success(request, "Post deleted.")
        return redirect("miniblog:post_list")


class PostUpdateView(LoginRequiredMixin, PostFormMixin, View):
    """Show the edit form for a post the user owns."""

    def get(self, request, pk):
        post = get_owned_post(request, pk)
        return self.render_form(PostForm(instance=post), post=post)


class CommentListView(LoginRequiredMixin, View):
    """Add a comment to a post."""

    def post(self, request, pk):
        post = services.get_post(pk)
        form = CommentForm(request.POST)
        if form.is_valid():
            try:
                services.create_comment(request.user, post.pk, form.cleaned_data["body"])
            except ValidationError as exc:
                form.add_error(None, exc)
            else:
                messages.success(request, "Comment added.")
                return redirect(post.get_comments_url())
        return render_post_detail(request, post, comment_form=form)


class CommentDetailView(MethodOverrideMixin, LoginRequiredMixin, View):
    """Delete a comment."""

    http_method_names = ["delete", "options"]

    def delete(self, request, pk, comment_pk):
        services.delete_comment(request.user, pk, comment_pk)
        messages.success(request, "Comment deleted.")
        return redirect(reverse("miniblog:post_detail", kwargs={"pk": pk}) + "#comments")

"""
Views for django-blog-cms.
"""
import logging

from django.conf import settings
from django.contrib import auth, messages
from django.http import Http404, JsonResponse
from django.shortcuts import redirect, resolve_url
from django.urls import reverse_lazy
from django.views import View
from django.views.generic import FormView, TemplateView

from .conf import blog_settings
from .editing import PostEditor
from .exceptions import BlogError, NotFound, UploadFailed, ValidationError
from .forms import EDITOR_FIELDS, PostForm, initial_from_post
from .gate import AdminRequiredMixin
from .rendering import dashboard_stats, listing_meta, render_card, render_detail
from .repository import PostRepository
from .uploads import ImageUploader, content_image_path

logger = logging.getLogger(__name__)


class RepositoryMixin:
    """Build the post repository and image uploader for a request."""

    def get_repository(self):
        return PostRepository()

    def get_uploader(self):
        return ImageUploader()


class PostListView(RepositoryMixin, TemplateView):
    """Public listing of published posts, newest first."""

    template_name = "blog_cms/post_list.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        try:
            posts = self.get_repository().list_published()
        except BlogError as exc:
            logger.warning("Listing published posts failed: %s", exc)
            posts = []
        context.update(listing_meta())
        context["site_name"] = blog_settings.SITE_NAME
        context["site_description"] = blog_settings.SITE_DESCRIPTION
        context["cards"] = [render_card(post) for post in posts]
        return context


class PostDetailView(RepositoryMixin, TemplateView):
    """A single published post."""

    template_name = "blog_cms/post_detail.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        try:
            post = self.get_repository().get_published_by_slug(self.kwargs["slug"])
        except BlogError as exc:
            logger.warning("Loading post %r failed: %s", self.kwargs["slug"], exc)
            raise Http404("Post not found") from exc
        if post is None:
            raise Http404("Post not found")

        context.update(render_detail(post))
        return context


class DashboardView(AdminRequiredMixin, RepositoryMixin, TemplateView):
    """Admin dashboard listing every post with counts."""

    template_name = "blog_cms/admin/dashboard.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        try:
            posts = self.get_repository().list_all()
        except BlogError as exc:
            logger.warning("Listing posts for dashboard failed: %s", exc)
            messages.error(self.request, "Error fetching blog posts")
            posts = []
        context["cards"] = [render_card(post, admin=True) for post in posts]
        context["stats"] = dashboard_stats(posts)
        return context


class PostEditMixin(AdminRequiredMixin, RepositoryMixin):
    """Shared create/edit flow driving a PostEditor from PostForm."""

    form_class = PostForm
    template_name = "blog_cms/admin/post_form.html"
    success_url = reverse_lazy("blog_cms:dashboard")
    object = None

    def get_initial(self):
        if self.object is None:
            return super().get_initial()
        return initial_from_post(self.object)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["post"] = self.object
        context["is_new"] = self.object is None
        return context

    def form_valid(self, form):
        editor = PostEditor(self.get_repository(), self.get_uploader(), post=self.object)
        for name in form.changed_data:
            if name in EDITOR_FIELDS:
                editor.set(name, form.cleaned_data[name])

        try:
            cover_file = form.cleaned_data.get("cover_file")
            cover_url = form.cleaned_data.get("cover_url")
            if cover_file:
                editor.upload_cover(cover_file.read(), cover_file.name)
            elif cover_url:
                editor.upload_cover_from_url(cover_url)
        except UploadFailed:
            messages.error(self.request, "Failed to upload cover image. Please try again.")
            return self.form_invalid(form)

        try:
            post_id = editor.submit()
        except ValidationError as exc:
            form.add_error(exc.field if exc.field in form.fields else None, str(exc))
            return self.form_invalid(self._keep_cover(form, editor))
        except BlogError:
            messages.error(self.request, "Failed to save blog post. Please try again.")
            return self.form_invalid(self._keep_cover(form, editor))

        if post_id is None:
            messages.info(self.request, "No changes to save.")
            return self.form_invalid(form)

        messages.success(self.request, "Blog post saved.")
        return redirect(self.get_success_url())

    def _keep_cover(self, form, editor):
        """Carry an already uploaded cover into the re-rendered form."""
        if "cover_image" in editor.changed:
            form.data = form.data.copy()
            form.data["cover_image"] = editor["cover_image"]
            form.data["cover_url"] = ""
        return form


class PostCreateView(PostEditMixin, FormView):
    """Create a new post."""


class PostUpdateView(PostEditMixin, FormView):
    """Edit an existing post."""

    def dispatch(self, request, *args, **kwargs):
        if request.user.is_authenticated:
            self.object = self._load_post(kwargs["post_id"])
        return super().dispatch(request, *args, **kwargs)

    def _load_post(self, post_id):
        try:
            post = self.get_repository().get_by_id(post_id)
        except BlogError as exc:
            logger.warning("Loading post %s for edit failed: %s", post_id, exc)
            raise Http404("Post not found") from exc
        if post is None:
            raise Http404("Post not found")
        return post


class PostDeleteView(AdminRequiredMixin, RepositoryMixin, View):
    """Delete a post from the dashboard."""

    def post(self, request, post_id):
        try:
            self.get_repository().delete(post_id)
        except NotFound:
            messages.error(request, "Blog post not found")
        except BlogError as exc:
            logger.warning("Deleting post %s failed: %s", post_id, exc)
            messages.error(request, "Error deleting blog post")
        else:
            messages.success(request, "Blog post deleted successfully")
        return redirect("blog_cms:dashboard")


class ImageUploadView(AdminRequiredMixin, RepositoryMixin, View):
    """Upload an image for the rich-text editor and return its URL."""

    def post(self, request):
        image = request.FILES.get("image")
        if image is None:
            return JsonResponse({"error": "Image file required"}, status=400)

        try:
            url = self.get_uploader().upload(image.read(), content_image_path(image.name))
        except UploadFailed:
            return JsonResponse({"error": "Image upload failed"}, status=502)

        return JsonResponse({"url": url})


class LogoutView(AdminRequiredMixin, View):
    """Sign out and leave the admin surface."""

    def post(self, request):
        self.admin_session.sign_out(lambda: auth.logout(request))
        return redirect(resolve_url(settings.LOGIN_URL))

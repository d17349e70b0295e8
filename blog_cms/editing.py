"""
Form editing surface for posts.

A PostEditor holds an in-progress edit as local state and writes it
through the repository on submit. It is a per-request object; nothing is
shared between editors.
"""
import logging

from .conf import blog_settings
from .exceptions import BlogError, UploadFailed
from .schemas import PostStatus
from .text import slugify
from .uploads import cover_image_path

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    "title",
    "slug",
    "content",
    "meta_title",
    "meta_description",
    "cover_image",
    "status",
)


class PostEditor:
    """
    In-progress edit of one post.

    Args:
        repository: PostRepository used on submit
        uploader: ImageUploader for cover images
        post: existing Post to edit, or None for a new post
    """

    def __init__(self, repository, uploader=None, post=None):
        self.repository = repository
        self.uploader = uploader
        self.post_id = post.id if post is not None else None
        self.values = {
            "title": "",
            "slug": "",
            "content": "",
            "meta_title": "",
            "meta_description": "",
            "cover_image": "",
            "status": PostStatus.DRAFT,
        }
        if post is not None:
            self.values.update({name: getattr(post, name) for name in EDITABLE_FIELDS})
        self.changed = set()
        self.dirty = False
        self.error = None
        self.upload_error = None

    @property
    def is_new(self):
        return self.post_id is None

    def __getitem__(self, name):
        return self.values[name]

    def set(self, name, value):
        """Change one field and mark the edit dirty."""
        if name not in EDITABLE_FIELDS:
            raise KeyError(name)
        if name == "status":
            value = PostStatus(value)
        elif name == "cover_image":
            self.upload_error = None

        self.values[name] = value
        self.changed.add(name)
        self.dirty = True

        if name == "title":
            self._fill_slug()

    def upload_cover(self, data, filename):
        """Upload a cover image file and use its URL."""
        return self._upload(lambda: self.uploader.upload(data, cover_image_path(filename)))

    def upload_cover_from_url(self, url):
        """Copy a remote image into storage and use it as the cover."""
        return self._upload(lambda: self.uploader.upload_from_url(url))

    def submit(self):
        """
        Write the edit through the repository.

        Returns:
            The post id, or None when there was nothing to save

        Raises:
            UploadFailed: a cover upload failed and has not been replaced
            BlogError: the repository write failed; state is kept for retry
        """
        if not self.dirty:
            return None
        if self.upload_error is not None:
            self.error = self.upload_error
            raise UploadFailed(self.upload_error)

        self._fill_slug()
        try:
            if self.is_new:
                self.post_id = self.repository.create(self._payload(EDITABLE_FIELDS))
            else:
                self.repository.update(self.post_id, self._payload(self.changed))
        except BlogError as exc:
            self.error = str(exc)
            logger.warning("Saving post %s failed: %s", self.post_id or "(new)", exc)
            raise

        self.changed.clear()
        self.dirty = False
        self.error = None
        return self.post_id

    def _upload(self, upload):
        try:
            url = upload()
        except UploadFailed as exc:
            self.upload_error = str(exc)
            self.error = self.upload_error
            raise
        self.set("cover_image", url)
        self.error = None
        return url

    def _fill_slug(self):
        if self.values["title"] and not self.values["slug"]:
            slug = slugify(self.values["title"], max_length=blog_settings.SLUG_MAX_LENGTH)
            if slug:
                self.values["slug"] = slug
                self.changed.add("slug")

    def _payload(self, names):
        return {name: self.values[name] for name in names}

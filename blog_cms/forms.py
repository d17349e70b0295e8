"""
HTML form binding for the post editor.
"""
from django import forms
from django.core.validators import validate_slug

from .schemas import PostStatus

STATUS_CHOICES = [
    (PostStatus.DRAFT.value, "Draft"),
    (PostStatus.PUBLISHED.value, "Published"),
]

# Fields written straight into the editor; the cover upload fields are
# handled through the image upload adapter instead.
EDITOR_FIELDS = [
    "title",
    "slug",
    "content",
    "meta_title",
    "meta_description",
    "cover_image",
    "status",
]


class PostForm(forms.Form):
    title = forms.CharField(
        max_length=255,
        widget=forms.TextInput(attrs={"placeholder": "Enter blog post title"}),
    )
    slug = forms.CharField(
        max_length=255,
        required=False,
        validators=[validate_slug],
        help_text="Generated from the title when left blank.",
        widget=forms.TextInput(attrs={"placeholder": "Enter URL slug"}),
    )
    content = forms.CharField(
        required=False,
        widget=forms.Textarea(attrs={"class": "rich-text-editor", "rows": 20}),
    )
    meta_title = forms.CharField(
        max_length=255,
        required=False,
        widget=forms.TextInput(attrs={"placeholder": "Enter meta title for SEO"}),
    )
    meta_description = forms.CharField(
        required=False,
        widget=forms.Textarea(attrs={"placeholder": "Enter meta description for SEO", "rows": 3}),
    )
    cover_image = forms.CharField(
        max_length=2000,
        required=False,
        widget=forms.HiddenInput,
    )
    cover_file = forms.FileField(required=False, label="Cover image")
    cover_url = forms.URLField(
        required=False,
        assume_scheme="https",
        label="Or paste image URL",
    )
    status = forms.ChoiceField(choices=STATUS_CHOICES, initial=PostStatus.DRAFT.value)

    def clean_title(self):
        title = self.cleaned_data["title"]
        if not title.strip():
            raise forms.ValidationError("Title is required.")
        return title


def initial_from_post(post):
    """Initial form data for editing an existing Post."""
    return {
        "title": post.title,
        "slug": post.slug,
        "content": post.content,
        "meta_title": post.meta_title,
        "meta_description": post.meta_description,
        "cover_image": post.cover_image,
        "status": post.status.value,
    }

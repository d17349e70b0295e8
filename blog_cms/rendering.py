"""
Post rendering pipeline.

Turns Post objects into template context for the public detail page and
the listing cards. Output depends only on the post and settings, never on
the process locale or the wall clock.

Post content is author-trusted HTML. It is marked safe and rendered
verbatim, without sanitization.
"""
from django.urls import reverse
from django.utils import dateformat, translation
from django.utils.safestring import mark_safe
from django.utils.text import Truncator

from .conf import blog_settings
from .schemas import PostStatus


def format_date(value):
    """Format a date as en-US long form, e.g. 'October 19, 2026'."""
    with translation.override("en"):
        return dateformat.format(value, "F j, Y")


def canonical_url(post, site_url=None):
    """Absolute URL of the public detail page for post."""
    if site_url is None:
        site_url = blog_settings.site_url
    return f"{site_url.rstrip('/')}{reverse('blog_cms:post_detail', kwargs={'slug': post.slug})}"


def meta_tags(post, url):
    """
    Head tags for search and social previews.

    Returns:
        List of dicts with either 'name' or 'property' plus 'content'
    """
    title = post.meta_title or post.title
    tags = [
        {"name": "description", "content": post.meta_description},
        {"property": "og:title", "content": title},
        {"property": "og:description", "content": post.meta_description},
        {"property": "og:type", "content": "article"},
        {"property": "og:url", "content": url},
    ]
    if post.cover_image:
        tags.append({"property": "og:image", "content": post.cover_image})

    tags.extend([
        {"name": "twitter:card", "content": "summary_large_image"},
        {"name": "twitter:title", "content": title},
        {"name": "twitter:description", "content": post.meta_description},
    ])
    if post.cover_image:
        tags.append({"name": "twitter:image", "content": post.cover_image})

    tags.extend([
        {"property": "article:published_time", "content": post.created_at.isoformat()},
        {"property": "article:modified_time", "content": post.updated_at.isoformat()},
    ])
    return tags


def render_detail(post, site_url=None):
    """Template context for the public detail page of post."""
    url = canonical_url(post, site_url)
    show_updated = post.updated_at != post.created_at
    return {
        "post": post,
        "page_title": post.meta_title or post.title,
        "meta_description": post.meta_description,
        "canonical_url": url,
        "meta_tags": meta_tags(post, url),
        "created_display": format_date(post.created_at),
        "created_iso": post.created_at.isoformat(),
        "show_updated": show_updated,
        "updated_display": format_date(post.updated_at) if show_updated else "",
        # Author-trusted input, not sanitized.
        "content": mark_safe(post.content),
    }


def render_card(post, admin=False):
    """Template context for a listing card; the status badge is admin-only."""
    card = {
        "id": post.id,
        "title": post.title,
        "slug": post.slug,
        "cover_image": post.cover_image,
        "description": Truncator(post.meta_description).chars(blog_settings.CARD_DESCRIPTION_LENGTH),
        "date_display": format_date(post.created_at),
        "url": reverse("blog_cms:post_detail", kwargs={"slug": post.slug}),
        "admin": admin,
    }
    if admin:
        card["status"] = post.status.value
        card["is_published"] = post.is_published
        card["edit_url"] = reverse("blog_cms:post_update", kwargs={"post_id": post.id})
        card["delete_url"] = reverse("blog_cms:post_delete", kwargs={"post_id": post.id})
    return card


def listing_meta(site_url=None):
    """Context for the public listing page head."""
    if site_url is None:
        site_url = blog_settings.site_url
    title = f"{blog_settings.SITE_NAME} - Latest Posts"
    description = blog_settings.SITE_DESCRIPTION
    return {
        "page_title": title,
        "meta_description": description,
        "meta_tags": [
            {"name": "description", "content": description},
            {"property": "og:title", "content": title},
            {"property": "og:description", "content": description},
            {"property": "og:type", "content": "website"},
            {"property": "og:url", "content": site_url or "/"},
        ],
    }


def dashboard_stats(posts):
    """Count total, published and draft posts."""
    published = sum(1 for post in posts if post.status == PostStatus.PUBLISHED)
    return {
        "total": len(posts),
        "published": published,
        "drafts": len(posts) - published,
    }

"""
Text helpers for django-blog-cms.
"""
import re
import unicodedata

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(value, max_length=None):
    """
    Convert text to a lowercase, hyphen-separated, URL-safe slug.

    Diacritics are stripped, every run of non-alphanumeric characters
    (underscores included) becomes one hyphen, and leading/trailing
    hyphens are removed. Uniqueness is the caller's concern.

    Args:
        value: arbitrary text
        max_length: optional maximum slug length

    Returns:
        Slug string, possibly empty

    Examples:
        >>> slugify("Hello, World!")
        'hello-world'
        >>> slugify("Crème brûlée")
        'creme-brulee'
    """
    value = unicodedata.normalize("NFKD", str(value))
    value = value.encode("ascii", "ignore").decode("ascii").lower()
    slug = _NON_ALNUM.sub("-", value).strip("-")
    if max_length is not None:
        slug = slug[:max_length].rstrip("-")
    return slug

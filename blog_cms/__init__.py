"""
django-blog-cms - A minimal blog CMS for Django.

Features:
- Posts stored as validated JSON documents behind a swappable document store
- Public post listing and detail pages with SEO and social meta tags
- Authenticated admin panel to create, edit and delete posts
- Cover and inline image uploads through any Django storage backend
- Slug generation from titles
"""

__version__ = "0.1.0"
__author__ = "Nestor Wheelock"

"""
Django admin configuration for blog_cms.

Exposes raw documents for inspection; editing posts goes through the
blog admin panel so validation and timestamps stay in the repository.
"""
from django.contrib import admin
from django.utils.html import format_html

from .models import Document


@admin.register(Document)
class DocumentAdmin(admin.ModelAdmin):
    list_display = ["key", "collection", "title_preview", "status_badge", "created_at", "updated_at"]
    list_filter = ["collection", "created_at"]
    search_fields = ["key", "collection"]
    readonly_fields = ["key", "collection", "data", "created_at", "updated_at"]
    date_hierarchy = "created_at"

    def has_add_permission(self, request):
        return False

    @admin.display(description="Title")
    def title_preview(self, obj):
        return obj.preview

    @admin.display(description="Status")
    def status_badge(self, obj):
        status = obj.data.get("status", "") if isinstance(obj.data, dict) else ""
        colors = {
            "published": "#28a745",
            "draft": "#ffc107",
        }
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            colors.get(status, "#6c757d"),
            status or "-",
        )

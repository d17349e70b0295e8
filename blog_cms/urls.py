"""
URL configuration for django-blog-cms.

Include at the root of your project urls.py:

    path('', include('blog_cms.urls')),
"""
from django.urls import path

from . import views

app_name = "blog_cms"

urlpatterns = [
    # Public site
    path("", views.PostListView.as_view(), name="post_list"),
    path("blog/<str:slug>/", views.PostDetailView.as_view(), name="post_detail"),

    # Admin panel
    path("admin/", views.DashboardView.as_view(), name="dashboard"),
    path("admin/new/", views.PostCreateView.as_view(), name="post_create"),
    path("admin/edit/<str:post_id>/", views.PostUpdateView.as_view(), name="post_update"),
    path("admin/delete/<str:post_id>/", views.PostDeleteView.as_view(), name="post_delete"),
    path("admin/upload-image/", views.ImageUploadView.as_view(), name="image_upload"),
    path("admin/logout/", views.LogoutView.as_view(), name="logout"),
]

"""
core/urls.py
────────────
URL patterns for sitewide pages.
Include in the root urls.py with:
    path('', include('core.urls')),
"""

from django.urls import path, re_path

from . import views

urlpatterns = [
    path('',           views.home_view,      name='homepage'),
    path('dashboard/', views.dashboard_view, name='dashboard'),
    re_path(r'^uploads/(?P<path>.+)$', views.uploaded_file_view, name='uploaded_file'),
]

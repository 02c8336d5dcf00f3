"""
events/urls.py
──────────────
URL patterns for campus events.
Include in the root urls.py with:
    path('', include('events.urls')),
"""

from django.urls import path

from . import views

urlpatterns = [
    path('events/',                     views.event_list_view,   name='event_list'),
    path('events/new/',                 views.event_form_view,   name='event_create'),
    path('events/edit/<int:event_id>/', views.event_form_view,   name='event_edit'),
    path('events/delete/<int:event_id>/', views.event_delete_view, name='event_delete'),
    path('api/events',                  views.events_api,        name='events_api'),
]

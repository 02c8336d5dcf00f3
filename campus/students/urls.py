"""
students/urls.py
────────────────
URL patterns for the student list pages and the students JSON API.
Include in the root urls.py with:
    path('', include('students.urls')),
"""

from django.urls import path

from . import views

urlpatterns = [
    # Pages
    path('lists/',                          views.student_list_view,   name='student_list'),
    path('lists/new/',                      views.student_create_view, name='student_create'),
    path('lists/<str:student_id>/status/',  views.student_status_view, name='student_status'),
    path('lists/<str:student_id>/upload/',  views.student_upload_view, name='student_upload'),
    path('lists/<str:student_id>/pdf/',     views.student_pdf_view,    name='student_pdf'),

    # JSON API
    path('api/students', views.students_api, name='students_api'),
    path('api/upload',   views.upload_api,   name='upload_api'),
]

"""
students/views/
───────────────
Split into sub-modules for clarity:
  pages.py – server-rendered student list, registration, status, upload, PDF
  api.py   – JSON endpoints /api/students and /api/upload
"""
from .api import students_api, upload_api
from .pages import (
    student_create_view,
    student_list_view,
    student_pdf_view,
    student_status_view,
    student_upload_view,
)

__all__ = [
    # pages
    'student_list_view',
    'student_create_view',
    'student_status_view',
    'student_upload_view',
    'student_pdf_view',
    # api
    'students_api',
    'upload_api',
]

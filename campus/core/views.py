"""
core/views.py
─────────────
Sitewide pages: landing redirect, the registrar dashboard, uploaded-file
serving, and the custom error pages (registered in campus/urls.py).
"""

from django.conf import settings
from django.shortcuts import redirect, render
from django.views.static import serve

from students.models import Student

from .aggregation import pie_chart_gradient, status_distribution


def home_view(req):
    """Landing page: the session guard has already sent anonymous users to login."""
    return redirect('dashboard')


def dashboard_view(req):
    """
    Total student count and the enrollment-status pie chart.

    The pie is drawn with a CSS conic-gradient computed server-side, one
    fixed colour per status (see core.aggregation.STATUS_COLORS).
    """
    students = Student.objects.all()
    slices = status_distribution(students)
    total = sum(s.count for s in slices)
    return render(req, 'core/dashboard.html', {
        'total_students': total,
        'slices':         slices,
        'pie_gradient':   pie_chart_gradient(slices),
    })


def uploaded_file_view(req, path):
    """Serve an uploaded student document from MEDIA_ROOT (login required)."""
    return serve(req, path, document_root=settings.MEDIA_ROOT)


# ── Custom error pages ────────────────────────────────────────────────────────

def handler404(req, exception):
    return render(req, 'core/404.html', status=404)


def handler500(req):
    return render(req, 'core/500.html', status=500)

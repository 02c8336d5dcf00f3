"""
core/context_processors.py
──────────────────────────
Global template context injected into every request.

Registered in settings.py → TEMPLATES[0]['OPTIONS']['context_processors'].
"""

from django.db.models import Sum


def enrollment_summary(request):
    """
    Injects registrar-wide figures into every template context for the
    header banner:

        student_count        – number of student records
        tuition_collected    – sum of total_paid across all students
        tuition_outstanding  – sum of balance across all students

    Anonymous requests (the login page) get zeros and no queries.
    """
    if not request.user.is_authenticated:
        return {
            'student_count':       0,
            'tuition_collected':   0,
            'tuition_outstanding': 0,
        }

    # Import here to avoid circular imports during app startup
    from students.models import Student

    totals = Student.objects.aggregate(
        collected=Sum('total_paid'),
        outstanding=Sum('balance'),
    )
    return {
        'student_count':       Student.objects.count(),
        'tuition_collected':   totals['collected'] or 0,
        'tuition_outstanding': totals['outstanding'] or 0,
    }

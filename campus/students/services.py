"""
students/services.py
────────────────────
Read/write operations on the Student record store.

Views and the JSON API both go through these functions so validation,
uniqueness and the balance invariant are applied in one place.

Functions
─────────
create_student(data)
    Validate and insert a new student. Raises ValidationError.

save_registration(form)
    Save an already-validated StudentForm (used by the registration page).

list_students(query='')
    Every student, optionally narrowed by the case-insensitive search.

get_student(student_id)
    Fetch one student by student number. Raises Student.DoesNotExist.

update_student(student_id, **fields)
    Partial update of the editable fields. Raises Student.DoesNotExist
    or ValidationError.
"""

import logging

from django.core.exceptions import ValidationError
from django.db import models

from core.search import filter_records

from .forms import StudentForm
from .models import Student

logger = logging.getLogger(__name__)

# Fields that may be changed after registration. Identity fields
# (student_id) and the computed totals are deliberately absent.
EDITABLE_FIELDS = frozenset({
    'lrn', 'email',
    'first_name', 'middle_name', 'last_name',
    'address', 'mobile', 'landline', 'facebook',
    'birthdate', 'birthplace', 'nationality', 'religion', 'sex',
    'father', 'mother', 'guardian', 'guardian_occupation',
    'year_level', 'school_year', 'semester', 'education', 'course',
    'nursery_school', 'nursery_year',
    'elementary_school', 'elementary_year',
    'junior_high_school', 'junior_high_year',
    'senior_high_school', 'senior_high_year',
    'status', 'tuition_fee',
})


def create_student(data):
    """Register a student from a dict of form values and return it."""
    form = StudentForm(data)
    if not form.is_valid():
        logger.warning(f"Student registration rejected: {form.errors.as_json()}")
        raise ValidationError({
            field: list(errors) for field, errors in form.errors.items()
        })

    return save_registration(form)


def save_registration(form):
    """Save a validated StudentForm, initialising the balance from the tuition fee."""
    student = form.save(commit=False)
    student.balance = student.tuition_fee - student.total_paid
    student.save()
    logger.info(f"Registered student {student.student_id}")
    return student


def list_students(query=''):
    students = Student.objects.prefetch_related('files').order_by(
        'last_name', 'first_name', 'student_id'
    )
    return filter_records(students, query)


def get_student(student_id):
    return Student.objects.get(student_id=student_id)


def update_student(student_id, **fields):
    """
    Apply *fields* to the student with number *student_id* and save.

    Last write wins: there is no concurrency token, two simultaneous
    updates simply overwrite each other.
    """
    unknown = set(fields) - EDITABLE_FIELDS
    if unknown:
        raise ValidationError({
            name: ['This field cannot be updated.'] for name in sorted(unknown)
        })

    student = Student.objects.get(student_id=student_id)

    for name, value in fields.items():
        field = Student._meta.get_field(name)
        if name == 'lrn' and not value:
            value = None
        elif value is None and isinstance(field, models.CharField) and not field.null:
            # JSON null clears a text field; these columns store "" for "not given".
            value = ''
        setattr(student, name, value)

    # full_clean converts raw JSON values (strings, floats) to field types
    # and runs the unique checks, excluding this row.
    student.full_clean()

    if 'tuition_fee' in fields:
        student.balance = student.tuition_fee - student.total_paid

    student.save()
    logger.info(f"Updated student {student_id}: {', '.join(sorted(fields))}")
    return student

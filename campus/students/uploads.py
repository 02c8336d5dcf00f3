"""
students/uploads.py
───────────────────
File upload handling for student documents.

An upload is checked first (MIME type + size) and only then written to
storage and recorded on the student, so a rejected file never touches the
disk or the database.  Each upload is independent: there is no dedup and no
multi-file transaction.

Files are stored as  MEDIA_ROOT/<studentId>-download.<ext>
and served from      /uploads/<studentId>-download.<ext>
"""

import logging

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.files.storage import default_storage
from django.utils import timezone

from .models import StudentFile

logger = logging.getLogger(__name__)


class UploadRejected(ValidationError):
    """The file is not an allowed type or is too large."""


def _human_size(num_bytes):
    return f"{num_bytes / (1024 * 1024):.0f} MB"


def validate_upload(uploaded_file):
    """Raise UploadRejected unless *uploaded_file* is an allowed, small-enough document."""
    allowed = settings.CAMPUS_ALLOWED_UPLOAD_TYPES
    max_size = settings.CAMPUS_MAX_UPLOAD_SIZE

    if uploaded_file is None:
        raise UploadRejected('No file selected.', code='missing')

    if uploaded_file.content_type not in allowed:
        raise UploadRejected(
            'Only JPEG and PDF are allowed.',
            code='content_type',
        )

    if uploaded_file.size > max_size:
        raise UploadRejected(
            f'File too large. Max {_human_size(max_size)}.',
            code='size',
        )


def storage_name(student, content_type):
    """Storage-relative name for a student's document, e.g. '2025-0001-download.pdf'."""
    ext = settings.CAMPUS_ALLOWED_UPLOAD_TYPES[content_type]
    return f"{student.student_id}-download.{ext}"


def store_upload(student, uploaded_file):
    """
    Validate, save and record *uploaded_file* for *student*.

    A second upload with the same extension overwrites the stored file and
    refreshes its existing metadata row instead of appending a new one.
    Returns the public path of the stored file.
    """
    try:
        validate_upload(uploaded_file)
    except UploadRejected as exc:
        logger.warning(
            f"Upload for {student.student_id} rejected: {exc.messages[0]} "
            f"({getattr(uploaded_file, 'content_type', None)}, {getattr(uploaded_file, 'size', None)} bytes)"
        )
        raise

    name = storage_name(student, uploaded_file.content_type)
    if default_storage.exists(name):
        default_storage.delete(name)
    saved_name = default_storage.save(name, uploaded_file)
    file_path = f"{settings.MEDIA_URL}{saved_name}"

    record, created = StudentFile.objects.update_or_create(
        student=student,
        file_path=file_path,
        defaults={
            'filename':    uploaded_file.name,
            'mime_type':   uploaded_file.content_type,
            'size':        uploaded_file.size,
            'uploaded_at': timezone.now(),
        },
    )

    verb = 'stored' if created else 'replaced'
    logger.info(f"Upload {verb} for {student.student_id}: {file_path} ({record.size} bytes)")
    return file_path

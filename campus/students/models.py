"""
students/models.py
──────────────────
The student record and the files uploaded for it.

Student     – identity, enrollment, prior schooling, status and the
              denormalised payment totals (tuition_fee / total_paid / balance).
StudentFile – one uploaded document (JPEG or PDF) belonging to a Student,
              kept in upload order.
"""

from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Sum
from django.utils import timezone


class Student(models.Model):
    """
    A registered student.

    Uniquely identified by the student number (`student_id`), the e-mail
    address and, when present, the Learner Reference Number (`lrn`).

    Prior schooling (nursery → senior high) is stored inline on the row;
    payments live in the payments app and are reached via `student.payments`.
    """

    class Status(models.TextChoices):
        ENROLLED      = 'enrolled',      'Enrolled'
        GRADUATED     = 'graduated',     'Graduated'
        DROPPED       = 'dropped',       'Dropped'
        MISSING_FILES = 'missing-files', 'Missing Files'

    class Sex(models.TextChoices):
        MALE   = 'Male',   'Male'
        FEMALE = 'Female', 'Female'
        OTHER  = 'Other',  'Other'

    # ── Identity ──────────────────────────────────────────────────────────────
    student_id = models.CharField(
        max_length=30,
        unique=True,
        verbose_name='Student number',
    )
    lrn = models.CharField(
        max_length=20,
        unique=True,
        null=True,
        blank=True,
        verbose_name='LRN',
        help_text='Learner Reference Number (optional, unique when given).',
    )
    email = models.EmailField(unique=True)

    first_name  = models.CharField(max_length=100)
    middle_name = models.CharField(max_length=100, blank=True)
    last_name   = models.CharField(max_length=100)

    # ── Contact ───────────────────────────────────────────────────────────────
    address  = models.CharField(max_length=255)
    mobile   = models.CharField(max_length=30)
    landline = models.CharField(max_length=30, blank=True)
    facebook = models.CharField(max_length=200, blank=True)

    # ── Birth ─────────────────────────────────────────────────────────────────
    birthdate   = models.DateField()
    birthplace  = models.CharField(max_length=200)
    nationality = models.CharField(max_length=100)
    religion    = models.CharField(max_length=100, blank=True)
    sex = models.CharField(max_length=10, choices=Sex.choices)

    # ── Family ────────────────────────────────────────────────────────────────
    father   = models.CharField(max_length=200, blank=True)
    mother   = models.CharField(max_length=200, blank=True)
    guardian = models.CharField(max_length=200, blank=True)
    guardian_occupation = models.CharField(max_length=200, blank=True)

    # ── Enrollment ────────────────────────────────────────────────────────────
    registration_date = models.DateTimeField(default=timezone.now)
    year_level  = models.CharField(max_length=50)
    school_year = models.CharField(max_length=20, help_text='e.g. "2025-2026".')
    semester    = models.CharField(max_length=50, blank=True)
    education   = models.CharField(max_length=100, blank=True)
    course      = models.CharField(max_length=200, blank=True)

    # ── Prior schooling ───────────────────────────────────────────────────────
    nursery_school          = models.CharField(max_length=200, blank=True)
    nursery_year            = models.CharField(max_length=20, blank=True)
    elementary_school       = models.CharField(max_length=200, blank=True)
    elementary_year         = models.CharField(max_length=20, blank=True)
    junior_high_school      = models.CharField(max_length=200, blank=True)
    junior_high_year        = models.CharField(max_length=20, blank=True)
    senior_high_school      = models.CharField(max_length=200, blank=True)
    senior_high_year        = models.CharField(max_length=20, blank=True)

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.MISSING_FILES,
        blank=True,
        help_text='Enrollment lifecycle label. Blank means the status was never set.',
    )

    # ── Payment tracking ──────────────────────────────────────────────────────
    tuition_fee = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=0,
        validators=[MinValueValidator(0)],
    )
    total_paid  = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=0,
        help_text='Sum of recorded payments. Recomputed whenever a payment is posted.',
    )
    balance = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=0,
        help_text='tuition_fee minus total_paid.',
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['last_name', 'first_name', 'student_id']
        verbose_name = 'Student'
        verbose_name_plural = 'Students'

    def __str__(self):
        return f"{self.full_name} ({self.student_id})"

    @property
    def full_name(self):
        parts = [self.first_name, self.middle_name, self.last_name]
        return ' '.join(p for p in parts if p)

    @property
    def search_text(self):
        """Fields the student list search runs over."""
        return f"{self.first_name} {self.last_name} {self.email} {self.student_id}"

    @property
    def schooling_history(self):
        """Prior schooling as (level, school name, year attended) rows, oldest first."""
        return [
            ('Nursery',     self.nursery_school,     self.nursery_year),
            ('Elementary',  self.elementary_school,  self.elementary_year),
            ('Junior High', self.junior_high_school, self.junior_high_year),
            ('Senior High', self.senior_high_school, self.senior_high_year),
        ]

    @property
    def latest_file(self):
        # Walks the (possibly prefetched) files in their Meta ordering.
        files = list(self.files.all())
        return files[-1] if files else None

    def refresh_totals(self, save=True):
        """
        Recompute total_paid and balance from the Payment rows.
        Called from inside the payment-posting transaction.
        """
        total = self.payments.aggregate(s=Sum('amount'))['s'] or 0
        self.total_paid = total
        self.balance = self.tuition_fee - total
        if save:
            self.save(update_fields=['total_paid', 'balance', 'updated_at'])
        return self.balance


class StudentFile(models.Model):
    """Metadata for one document uploaded on behalf of a student."""

    student = models.ForeignKey(
        Student,
        on_delete=models.CASCADE,
        related_name='files',
    )
    filename  = models.CharField(max_length=255, help_text='Original name of the uploaded file.')
    file_path = models.CharField(max_length=255, help_text='Public path, e.g. /uploads/2025-0001-download.pdf')
    mime_type = models.CharField(max_length=100)
    size      = models.PositiveIntegerField(help_text='Size in bytes.')
    uploaded_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['uploaded_at', 'id']
        verbose_name = 'Student File'
        verbose_name_plural = 'Student Files'

    def __str__(self):
        return f"{self.filename} → {self.student.student_id}"

"""
payments/models.py
──────────────────
Tuition payments.

ExamPeriod – the nine billing milestones of a school term, in term order.
Payment    – one payment by one student for one exam period.
"""

from django.db import models
from django.utils import timezone


class ExamPeriod(models.TextChoices):
    """Billing milestones. Declaration order is the canonical column order."""

    DOWNPAYMENT    = 'downpayment',  'Downpayment'
    FIRST_PERIODIC = '1st Periodic', '1st Periodic'
    PRELIM         = 'Prelim',       'Prelim'
    SECOND_PERIODIC = '2nd Periodic', '2nd Periodic'
    MIDTERM        = 'Midterm',      'Midterm'
    THIRD_PERIODIC = '3rd Periodic', '3rd Periodic'
    PRE_FINAL      = 'Pre-final',    'Pre-final'
    FOURTH_PERIODIC = '4th Periodic', '4th Periodic'
    FINALS         = 'Finals',       'Finals'


class Payment(models.Model):
    """
    A single tuition payment.

    Payments are write-once: they are created by the cashier and never
    edited afterwards.  Posting one recomputes the student's total_paid and
    balance in the same transaction (see payments.services.record_payment).
    """

    student = models.ForeignKey(
        'students.Student',
        on_delete=models.CASCADE,
        related_name='payments',
    )
    exam_period = models.CharField(
        max_length=20,
        choices=ExamPeriod.choices,
        help_text='Billing milestone this payment covers.',
    )
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        help_text='Amount received.',
    )
    paid_on = models.DateField(
        default=timezone.localdate,
        help_text='Date the money was received.',
    )
    reference = models.CharField(
        max_length=100,
        blank=True,
        help_text='Official receipt number or bank reference.',
    )
    note = models.TextField(blank=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['student', 'paid_on', 'created_at']
        verbose_name = 'Payment'
        verbose_name_plural = 'Payments'

    def __str__(self):
        return f"{self.student.student_id} → {self.exam_period} ({self.amount})"

"""
payments/services.py
────────────────────
Posting and reading tuition payments.

record_payment() is the only way a Payment gets created; it keeps the
student's denormalised totals in step with the Payment rows.
"""

import logging
from decimal import Decimal, InvalidOperation

from django.core.exceptions import ValidationError
from django.db import transaction

from .models import ExamPeriod, Payment

logger = logging.getLogger(__name__)

_PERIOD_ORDER = {period: index for index, period in enumerate(ExamPeriod.values)}


def payments_for(student):
    """The student's payments in canonical exam-period order."""
    return sorted(
        student.payments.all(),
        key=lambda p: (_PERIOD_ORDER.get(p.exam_period, len(_PERIOD_ORDER)), p.created_at),
    )


def unpaid_periods(student):
    """Exam periods the student has not paid yet, in canonical order."""
    paid = set(student.payments.values_list('exam_period', flat=True))
    return [period for period in ExamPeriod if period not in paid]


def record_payment(student, exam_period, amount, paid_on=None, reference='', note=''):
    """
    Create a Payment for *student* and recompute the student's totals.

    Raises ValidationError for an unknown exam period, a non-positive amount,
    or a period the student has already paid.
    """
    if exam_period not in ExamPeriod.values:
        raise ValidationError(
            {'exam_period': [f'"{exam_period}" is not a valid exam period.']}
        )

    try:
        amount = Decimal(str(amount))
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError({'amount': ['Enter a number.']})
    if not amount.is_finite():
        raise ValidationError({'amount': ['Enter a number.']})
    if amount <= 0:
        raise ValidationError({'amount': ['Amount must be greater than zero.']})

    with transaction.atomic():
        if student.payments.filter(exam_period=exam_period).exists():
            raise ValidationError({
                'exam_period': [
                    f'{student.student_id} has already paid "{exam_period}". No duplicate created.'
                ],
            })

        payment = Payment(
            student=student,
            exam_period=exam_period,
            amount=amount,
            reference=reference or '',
            note=note or '',
        )
        if paid_on:
            payment.paid_on = paid_on
        payment.full_clean()
        payment.save()

        student.refresh_totals()

    logger.info(
        f"Recorded payment {payment.pk} for {student.student_id}: "
        f"{exam_period} {amount} (balance {student.balance})"
    )
    return payment

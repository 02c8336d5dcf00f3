import json
from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError

from core.aggregation import payment_matrix
from payments.models import ExamPeriod, Payment
from payments.services import payments_for, record_payment, unpaid_periods


def test_matrix_without_payments_is_all_unpaid(make_student):
    make_student()

    rows = payment_matrix()

    assert len(rows) == 1
    assert [period for period, _ in rows[0].cells] == list(ExamPeriod)
    assert not any(paid for _, paid in rows[0].cells)


def test_matrix_marks_only_paid_period(make_student):
    student = make_student()
    record_payment(student, ExamPeriod.PRELIM, '1500')

    row = payment_matrix()[0]

    assert row.paid_periods == [ExamPeriod.PRELIM]
    assert row.to_dict()['paidPeriods']['Prelim'] is True
    assert row.to_dict()['paidPeriods']['Finals'] is False


def test_matrix_lists_every_student(make_student):
    paying = make_student()
    make_student()
    record_payment(paying, ExamPeriod.DOWNPAYMENT, '3000')

    assert len(payment_matrix()) == 2


def test_record_payment_recomputes_totals(make_student):
    student = make_student(tuition_fee=Decimal('10000.00'))

    record_payment(student, ExamPeriod.DOWNPAYMENT, '2500')
    record_payment(student, ExamPeriod.PRELIM, Decimal('2500.00'))

    student.refresh_from_db()
    assert student.total_paid == Decimal('5000.00')
    assert student.balance == Decimal('5000.00')


def test_duplicate_period_is_rejected(make_student):
    student = make_student()
    record_payment(student, ExamPeriod.MIDTERM, '2000')

    with pytest.raises(ValidationError):
        record_payment(student, ExamPeriod.MIDTERM, '2000')

    assert Payment.objects.filter(student=student).count() == 1
    student.refresh_from_db()
    assert student.total_paid == Decimal('2000.00')


@pytest.mark.parametrize('amount', ['0', '-50', 'abc', 'NaN', 'Infinity', float('nan')])
def test_invalid_amount_is_rejected(make_student, amount):
    student = make_student()

    with pytest.raises(ValidationError):
        record_payment(student, ExamPeriod.FINALS, amount)

    assert not Payment.objects.exists()


def test_unknown_period_is_rejected(make_student):
    with pytest.raises(ValidationError):
        record_payment(make_student(), 'Summer', '100')


def test_payments_in_canonical_order(make_student):
    student = make_student()
    record_payment(student, ExamPeriod.FINALS, '100')
    record_payment(student, ExamPeriod.DOWNPAYMENT, '100')
    record_payment(student, ExamPeriod.MIDTERM, '100')

    assert [p.exam_period for p in payments_for(student)] == ['downpayment', 'Midterm', 'Finals']
    assert ExamPeriod.MIDTERM not in unpaid_periods(student)
    assert len(unpaid_periods(student)) == 6


# ── HTTP ──────────────────────────────────────────────────────────────────────

def test_get_all_payments_api(admin_client, make_student):
    student = make_student()
    record_payment(student, ExamPeriod.PRELIM, '1500')

    response = admin_client.get('/api/get-all-payments')

    assert response.status_code == 200
    body = response.json()
    assert body['examPeriods'][0] == 'downpayment'
    assert len(body['examPeriods']) == 9
    assert body['data'][0]['studentId'] == student.student_id
    assert body['data'][0]['paidPeriods']['Prelim'] is True


def test_payments_api_records_payment(admin_client, make_student):
    student = make_student()

    response = admin_client.post(
        '/api/payments',
        data=json.dumps({'studentId': student.student_id, 'examPeriod': 'downpayment', 'amount': 4000}),
        content_type='application/json',
    )

    assert response.status_code == 201
    assert Decimal(response.json()['balance']) == Decimal('6000.00')


def test_payments_api_duplicate_is_400(admin_client, make_student):
    student = make_student()
    record_payment(student, ExamPeriod.DOWNPAYMENT, '4000')

    response = admin_client.post(
        '/api/payments',
        data=json.dumps({'studentId': student.student_id, 'examPeriod': 'downpayment', 'amount': 4000}),
        content_type='application/json',
    )

    assert response.status_code == 400
    assert 'error' in response.json()


def test_all_payments_page(admin_client, make_student):
    make_student(first_name='John', last_name='Smith')

    response = admin_client.get('/all-payments/', {'q': 'john'})

    assert response.status_code == 200
    assert b'John Smith' in response.content


def test_student_payments_page_records_payment(admin_client, make_student):
    student = make_student()

    response = admin_client.post(
        f'/students/{student.student_id}/payments/',
        {'exam_period': 'Prelim', 'amount': '1500.00', 'paid_on': '2025-08-01'},
    )

    assert response.status_code == 302
    assert student.payments.get().exam_period == 'Prelim'


def test_payments_api_nan_amount_is_400(admin_client, make_student):
    student = make_student()

    response = admin_client.post(
        '/api/payments',
        data=json.dumps({'studentId': student.student_id, 'examPeriod': 'Prelim', 'amount': float('nan')}),
        content_type='application/json',
    )

    assert response.status_code == 400
    assert 'amount' in response.json()['fields']
    assert not Payment.objects.exists()

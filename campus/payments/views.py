"""
payments/views.py
─────────────────
Tuition payment pages and JSON endpoints:
  • All-payments checklist (one row per student, one column per exam period)
  • One student's payment history + record-payment form
  • /api/get-all-payments  – the checklist grouped by student
  • /api/payments          – read by student (GET ?studentId=) / record (POST)
"""

from django.contrib import messages
from django.core.exceptions import ValidationError
from django.http import Http404, JsonResponse
from django.shortcuts import redirect, render

from core.aggregation import payment_matrix
from core.http import BadJSON, add_form_control_class, json_body, json_error, validation_error_response
from core.search import filter_records
from students.models import Student

from .forms import RecordPaymentForm
from .models import ExamPeriod
from .services import payments_for, record_payment


def payment_to_dict(payment):
    return {
        'id':         payment.pk,
        'studentId':  payment.student.student_id,
        'examPeriod': payment.exam_period,
        'amount':     payment.amount,
        'paidOn':     payment.paid_on,
        'reference':  payment.reference,
        'note':       payment.note,
        'createdAt':  payment.created_at,
    }


# ── All payments ──────────────────────────────────────────────────────────────

def all_payments_view(req):
    """
    Checklist of every student against the nine exam periods:
    ✅ where a payment exists, a dash where it does not.
    """
    query = req.GET.get('q', '').strip()
    rows = filter_records(payment_matrix(), query)
    return render(req, 'payments/all_payments.html', {
        'rows':         rows,
        'exam_periods': ExamPeriod.choices,
        'query':        query,
    })


# ── One student's payments ────────────────────────────────────────────────────

def student_payments_view(req, student_id):
    """
    Payment history for one student plus the cashier form.

    POST records a payment through record_payment(), which also refreshes
    the student's total_paid and balance.
    """
    try:
        student = Student.objects.get(student_id=student_id)
    except Student.DoesNotExist:
        raise Http404(f'Student {student_id} not found.')

    if req.method == 'POST':
        form = RecordPaymentForm(req.POST, student=student)
        if form.is_valid():
            cd = form.cleaned_data
            try:
                payment = record_payment(
                    student,
                    exam_period=cd['exam_period'],
                    amount=cd['amount'],
                    paid_on=cd['paid_on'],
                    reference=cd.get('reference', ''),
                    note=cd.get('note', ''),
                )
            except ValidationError as exc:
                messages.error(req, ' '.join(exc.messages))
            else:
                messages.success(
                    req,
                    f'✅ Payment recorded: {student.full_name} → {payment.exam_period} '
                    f'({payment.amount}). Balance: {student.balance}.'
                )
                return redirect('student_payments', student_id=student.student_id)
        else:
            messages.error(req, 'Please fix the errors below.')
    else:
        form = RecordPaymentForm(student=student)

    add_form_control_class(form)
    return render(req, 'payments/student_payments.html', {
        'student':  student,
        'payments': payments_for(student),
        'form':     form,
        'row':      payment_matrix([student])[0],
    })


# ── JSON API ──────────────────────────────────────────────────────────────────

def get_all_payments_api(req):
    if req.method != 'GET':
        return json_error('Method not allowed.', status=405)
    rows = filter_records(payment_matrix(), req.GET.get('q', ''))
    return JsonResponse({
        'examPeriods': ExamPeriod.values,
        'data':        [row.to_dict() for row in rows],
    })


def payments_api(req):
    if req.method == 'GET':
        student_id = req.GET.get('studentId', '').strip()
        if not student_id:
            return json_error('Missing ?studentId=<studentId>.')
        try:
            student = Student.objects.get(student_id=student_id)
        except Student.DoesNotExist:
            return json_error(f'Student {student_id} not found.', status=404)
        return JsonResponse([payment_to_dict(p) for p in payments_for(student)], safe=False)

    if req.method != 'POST':
        return json_error('Method not allowed.', status=405)

    try:
        payload = json_body(req)
    except BadJSON as exc:
        return json_error(str(exc))

    student_id = str(payload.get('studentId', '')).strip()
    try:
        student = Student.objects.get(student_id=student_id)
    except Student.DoesNotExist:
        return json_error(f'Student {student_id or "(none)"} not found.', status=404)

    try:
        payment = record_payment(
            student,
            exam_period=payload.get('examPeriod', ''),
            amount=payload.get('amount'),
            paid_on=payload.get('paidOn') or None,
            reference=payload.get('reference', ''),
            note=payload.get('note', ''),
        )
    except ValidationError as exc:
        return validation_error_response(exc)

    data = payment_to_dict(payment)
    data.update({'totalPaid': student.total_paid, 'balance': student.balance})
    return JsonResponse(data, status=201)

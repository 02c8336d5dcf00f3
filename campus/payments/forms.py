from decimal import Decimal

from django import forms
from django.utils import timezone

from .models import ExamPeriod
from .services import unpaid_periods


class RecordPaymentForm(forms.Form):
    """
    Cashier form for posting a payment against one student.

    The exam-period drop-down only lists the periods the student still owes,
    mirroring the duplicate check in record_payment().
    """

    exam_period = forms.ChoiceField(
        choices=ExamPeriod.choices,
        label='Exam period',
    )
    amount = forms.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("0.01"),
        label='Amount received',
        widget=forms.NumberInput(attrs={'step': '0.01', 'min': '0', 'placeholder': '0.00'}),
    )
    paid_on = forms.DateField(
        label='Date received',
        widget=forms.DateInput(attrs={'type': 'date'}, format='%Y-%m-%d'),
        input_formats=['%Y-%m-%d'],
    )
    reference = forms.CharField(
        required=False,
        max_length=100,
        label='OR number / reference (optional)',
    )
    note = forms.CharField(
        required=False,
        label='Note (optional)',
        widget=forms.Textarea(attrs={'rows': 2}),
    )

    def __init__(self, *args, student=None, **kwargs):
        super().__init__(*args, **kwargs)
        if student is not None:
            self.fields['exam_period'].choices = [
                (period.value, period.label) for period in unpaid_periods(student)
            ]
        if not self.data.get('paid_on'):
            self.fields['paid_on'].initial = timezone.localdate().strftime('%Y-%m-%d')

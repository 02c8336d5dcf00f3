"""
core/aggregation.py
───────────────────
Read-time summary views derived from the student and payment tables.
Nothing computed here is stored.

payment_matrix(students=None)
    One PaymentRow per student with a paid/unpaid cell per exam period,
    in canonical period order.

status_distribution(students=None)
    Student counts per enrollment status, each with a fixed chart colour.

pie_chart_gradient(slices)
    CSS conic-gradient for drawing the status distribution as a pie.
"""

from dataclasses import dataclass, field

from django.db.models import Count

from payments.models import ExamPeriod, Payment
from students.models import Student


# ── Payment matrix ────────────────────────────────────────────────────────────

@dataclass
class PaymentRow:
    student: Student
    cells: list = field(default_factory=list)     # [(ExamPeriod, paid: bool), …]
    payments: list = field(default_factory=list)

    @property
    def search_text(self):
        return f"{self.student.student_id} {self.student.full_name}"

    @property
    def paid_periods(self):
        return [period for period, paid in self.cells if paid]

    def to_dict(self):
        s = self.student
        return {
            'studentId':  s.student_id,
            'fullName':   s.full_name,
            'course':     s.course,
            'education':  s.education,
            'yearLevel':  s.year_level,
            'schoolYear': s.school_year,
            'semester':   s.semester,
            'payments': [
                {
                    'examPeriod': p.exam_period,
                    'amount':     p.amount,
                    'paidOn':     p.paid_on,
                    'reference':  p.reference,
                }
                for p in self.payments
            ],
            'paidPeriods': {period.value: paid for period, paid in self.cells},
        }


def payment_matrix(students=None):
    """
    Build the paid/unpaid checklist for *students* (default: everyone).

    Payments are fetched in one query and grouped by student, so a student
    with no payments gets a row whose cells are all False.
    """
    if students is None:
        students = Student.objects.order_by('last_name', 'first_name', 'student_id')
    students = list(students)

    payments_map: dict[int, list] = {}
    for payment in Payment.objects.filter(student__in=students).order_by('paid_on', 'created_at'):
        payments_map.setdefault(payment.student_id, []).append(payment)

    rows = []
    for student in students:
        student_payments = payments_map.get(student.pk, [])
        paid = {p.exam_period for p in student_payments}
        rows.append(PaymentRow(
            student=student,
            cells=[(period, period.value in paid) for period in ExamPeriod],
            payments=student_payments,
        ))
    return rows


# ── Status distribution ───────────────────────────────────────────────────────

UNKNOWN_STATUS = 'unknown'
UNKNOWN_LABEL  = 'Unknown'

# Keyed by the Status enumeration so a renamed status fails loudly
# instead of silently falling back to gray.
STATUS_COLORS = {
    Student.Status.ENROLLED:      '#4CAF50',   # green
    Student.Status.GRADUATED:     '#F44336',   # red
    Student.Status.DROPPED:       '#FFEB3B',   # yellow
    Student.Status.MISSING_FILES: '#2196F3',   # blue
}
UNKNOWN_COLOR = '#9E9E9E'                      # gray


@dataclass(frozen=True)
class StatusSlice:
    status: str
    label: str
    count: int
    color: str

    def to_dict(self):
        return {
            'status': self.status,
            'label':  self.label,
            'count':  self.count,
            'color':  self.color,
        }


def _bucket(raw_status):
    """Map a stored status string to a Status member, or None for unknown."""
    if raw_status in Student.Status.values:
        return Student.Status(raw_status)
    return None


def status_distribution(students=None):
    """
    Partition *students* by status and count each partition.

    A blank or unrecognised status is counted as "Unknown".  Only non-empty
    partitions are returned: canonical status order first, Unknown last.
    """
    if students is None:
        students = Student.objects.all()

    counts = {}
    for row in students.order_by().values('status').annotate(n=Count('id')):
        bucket = _bucket(row['status'])
        counts[bucket] = counts.get(bucket, 0) + row['n']

    slices = [
        StatusSlice(status.value, status.label, counts[status], STATUS_COLORS[status])
        for status in Student.Status
        if counts.get(status)
    ]
    if counts.get(None):
        slices.append(StatusSlice(UNKNOWN_STATUS, UNKNOWN_LABEL, counts[None], UNKNOWN_COLOR))
    return slices


def pie_chart_gradient(slices):
    """
    Return a CSS ``conic-gradient(...)`` value drawing *slices* as a pie.
    An empty distribution is a plain gray disc.
    """
    total = sum(s.count for s in slices)
    if not total:
        return f'conic-gradient({UNKNOWN_COLOR} 0deg 360deg)'

    stops = []
    start = 0.0
    for s in slices:
        end = start + 360.0 * s.count / total
        stops.append(f'{s.color} {start:.2f}deg {end:.2f}deg')
        start = end
    return f"conic-gradient({', '.join(stops)})"

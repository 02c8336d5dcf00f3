"""
payments/admin.py
─────────────────
Read-only admin for payments. Payments are posted through the cashier page
so the student's totals are recomputed; they are never edited afterwards.
"""

from django.contrib import admin

from .models import Payment


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display  = ('student', 'exam_period', 'amount', 'paid_on', 'reference', 'created_at')
    list_filter   = ('exam_period', 'paid_on')
    search_fields = ('student__student_id', 'student__first_name', 'student__last_name',
                     'reference', 'note')
    readonly_fields = ('student', 'exam_period', 'amount', 'paid_on', 'reference', 'note', 'created_at')

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

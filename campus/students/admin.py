"""
students/admin.py
─────────────────
Admin registrations for Student and its uploaded files.
"""

from django.contrib import admin

from .models import Student, StudentFile


class StudentFileInline(admin.TabularInline):
    model = StudentFile
    extra = 0
    readonly_fields = ('filename', 'file_path', 'mime_type', 'size', 'uploaded_at')
    can_delete = False


@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    list_display  = ('student_id', 'last_name', 'first_name', 'email', 'year_level',
                     'school_year', 'status', 'balance')
    list_filter   = ('status', 'year_level', 'school_year', 'semester')
    search_fields = ('student_id', 'lrn', 'first_name', 'last_name', 'email')
    readonly_fields = ('total_paid', 'balance', 'created_at', 'updated_at')
    inlines = [StudentFileInline]

    fieldsets = (
        (None, {
            'fields': ('student_id', 'lrn', 'email', 'status'),
        }),
        ('Name & Contact', {
            'fields': ('first_name', 'middle_name', 'last_name',
                       'address', 'mobile', 'landline', 'facebook'),
        }),
        ('Birth', {
            'fields': ('birthdate', 'birthplace', 'nationality', 'religion', 'sex'),
        }),
        ('Family', {
            'fields': ('father', 'mother', 'guardian', 'guardian_occupation'),
        }),
        ('Enrollment', {
            'fields': ('registration_date', 'year_level', 'school_year',
                       'semester', 'education', 'course'),
        }),
        ('Prior Schooling', {
            'fields': ('nursery_school', 'nursery_year',
                       'elementary_school', 'elementary_year',
                       'junior_high_school', 'junior_high_year',
                       'senior_high_school', 'senior_high_year'),
            'classes': ('collapse',),
        }),
        ('Tuition', {
            'fields': ('tuition_fee', 'total_paid', 'balance'),
            'description': 'Total paid and balance are recomputed whenever a payment is posted.',
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )

    def save_model(self, request, obj, form, change):
        obj.balance = obj.tuition_fee - obj.total_paid
        super().save_model(request, obj, form, change)

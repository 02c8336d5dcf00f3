from django import forms

from .models import Student


class StudentForm(forms.ModelForm):
    """
    Registration form for a new student.

    Uniqueness of the student number, e-mail and LRN is enforced by the
    model's unique constraints, which ModelForm validation checks for us.
    """

    class Meta:
        model  = Student
        fields = [
            'student_id', 'lrn', 'email',
            'first_name', 'middle_name', 'last_name',
            'address', 'mobile', 'landline', 'facebook',
            'birthdate', 'birthplace', 'nationality', 'religion', 'sex',
            'father', 'mother', 'guardian', 'guardian_occupation',
            'year_level', 'school_year', 'semester', 'education', 'course',
            'nursery_school', 'nursery_year',
            'elementary_school', 'elementary_year',
            'junior_high_school', 'junior_high_year',
            'senior_high_school', 'senior_high_year',
            'status', 'tuition_fee',
        ]
        widgets = {
            'birthdate':   forms.DateInput(attrs={'type': 'date'}, format='%Y-%m-%d'),
            'tuition_fee': forms.NumberInput(attrs={'step': '0.01', 'min': '0', 'placeholder': '0.00'}),
            'school_year': forms.TextInput(attrs={'placeholder': 'e.g. 2025-2026'}),
        }
        labels = {
            'student_id':          'Student number',
            'lrn':                 'LRN (optional)',
            'guardian_occupation': 'Guardian occupation',
            'junior_high_school':  'Junior high school',
            'senior_high_school':  'Senior high school',
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['birthdate'].input_formats = ['%Y-%m-%d']
        self.fields['status'].required = False
        self.fields['tuition_fee'].required = False

    def clean_tuition_fee(self):
        # Left empty means no fee set yet; the model rejects negative amounts.
        return self.cleaned_data.get('tuition_fee') or 0

    def clean_status(self):
        # An omitted status falls back to the model default instead of "unset".
        return self.cleaned_data.get('status') or Student.Status.MISSING_FILES


class StudentStatusForm(forms.Form):
    """The status drop-down on the student list."""

    status = forms.ChoiceField(choices=Student.Status.choices)


class StudentUploadForm(forms.Form):
    """Single-file upload from the student list."""

    file = forms.FileField(label='Document (JPEG or PDF, max 10 MB)')

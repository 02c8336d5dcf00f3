"""
students/views/pages.py
───────────────────────
The student list page and the actions it posts to.

Every action redirects back to the list (keeping the search query), with a
flash message describing the outcome.  A failed action leaves the records
untouched.
"""

from urllib.parse import urlencode

from django.contrib import messages
from django.core.exceptions import ValidationError
from django.http import Http404, HttpResponse
from django.shortcuts import redirect, render
from django.urls import reverse

from core.http import add_form_control_class, require_POST_or_405

from ..forms import StudentForm, StudentStatusForm, StudentUploadForm
from ..models import Student
from ..pdf import pdf_filename, render_student_pdf
from ..services import get_student, list_students, save_registration, update_student
from ..uploads import UploadRejected, store_upload


def _back_to_list(req):
    query = req.POST.get('q') or req.GET.get('q') or ''
    url = reverse('student_list')
    if query:
        url = f"{url}?{urlencode({'q': query})}"
    return redirect(url)


# ── List ──────────────────────────────────────────────────────────────────────

def student_list_view(req):
    """
    All students with search, a status drop-down, a file upload button and
    the PDF info-sheet link on every row.
    """
    query = req.GET.get('q', '').strip()
    students = list_students(query)
    return render(req, 'students/list.html', {
        'students':      students,
        'query':         query,
        'status_choices': Student.Status.choices,
        'upload_form':   StudentUploadForm(),
    })


# ── Registration ──────────────────────────────────────────────────────────────

def student_create_view(req):
    if req.method == 'POST':
        form = StudentForm(req.POST)
        if form.is_valid():
            student = save_registration(form)
            messages.success(req, f'Student {student.full_name} ({student.student_id}) registered.')
            return redirect('student_list')
        else:
            messages.error(req, 'Please fix the errors below.')
    else:
        form = StudentForm()

    add_form_control_class(form)
    return render(req, 'students/form.html', {'form': form})


# ── Row actions ───────────────────────────────────────────────────────────────

@require_POST_or_405
def student_status_view(req, student_id):
    form = StudentStatusForm(req.POST)
    if not form.is_valid():
        messages.error(req, 'Failed to update status: choose a valid status.')
        return _back_to_list(req)

    try:
        student = update_student(student_id, status=form.cleaned_data['status'])
    except Student.DoesNotExist:
        messages.error(req, f'Student {student_id} not found.')
    except ValidationError as exc:
        messages.error(req, f'Failed to update status: {" ".join(exc.messages)}')
    else:
        messages.success(req, f'{student.full_name}: status set to {student.get_status_display()}.')
    return _back_to_list(req)


@require_POST_or_405
def student_upload_view(req, student_id):
    try:
        student = get_student(student_id)
    except Student.DoesNotExist:
        messages.error(req, f'Student {student_id} not found.')
        return _back_to_list(req)

    try:
        store_upload(student, req.FILES.get('file'))
    except UploadRejected as exc:
        messages.error(req, exc.messages[0])
    else:
        messages.success(req, 'File uploaded!')
    return _back_to_list(req)


def student_pdf_view(req, student_id):
    """Download the printable information sheet for one student."""
    try:
        student = get_student(student_id)
    except Student.DoesNotExist:
        raise Http404(f'Student {student_id} not found.')

    response = HttpResponse(render_student_pdf(student), content_type='application/pdf')
    response['Content-Disposition'] = f'attachment; filename="{pdf_filename(student)}"'
    return response

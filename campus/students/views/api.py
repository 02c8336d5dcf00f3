"""
students/views/api.py
─────────────────────
JSON endpoints for student records.

  GET  /api/students               – list (optional ?q= search)
  POST /api/students               – register a student
  PUT  /api/students?id=<number>   – partial update, e.g. {"status": "enrolled"}
  POST /api/upload                 – multipart file + studentId → {"filePath": …}

Errors are always {"error": "..."} with 400 (validation / rejected upload),
404 (unknown student) or 405 (wrong method).
"""

from django.core.exceptions import ValidationError
from django.http import JsonResponse

from core.http import BadJSON, json_body, json_error, validation_error_response

from ..models import Student
from ..services import create_student, get_student, list_students, update_student
from ..uploads import UploadRejected, store_upload

# camelCase API keys → model field names
API_FIELDS = {
    'studentId':          'student_id',
    'lrn':                'lrn',
    'email':              'email',
    'firstName':          'first_name',
    'middleName':         'middle_name',
    'lastName':           'last_name',
    'address':            'address',
    'mobile':             'mobile',
    'landline':           'landline',
    'facebook':           'facebook',
    'birthdate':          'birthdate',
    'birthplace':         'birthplace',
    'nationality':        'nationality',
    'religion':           'religion',
    'sex':                'sex',
    'father':             'father',
    'mother':             'mother',
    'guardian':           'guardian',
    'guardianOccupation': 'guardian_occupation',
    'yearLevel':          'year_level',
    'schoolYear':         'school_year',
    'semester':           'semester',
    'education':          'education',
    'course':             'course',
    'nurserySchool':      'nursery_school',
    'nurseryYear':        'nursery_year',
    'elementarySchool':   'elementary_school',
    'elementaryYear':     'elementary_year',
    'juniorHighSchool':   'junior_high_school',
    'juniorHighYear':     'junior_high_year',
    'seniorHighSchool':   'senior_high_school',
    'seniorHighYear':     'senior_high_year',
    'status':             'status',
    'tuitionFee':         'tuition_fee',
}


def student_to_dict(student):
    data = {key: getattr(student, field) for key, field in API_FIELDS.items()}
    data.update({
        'fullName':         student.full_name,
        'registrationDate': student.registration_date,
        'totalPaid':        student.total_paid,
        'balance':          student.balance,
        'files': [
            {
                'filename':   f.filename,
                'filePath':   f.file_path,
                'mimeType':   f.mime_type,
                'size':       f.size,
                'uploadedAt': f.uploaded_at,
            }
            for f in student.files.all()
        ],
    })
    return data


def _to_fields(payload):
    """Translate API keys to model field names, rejecting unknown keys."""
    unknown = sorted(set(payload) - set(API_FIELDS))
    if unknown:
        raise ValidationError({key: ['Unknown field.'] for key in unknown})
    return {API_FIELDS[key]: value for key, value in payload.items()}


def students_api(req):
    if req.method == 'GET':
        students = list_students(req.GET.get('q', ''))
        return JsonResponse([student_to_dict(s) for s in students], safe=False)

    if req.method not in ('POST', 'PUT'):
        return json_error('Method not allowed.', status=405)

    try:
        fields = _to_fields(json_body(req))
    except BadJSON as exc:
        return json_error(str(exc))
    except ValidationError as exc:
        return validation_error_response(exc)

    if req.method == 'POST':
        try:
            student = create_student(fields)
        except ValidationError as exc:
            return validation_error_response(exc)
        return JsonResponse(student_to_dict(student), status=201)

    student_id = req.GET.get('id', '').strip()
    if not student_id:
        return json_error('Missing ?id=<studentId>.')
    # The student number is the lookup key, not an updatable field.
    fields.pop('student_id', None)

    try:
        student = update_student(student_id, **fields)
    except Student.DoesNotExist:
        return json_error(f'Student {student_id} not found.', status=404)
    except ValidationError as exc:
        return validation_error_response(exc)
    return JsonResponse(student_to_dict(student))


def upload_api(req):
    if req.method != 'POST':
        return json_error('Method not allowed.', status=405)

    student_id = req.POST.get('studentId', '').strip()
    try:
        student = get_student(student_id)
    except Student.DoesNotExist:
        return json_error(f'Student {student_id or "(none)"} not found.', status=404)

    try:
        file_path = store_upload(student, req.FILES.get('file'))
    except UploadRejected as exc:
        return json_error(exc.messages[0])
    return JsonResponse({'filePath': file_path})

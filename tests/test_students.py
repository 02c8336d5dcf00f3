import json
from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError

from students.models import Student
from students.services import create_student, get_student, list_students, update_student


def test_create_student_sets_defaults(db, registration_data):
    student = create_student(registration_data)

    assert student.pk is not None
    assert student.status == Student.Status.MISSING_FILES
    assert student.total_paid == 0
    assert student.balance == Decimal('12000.00')


def test_create_student_rejects_duplicate_student_id(make_student, registration_data):
    make_student(student_id=registration_data['student_id'])

    with pytest.raises(ValidationError) as exc:
        create_student(registration_data)

    assert 'student_id' in exc.value.message_dict
    assert Student.objects.count() == 1


def test_create_student_rejects_duplicate_email(make_student, registration_data):
    make_student(email=registration_data['email'])

    with pytest.raises(ValidationError) as exc:
        create_student(registration_data)

    assert 'email' in exc.value.message_dict


def test_create_student_rejects_duplicate_lrn(make_student, registration_data):
    make_student(lrn='123456789012')

    with pytest.raises(ValidationError) as exc:
        create_student({**registration_data, 'lrn': '123456789012'})

    assert 'lrn' in exc.value.message_dict


def test_students_without_lrn_do_not_collide(make_student, registration_data):
    make_student(lrn=None)

    student = create_student({**registration_data, 'lrn': ''})

    assert student.lrn is None


def test_create_student_rejects_negative_tuition(db, registration_data):
    with pytest.raises(ValidationError) as exc:
        create_student({**registration_data, 'tuition_fee': '-1'})

    assert 'tuition_fee' in exc.value.message_dict


def test_update_status_then_read(make_student):
    student = make_student()

    update_student(student.student_id, status='enrolled')

    assert get_student(student.student_id).status == Student.Status.ENROLLED


def test_update_unknown_student(db):
    with pytest.raises(Student.DoesNotExist):
        update_student('does-not-exist', status='enrolled')


def test_update_rejects_invalid_status(make_student):
    student = make_student()

    with pytest.raises(ValidationError):
        update_student(student.student_id, status='expelled')

    assert get_student(student.student_id).status == Student.Status.MISSING_FILES


def test_update_rejects_non_editable_field(make_student):
    student = make_student()

    with pytest.raises(ValidationError):
        update_student(student.student_id, total_paid='99999')


def test_update_tuition_recomputes_balance(make_student):
    student = make_student(total_paid=Decimal('2000.00'), balance=Decimal('8000.00'))

    updated = update_student(student.student_id, tuition_fee='15000')

    assert updated.balance == Decimal('13000.00')


def test_list_students_search(make_student):
    make_student(first_name='John', last_name='Smith')
    make_student(first_name='Ana', last_name='Reyes')

    names = [s.full_name for s in list_students('john')]

    assert names == ['John Smith']


# ── HTTP ──────────────────────────────────────────────────────────────────────

def test_student_list_page(admin_client, make_student):
    make_student(first_name='John', last_name='Smith')

    response = admin_client.get('/lists/')

    assert response.status_code == 200
    assert b'John Smith' in response.content


def test_api_lists_students(admin_client, make_student):
    make_student()
    make_student()

    response = admin_client.get('/api/students')

    assert response.status_code == 200
    assert len(response.json()) == 2


def test_api_creates_student(admin_client, registration_data):
    payload = {
        'studentId':   registration_data['student_id'],
        'email':       registration_data['email'],
        'firstName':   'Maria',
        'lastName':    'Santos',
        'address':     'Mabini St., Manila',
        'mobile':      '09181234567',
        'birthdate':   '2007-06-01',
        'birthplace':  'Cebu',
        'nationality': 'Filipino',
        'sex':         'Female',
        'yearLevel':   'Grade 10',
        'schoolYear':  '2025-2026',
    }

    response = admin_client.post('/api/students', data=json.dumps(payload), content_type='application/json')

    assert response.status_code == 201
    assert response.json()['fullName'] == 'Maria Santos'


def test_api_put_updates_status(admin_client, make_student):
    student = make_student()

    response = admin_client.put(
        f'/api/students?id={student.student_id}',
        data=json.dumps({'status': 'graduated'}),
        content_type='application/json',
    )

    assert response.status_code == 200
    assert response.json()['status'] == 'graduated'


def test_api_put_unknown_student(admin_client, db):
    response = admin_client.put(
        '/api/students?id=nope',
        data=json.dumps({'status': 'enrolled'}),
        content_type='application/json',
    )

    assert response.status_code == 404
    assert 'error' in response.json()


def test_api_put_bad_status(admin_client, make_student):
    student = make_student()

    response = admin_client.put(
        f'/api/students?id={student.student_id}',
        data=json.dumps({'status': 'expelled'}),
        content_type='application/json',
    )

    assert response.status_code == 400


def test_api_rejects_malformed_json(admin_client, db):
    response = admin_client.post('/api/students', data='{not json', content_type='application/json')

    assert response.status_code == 400


def test_status_page_action(admin_client, make_student):
    student = make_student()

    response = admin_client.post(f'/lists/{student.student_id}/status/', {'status': 'dropped'}, follow=True)

    assert response.status_code == 200
    assert get_student(student.student_id).status == Student.Status.DROPPED


def test_status_page_action_requires_post(admin_client, make_student):
    student = make_student()

    response = admin_client.get(f'/lists/{student.student_id}/status/')

    assert response.status_code == 405


@pytest.mark.parametrize('key, field', [('status', 'status'), ('middleName', 'middle_name'), ('landline', 'landline')])
def test_api_put_null_clears_optional_text(admin_client, make_student, key, field):
    student = make_student(middle_name='Cruz', landline='8123-4567')

    response = admin_client.put(
        f'/api/students?id={student.student_id}',
        data=json.dumps({key: None}),
        content_type='application/json',
    )

    assert response.status_code == 200
    assert getattr(get_student(student.student_id), field) == ''


def test_api_put_null_required_field_is_400(admin_client, make_student):
    student = make_student()

    response = admin_client.put(
        f'/api/students?id={student.student_id}',
        data=json.dumps({'firstName': None}),
        content_type='application/json',
    )

    assert response.status_code == 400
    assert get_student(student.student_id).first_name == 'John'


def test_api_put_negative_tuition_is_400(admin_client, make_student):
    student = make_student()

    response = admin_client.put(
        f'/api/students?id={student.student_id}',
        data=json.dumps({'tuitionFee': '-500'}),
        content_type='application/json',
    )

    assert response.status_code == 400
    assert 'tuition_fee' in response.json()['fields']
    stored = get_student(student.student_id)
    assert stored.tuition_fee == Decimal('10000.00')
    assert stored.balance == Decimal('10000.00')


def test_latest_file_uses_prefetched_files(make_student, django_assert_num_queries):
    student = make_student()
    student.files.create(filename='a.pdf', file_path='/uploads/a.pdf', mime_type='application/pdf', size=1)
    student.files.create(filename='b.jpg', file_path='/uploads/b.jpg', mime_type='image/jpeg', size=1)

    students = list_students()

    with django_assert_num_queries(0):
        assert students[0].latest_file.filename == 'b.jpg'

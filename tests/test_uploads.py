import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from students.models import StudentFile
from students.uploads import UploadRejected, store_upload, validate_upload

JPEG_BYTES = b'\xff\xd8\xff\xe0' + b'\x00' * 64


def test_text_file_is_rejected_without_side_effects(make_student, media_root):
    student = make_student()
    upload = SimpleUploadedFile('notes.txt', b'hello', content_type='text/plain')

    with pytest.raises(UploadRejected) as exc:
        store_upload(student, upload)

    assert exc.value.messages == ['Only JPEG and PDF are allowed.']
    assert not StudentFile.objects.exists()
    assert list(media_root.iterdir()) == []


def test_jpeg_is_stored_and_recorded(make_student, media_root):
    student = make_student(student_id='2025-0042')
    upload = SimpleUploadedFile('photo.jpg', JPEG_BYTES, content_type='image/jpeg')

    file_path = store_upload(student, upload)

    assert file_path == '/uploads/2025-0042-download.jpg'
    assert (media_root / '2025-0042-download.jpg').read_bytes() == JPEG_BYTES
    record = student.files.get()
    assert record.filename == 'photo.jpg'
    assert record.mime_type == 'image/jpeg'
    assert record.size == len(JPEG_BYTES)


def test_reupload_replaces_file(make_student, media_root):
    student = make_student()
    store_upload(student, SimpleUploadedFile('a.pdf', b'%PDF-1.4 first', content_type='application/pdf'))
    store_upload(student, SimpleUploadedFile('b.pdf', b'%PDF-1.4 second', content_type='application/pdf'))

    assert student.files.count() == 1
    assert student.files.get().filename == 'b.pdf'
    assert len(list(media_root.iterdir())) == 1


def test_upload_at_size_limit_is_accepted(make_student, media_root, settings):
    assert settings.CAMPUS_MAX_UPLOAD_SIZE == 10 * 1024 * 1024
    student = make_student(student_id='2025-0050')
    upload = SimpleUploadedFile('scan.pdf', b'\0' * (10 * 1024 * 1024), content_type='application/pdf')

    store_upload(student, upload)

    assert (media_root / '2025-0050-download.pdf').stat().st_size == 10 * 1024 * 1024


def test_upload_one_byte_over_limit_is_rejected(make_student, media_root):
    student = make_student()
    upload = SimpleUploadedFile('scan.pdf', b'\0' * (10 * 1024 * 1024 + 1), content_type='application/pdf')

    with pytest.raises(UploadRejected) as exc:
        store_upload(student, upload)

    assert exc.value.code == 'size'
    assert exc.value.messages == ['File too large. Max 10 MB.']
    assert list(media_root.iterdir()) == []
    assert not StudentFile.objects.exists()


def test_missing_file_is_rejected():
    with pytest.raises(UploadRejected):
        validate_upload(None)


# ── HTTP ──────────────────────────────────────────────────────────────────────

def test_upload_api(admin_client, make_student):
    student = make_student(student_id='2025-0007')
    upload = SimpleUploadedFile('photo.jpg', JPEG_BYTES, content_type='image/jpeg')

    response = admin_client.post('/api/upload', {'studentId': student.student_id, 'file': upload})

    assert response.status_code == 200
    assert response.json() == {'filePath': '/uploads/2025-0007-download.jpg'}


def test_upload_api_rejects_text(admin_client, make_student):
    student = make_student()
    upload = SimpleUploadedFile('notes.txt', b'hello', content_type='text/plain')

    response = admin_client.post('/api/upload', {'studentId': student.student_id, 'file': upload})

    assert response.status_code == 400
    assert response.json()['error'] == 'Only JPEG and PDF are allowed.'


def test_upload_api_unknown_student(admin_client, db):
    upload = SimpleUploadedFile('photo.jpg', JPEG_BYTES, content_type='image/jpeg')

    response = admin_client.post('/api/upload', {'studentId': 'nope', 'file': upload})

    assert response.status_code == 404


def test_upload_page_flashes_success(admin_client, make_student):
    student = make_student()
    upload = SimpleUploadedFile('photo.jpg', JPEG_BYTES, content_type='image/jpeg')

    response = admin_client.post(f'/lists/{student.student_id}/upload/', {'file': upload}, follow=True)

    assert [str(m) for m in response.context['messages']] == ['File uploaded!']


def test_uploaded_file_is_served(admin_client, make_student):
    student = make_student(student_id='2025-0008')
    store_upload(student, SimpleUploadedFile('photo.jpg', JPEG_BYTES, content_type='image/jpeg'))

    response = admin_client.get('/uploads/2025-0008-download.jpg')

    assert response.status_code == 200
    assert b''.join(response.streaming_content) == JPEG_BYTES

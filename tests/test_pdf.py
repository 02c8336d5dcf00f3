from students.pdf import pdf_filename, render_student_pdf


def test_render_student_pdf(make_student):
    student = make_student(first_name='John', last_name='Smith')

    data = render_student_pdf(student)

    assert data.startswith(b'%PDF')
    assert pdf_filename(student) == 'John_Smith_info.pdf'


def test_pdf_download(admin_client, make_student):
    student = make_student(first_name='John', last_name='Smith')

    response = admin_client.get(f'/lists/{student.student_id}/pdf/')

    assert response.status_code == 200
    assert response['Content-Type'] == 'application/pdf'
    assert 'John_Smith_info.pdf' in response['Content-Disposition']
    assert response.content.startswith(b'%PDF')


def test_pdf_unknown_student_is_404(admin_client, db):
    assert admin_client.get('/lists/nope/pdf/').status_code == 404

"""
students/pdf.py
───────────────
Printable information sheet for one student.

render_student_pdf(student) returns the PDF as bytes; the view streams it
back as an attachment.  The sheet carries a QR code of the student number
so a printed copy can be matched back to the record at the registrar's desk.
"""

import io

import qrcode
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas


def student_qr_png(student, box_size=4):
    """PNG bytes of a QR code encoding the student number."""
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=box_size,
        border=2,
    )
    qr.add_data(student.student_id)
    qr.make(fit=True)

    img = qr.make_image(fill_color="#1a1a2e", back_color="white")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def pdf_filename(student):
    return f"{student.first_name}_{student.last_name}_info.pdf".replace(' ', '_')


def _sections(student):
    birthdate = student.birthdate.strftime('%B %d, %Y') if student.birthdate else ''
    return [
        ('Personal Information', [
            ('Student No.', student.student_id),
            ('LRN', student.lrn or ''),
            ('Name', student.full_name),
            ('Sex', student.sex),
            ('Birthdate', birthdate),
            ('Birthplace', student.birthplace),
            ('Nationality', student.nationality),
            ('Religion', student.religion),
        ]),
        ('Contact', [
            ('Address', student.address),
            ('Mobile', student.mobile),
            ('Landline', student.landline),
            ('Email', student.email),
            ('Facebook', student.facebook),
        ]),
        ('Family', [
            ('Father', student.father),
            ('Mother', student.mother),
            ('Guardian', student.guardian),
            ('Guardian occupation', student.guardian_occupation),
        ]),
        ('Enrollment', [
            ('Education', student.education),
            ('Course', student.course),
            ('Year level', student.year_level),
            ('School year', student.school_year),
            ('Semester', student.semester),
            ('Status', student.get_status_display() or 'Unknown'),
        ]),
        ('Prior Schooling', [
            (level, f"{school} ({year})" if year else school)
            for level, school, year in student.schooling_history
        ]),
        ('Tuition', [
            ('Tuition fee', f"{student.tuition_fee:,.2f}"),
            ('Total paid', f"{student.total_paid:,.2f}"),
            ('Balance', f"{student.balance:,.2f}"),
        ]),
    ]


def render_student_pdf(student):
    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=A4)
    c.setTitle(f"{student.full_name} - Student Information")
    width, height = A4
    x, y = 20*mm, height - 20*mm

    c.setFont("Helvetica-Bold", 16)
    c.drawString(x, y, "Student Information Sheet")

    qr = ImageReader(io.BytesIO(student_qr_png(student)))
    c.drawImage(qr, width - 50*mm, height - 50*mm, width=30*mm, height=30*mm)
    y -= 12*mm

    for title, rows in _sections(student):
        if y < 40*mm:
            c.showPage()
            y = height - 20*mm
        c.setFont("Helvetica-Bold", 12)
        c.drawString(x, y, title)
        y -= 6*mm
        c.setFont("Helvetica", 10)
        for label, value in rows:
            c.drawString(x, y, f"{label}:")
            c.drawString(x + 45*mm, y, str(value or '-'))
            y -= 5*mm
        y -= 4*mm

    c.showPage()
    c.save()
    return buffer.getvalue()

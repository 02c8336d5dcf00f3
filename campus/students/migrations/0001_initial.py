# students/migrations/0001_initial.py

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Student',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('student_id', models.CharField(max_length=30, unique=True, verbose_name='Student number')),
                ('lrn', models.CharField(
                    blank=True,
                    help_text='Learner Reference Number (optional, unique when given).',
                    max_length=20,
                    null=True,
                    unique=True,
                    verbose_name='LRN',
                )),
                ('email', models.EmailField(max_length=254, unique=True)),
                ('first_name', models.CharField(max_length=100)),
                ('middle_name', models.CharField(blank=True, max_length=100)),
                ('last_name', models.CharField(max_length=100)),
                ('address', models.CharField(max_length=255)),
                ('mobile', models.CharField(max_length=30)),
                ('landline', models.CharField(blank=True, max_length=30)),
                ('facebook', models.CharField(blank=True, max_length=200)),
                ('birthdate', models.DateField()),
                ('birthplace', models.CharField(max_length=200)),
                ('nationality', models.CharField(max_length=100)),
                ('religion', models.CharField(blank=True, max_length=100)),
                ('sex', models.CharField(
                    choices=[('Male', 'Male'), ('Female', 'Female'), ('Other', 'Other')],
                    max_length=10,
                )),
                ('father', models.CharField(blank=True, max_length=200)),
                ('mother', models.CharField(blank=True, max_length=200)),
                ('guardian', models.CharField(blank=True, max_length=200)),
                ('guardian_occupation', models.CharField(blank=True, max_length=200)),
                ('registration_date', models.DateTimeField(default=django.utils.timezone.now)),
                ('year_level', models.CharField(max_length=50)),
                ('school_year', models.CharField(help_text='e.g. "2025-2026".', max_length=20)),
                ('semester', models.CharField(blank=True, max_length=50)),
                ('education', models.CharField(blank=True, max_length=100)),
                ('course', models.CharField(blank=True, max_length=200)),
                ('nursery_school', models.CharField(blank=True, max_length=200)),
                ('nursery_year', models.CharField(blank=True, max_length=20)),
                ('elementary_school', models.CharField(blank=True, max_length=200)),
                ('elementary_year', models.CharField(blank=True, max_length=20)),
                ('junior_high_school', models.CharField(blank=True, max_length=200)),
                ('junior_high_year', models.CharField(blank=True, max_length=20)),
                ('senior_high_school', models.CharField(blank=True, max_length=200)),
                ('senior_high_year', models.CharField(blank=True, max_length=20)),
                ('status', models.CharField(
                    blank=True,
                    choices=[
                        ('enrolled', 'Enrolled'),
                        ('graduated', 'Graduated'),
                        ('dropped', 'Dropped'),
                        ('missing-files', 'Missing Files'),
                    ],
                    default='missing-files',
                    help_text='Enrollment lifecycle label. Blank means the status was never set.',
                    max_length=20,
                )),
                ('tuition_fee', models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                ('total_paid', models.DecimalField(
                    decimal_places=2,
                    default=0,
                    help_text='Sum of recorded payments. Recomputed whenever a payment is posted.',
                    max_digits=10,
                )),
                ('balance', models.DecimalField(
                    decimal_places=2,
                    default=0,
                    help_text='tuition_fee minus total_paid.',
                    max_digits=10,
                )),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Student',
                'verbose_name_plural': 'Students',
                'ordering': ['last_name', 'first_name', 'student_id'],
            },
        ),
        migrations.CreateModel(
            name='StudentFile',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('filename', models.CharField(help_text='Original name of the uploaded file.', max_length=255)),
                ('file_path', models.CharField(
                    help_text='Public path, e.g. /uploads/2025-0001-download.pdf',
                    max_length=255,
                )),
                ('mime_type', models.CharField(max_length=100)),
                ('size', models.PositiveIntegerField(help_text='Size in bytes.')),
                ('uploaded_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('student', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='files',
                    to='students.student',
                )),
            ],
            options={
                'verbose_name': 'Student File',
                'verbose_name_plural': 'Student Files',
                'ordering': ['uploaded_at', 'id'],
            },
        ),
    ]

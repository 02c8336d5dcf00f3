import datetime
from decimal import Decimal

import pytest

from students.models import Student


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    settings.MEDIA_ROOT = tmp_path
    return tmp_path


@pytest.fixture
def make_student(db):
    counter = {'n': 0}

    def _make(**overrides):
        counter['n'] += 1
        n = counter['n']
        fields = {
            'student_id':  f'2025-{n:04d}',
            'email':       f'student{n}@example.com',
            'first_name':  'John',
            'last_name':   f'Smith{n}',
            'address':     'Rizal St., Quezon City',
            'mobile':      '09171234567',
            'birthdate':   datetime.date(2006, 3, 14),
            'birthplace':  'Manila',
            'nationality': 'Filipino',
            'sex':         Student.Sex.MALE,
            'year_level':  'Grade 11',
            'school_year': '2025-2026',
            'tuition_fee': Decimal('10000.00'),
            'balance':     Decimal('10000.00'),
        }
        fields.update(overrides)
        return Student.objects.create(**fields)

    return _make


@pytest.fixture
def registration_data():
    return {
        'student_id':  '2025-9001',
        'email':       'maria.santos@example.com',
        'first_name':  'Maria',
        'last_name':   'Santos',
        'address':     'Mabini St., Manila',
        'mobile':      '09181234567',
        'birthdate':   '2007-06-01',
        'birthplace':  'Cebu',
        'nationality': 'Filipino',
        'sex':         'Female',
        'year_level':  'Grade 10',
        'school_year': '2025-2026',
        'tuition_fee': '12000.00',
    }

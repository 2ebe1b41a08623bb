import pytest

from nodue.services import roster_service
from nodue.services.roster_service import FACULTY_SCHEMA, STAFF_SCHEMA, STUDENT_SCHEMA

FACULTY = [
    {'name': 'Anuja', 'employee_id': 'EMP10', 'email': 'x@y.com', 'department': 'CSE',
     'designation': 'Professor', 'roles': ['faculty']},
    {'name': 'Ravi', 'employee_id': 'ANU01', 'email': 'ravi@college.edu', 'department': 'ECE',
     'designation': 'Assistant Professor', 'roles': ['hod']},
    {'name': 'Meera', 'employee_id': None, 'email': None, 'department': 'CSE',
     'designation': 'Assistant Professor', 'roles': ['faculty']},
]

STAFF = [
    {'name': 'Kiran', 'employee_id': 'ST01', 'email': 'kiran@college.edu', 'department': 'Library',
     'roles': ['library']},
    {'name': 'Latha', 'employee_id': 'ST02', 'email': 'latha@college.edu', 'department': 'Admin',
     'roles': ['college_office', 'hostel']},
]

STUDENTS = [
    {'name': 'Arjun', 'usn': '1XX21CS001', 'email': 'arjun@college.edu', 'semester': 8,
     'department': 'CSE', 'batch': '2021-2025'},
    {'name': 'Divya', 'usn': '1XX22EC014', 'email': 'divya@college.edu', 'semester': 6,
     'department': 'ECE', 'batch': '2022-2026'},
]


def names(records):
    return [r['name'] for r in records]


def test_search_matches_name_or_identifier():
    result = roster_service.filter_roster(FACULTY, {'search': 'anu'}, FACULTY_SCHEMA)

    assert names(result) == ['Anuja', 'Ravi']


def test_search_matches_email_case_insensitively():
    result = roster_service.filter_roster(STAFF, {'search': 'LATHA@'}, STAFF_SCHEMA)

    assert names(result) == ['Latha']


def test_all_sentinel_skips_dimension():
    criteria = {'search': '', 'department': 'all', 'designation': 'all'}

    assert roster_service.filter_roster(FACULTY, criteria, FACULTY_SCHEMA) == FACULTY


def test_criteria_are_combined():
    criteria = {'department': 'CSE', 'designation': 'Assistant Professor'}

    assert names(roster_service.filter_roster(FACULTY, criteria, FACULTY_SCHEMA)) == ['Meera']


def test_role_filter_checks_membership():
    result = roster_service.filter_roster(STAFF, {'role': 'hostel'}, STAFF_SCHEMA)

    assert names(result) == ['Latha']


def test_semester_matches_query_string():
    result = roster_service.filter_roster(STUDENTS, {'semester': '6'}, STUDENT_SCHEMA)

    assert names(result) == ['Divya']


def test_unknown_value_matches_nothing():
    assert roster_service.filter_roster(STUDENTS, {'batch': '2019-2023'}, STUDENT_SCHEMA) == []


@pytest.mark.parametrize('criteria', [
    {'search': 'anu'},
    {'department': 'CSE'},
    {'search': 'a', 'designation': 'Assistant Professor'},
])
def test_filter_is_idempotent(criteria):
    once = roster_service.filter_roster(FACULTY, criteria, FACULTY_SCHEMA)
    twice = roster_service.filter_roster(once, criteria, FACULTY_SCHEMA)

    assert twice == once


def test_roster_page_reports_totals():
    page = roster_service.roster_page(STUDENTS, {'department': 'ECE'}, STUDENT_SCHEMA)

    assert page['total'] == 2
    assert page['shown'] == 1


def test_list_faculty_and_staff_split_by_role(make_staff):
    make_staff(roles=['faculty'], name='Zara', employee_id='F1', email='zara@college.edu')
    make_staff(roles=['hod', 'faculty'], name='Bala', employee_id='F2', email='bala@college.edu')
    make_staff(roles=['library'], name='Chitra', employee_id='S1', email='chitra@college.edu')
    make_staff(roles=[], name='Nobody', employee_id='N1', email='nobody@college.edu')

    faculty = roster_service.list_faculty()
    staff = roster_service.list_staff()

    assert names(faculty) == ['Bala', 'Zara']
    assert sorted(faculty[0]['roles']) == ['faculty', 'hod']
    assert names(staff) == ['Chitra']
    assert staff[0]['roles'] == ['library']


def test_list_students_and_batches(make_student, add_batch):
    make_student(name='Yamini', usn='U2', email='yamini@college.edu')
    make_student(name='Arjun', usn='U1', email='arjun@college.edu')
    add_batch('2022-2026')
    add_batch('2021-2025')

    assert names(roster_service.list_students()) == ['Arjun', 'Yamini']
    assert roster_service.list_batches() == ['2021-2025', '2022-2026']


def test_search_for_word_all_is_a_real_search():
    records = [
        {'name': 'Allen', 'employee_id': 'EMP20', 'email': 'allen@college.edu'},
        {'name': 'Ravi', 'employee_id': 'EMP21', 'email': 'ravi@college.edu'},
    ]

    result = roster_service.filter_roster(records, {'search': 'all'}, FACULTY_SCHEMA)

    assert names(result) == ['Allen']


def test_blank_search_is_skipped():
    assert roster_service.filter_roster(STAFF, {'search': '   '}, STAFF_SCHEMA) == STAFF

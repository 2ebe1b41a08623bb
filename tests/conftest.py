"""
No-Due clearance service - Test Configuration and Fixtures
"""
import os
from datetime import timedelta

import pytest

os.environ['FLASK_ENV'] = 'testing'

from nodue import create_app
from nodue.models import (
    db, StudentProfile, StaffProfile, UserRole, SubjectAssignment, Batch,
    Application, Notification, BatchSubmissionSetting, GlobalSubmissionSetting
)
from nodue.utils.helpers import utc_now


@pytest.fixture
def app():
    """Application with a fresh in-memory database for each test"""
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    """Put a user id and role in the test client's session"""
    def _login(user_id, role):
        with client.session_transaction() as sess:
            sess['user_id'] = user_id
            sess['user_role'] = role
    return _login


@pytest.fixture
def make_student(app):
    def _make_student(**overrides):
        data = {
            'name': 'Anuja Rao',
            'usn': '1XX21CS001',
            'email': 'anuja@college.edu',
            'department': 'CSE',
            'semester': 8,
            'section': 'A',
            'student_type': 'day',
            'batch': '2021-2025',
            'profile_completed': True,
        }
        data.update(overrides)
        student = StudentProfile(**data)
        db.session.add(student)
        db.session.commit()
        return student
    return _make_student


@pytest.fixture
def make_staff(app):
    def _make_staff(roles=(), **overrides):
        data = {
            'name': 'Ravi Kumar',
            'employee_id': 'EMP001',
            'email': 'ravi@college.edu',
            'department': 'CSE',
            'designation': 'Assistant Professor',
        }
        data.update(overrides)
        member = StaffProfile(**data)
        db.session.add(member)
        db.session.flush()
        for role in roles:
            db.session.add(UserRole(user_id=member.id, role=role))
        db.session.commit()
        return member
    return _make_staff


@pytest.fixture
def make_application(app):
    def _make_application(student, age=timedelta(0), **flags):
        application = Application(
            student_id=student.id,
            department=student.department,
            semester=student.semester,
            batch=student.batch,
            created_at=utc_now() - age,
            **flags
        )
        db.session.add(application)
        db.session.commit()
        return application
    return _make_application


@pytest.fixture
def make_notification(app):
    def _make_notification(user_id, title='Library verified', age=timedelta(0), **overrides):
        data = {
            'user_id': user_id,
            'title': title,
            'message': f"{title} for your application",
            'type': 'approval',
            'created_at': utc_now() - age,
        }
        data.update(overrides)
        notification = Notification(**data)
        db.session.add(notification)
        db.session.commit()
        return notification
    return _make_notification


@pytest.fixture
def add_setting(app):
    """Create a batch setting when batch_name is given, otherwise the global one"""
    def _add_setting(batch_name=None, **fields):
        if batch_name is None:
            setting = GlobalSubmissionSetting(**fields)
        else:
            setting = BatchSubmissionSetting(batch_name=batch_name, **fields)
        db.session.add(setting)
        db.session.commit()
        return setting
    return _add_setting


@pytest.fixture
def add_batch(app):
    def _add_batch(name):
        batch = Batch(name=name)
        db.session.add(batch)
        db.session.commit()
        return batch
    return _add_batch


@pytest.fixture
def assign_subject(app):
    def _assign_subject(faculty, subject_name='Compiler Design'):
        assignment = SubjectAssignment(faculty_id=faculty.id, subject_name=subject_name,
                                       department=faculty.department, semester=6)
        db.session.add(assignment)
        db.session.commit()
        return assignment
    return _assign_subject

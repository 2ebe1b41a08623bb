"""
Person records: students, staff profiles and their roles
"""

from nodue.utils.helpers import isoformat, utc_now
from nodue.models.database import db, generate_id

FACULTY_ROLES = ('faculty', 'hod')
STAFF_ROLES = ('library', 'hostel', 'college_office', 'lab_instructor')


class StudentProfile(db.Model):
    """Student profile"""
    __tablename__ = 'profiles'

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    name = db.Column(db.String(200), nullable=False)
    usn = db.Column(db.String(32), unique=True, nullable=True)
    email = db.Column(db.String(255), unique=True, nullable=True)
    phone = db.Column(db.String(32), nullable=True)
    department = db.Column(db.String(100), nullable=True)
    section = db.Column(db.String(10), nullable=True)
    semester = db.Column(db.Integer, nullable=True)
    student_type = db.Column(db.String(20), nullable=True)
    batch = db.Column(db.String(50), nullable=True)
    photo = db.Column(db.String(500), nullable=True)
    profile_completed = db.Column(db.Boolean, default=False, nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)
    created_at = db.Column(db.DateTime, default=utc_now)

    # Relationships
    applications = db.relationship('Application', backref='student', lazy=True,
                                   cascade='all, delete-orphan')

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'name': self.name,
            'usn': self.usn,
            'email': self.email,
            'phone': self.phone,
            'department': self.department,
            'section': self.section,
            'semester': self.semester,
            'student_type': self.student_type,
            'batch': self.batch,
            'photo': self.photo,
            'profile_completed': self.profile_completed,
            'is_active': self.is_active,
            'created_at': isoformat(self.created_at)
        }


class StaffProfile(db.Model):
    """Faculty and non-teaching staff share one profile table"""
    __tablename__ = 'staff_profiles'

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    name = db.Column(db.String(200), nullable=False)
    employee_id = db.Column(db.String(32), unique=True, nullable=True)
    email = db.Column(db.String(255), unique=True, nullable=True)
    phone = db.Column(db.String(32), nullable=True)
    department = db.Column(db.String(100), nullable=True)
    designation = db.Column(db.String(100), nullable=True)
    is_active = db.Column(db.Boolean, default=True, nullable=False)
    photo = db.Column(db.String(500), nullable=True)
    created_at = db.Column(db.DateTime, default=utc_now)

    def to_dict(self, roles=None):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'name': self.name,
            'employee_id': self.employee_id,
            'email': self.email,
            'phone': self.phone,
            'department': self.department,
            'designation': self.designation,
            'is_active': self.is_active,
            'photo': self.photo,
            'roles': list(roles or []),
            'created_at': isoformat(self.created_at)
        }


class UserRole(db.Model):
    """Role grant for a user"""
    __tablename__ = 'user_roles'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(36), nullable=False, index=True)
    role = db.Column(db.String(50), nullable=False)

    __table_args__ = (
        db.UniqueConstraint('user_id', 'role', name='uq_user_roles_user_role'),
    )


class SubjectAssignment(db.Model):
    """Subject taught by a faculty member"""
    __tablename__ = 'subject_assignments'

    id = db.Column(db.Integer, primary_key=True)
    faculty_id = db.Column(db.String(36), db.ForeignKey('staff_profiles.id'), nullable=False)
    subject_code = db.Column(db.String(32), nullable=True)
    subject_name = db.Column(db.String(200), nullable=False)
    department = db.Column(db.String(100), nullable=True)
    semester = db.Column(db.Integer, nullable=True)


class Batch(db.Model):
    __tablename__ = 'batches'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(50), unique=True, nullable=False)

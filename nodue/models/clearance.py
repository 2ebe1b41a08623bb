"""
Clearance application, notification and submission-window models
"""

from nodue.models.database import db, generate_id
from nodue.utils.helpers import isoformat, utc_now


class Application(db.Model):
    """No-Due application submitted by a student"""
    __tablename__ = 'applications'

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    student_id = db.Column(db.String(36), db.ForeignKey('profiles.id'), nullable=False, index=True)
    # Snapshot of the student's placement at submission time
    department = db.Column(db.String(100), nullable=True)
    semester = db.Column(db.Integer, nullable=True)
    batch = db.Column(db.String(50), nullable=True)
    status = db.Column(db.String(20), default='pending', nullable=False)

    library_verified = db.Column(db.Boolean, default=False, nullable=False)
    hostel_verified = db.Column(db.Boolean, default=False, nullable=False)
    college_office_verified = db.Column(db.Boolean, default=False, nullable=False)
    faculty_verified = db.Column(db.Boolean, default=False, nullable=False)
    hod_verified = db.Column(db.Boolean, default=False, nullable=False)
    payment_verified = db.Column(db.Boolean, default=False, nullable=False)
    lab_verified = db.Column(db.Boolean, default=False, nullable=False)

    library_comment = db.Column(db.Text, nullable=True)
    hostel_comment = db.Column(db.Text, nullable=True)
    college_office_comment = db.Column(db.Text, nullable=True)
    faculty_comment = db.Column(db.Text, nullable=True)
    hod_comment = db.Column(db.Text, nullable=True)
    payment_comment = db.Column(db.Text, nullable=True)
    lab_comment = db.Column(db.Text, nullable=True)

    transaction_id = db.Column(db.String(64), nullable=True)
    created_at = db.Column(db.DateTime, default=utc_now)
    updated_at = db.Column(db.DateTime, default=utc_now, onupdate=utc_now)

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'student_id': self.student_id,
            'department': self.department,
            'semester': self.semester,
            'batch': self.batch,
            'status': self.status,
            'library_verified': self.library_verified,
            'hostel_verified': self.hostel_verified,
            'college_office_verified': self.college_office_verified,
            'faculty_verified': self.faculty_verified,
            'hod_verified': self.hod_verified,
            'payment_verified': self.payment_verified,
            'lab_verified': self.lab_verified,
            'library_comment': self.library_comment,
            'hostel_comment': self.hostel_comment,
            'college_office_comment': self.college_office_comment,
            'faculty_comment': self.faculty_comment,
            'hod_comment': self.hod_comment,
            'payment_comment': self.payment_comment,
            'lab_comment': self.lab_comment,
            'transaction_id': self.transaction_id,
            'created_at': isoformat(self.created_at),
            'updated_at': isoformat(self.updated_at)
        }


class Notification(db.Model):
    """Notification model"""
    __tablename__ = 'notifications'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(36), nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    message = db.Column(db.Text, nullable=False)
    type = db.Column(db.String(20), default='info', nullable=False)
    read = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=utc_now)

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'title': self.title,
            'message': self.message,
            'type': self.type,
            'read': self.read,
            'created_at': isoformat(self.created_at)
        }


class SubmissionSettingMixin:
    enabled = db.Column(db.Boolean, default=True, nullable=False)
    scheduled_start = db.Column(db.DateTime, nullable=True)
    scheduled_end = db.Column(db.DateTime, nullable=True)
    updated_at = db.Column(db.DateTime, default=utc_now, onupdate=utc_now)


class BatchSubmissionSetting(SubmissionSettingMixin, db.Model):
    """Submission window for one batch; overrides the global setting"""
    __tablename__ = 'batch_submission_settings'

    id = db.Column(db.Integer, primary_key=True)
    batch_name = db.Column(db.String(50), unique=True, nullable=False)


class GlobalSubmissionSetting(SubmissionSettingMixin, db.Model):
    """Submission window applied when a batch has no setting of its own"""
    __tablename__ = 'global_submission_settings'

    id = db.Column(db.Integer, primary_key=True)

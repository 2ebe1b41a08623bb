"""
Student routes
"""

from flask import Blueprint, current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError
from nodue.models import db, Application
from nodue.services import SessionService, NotificationFeed
from nodue.services import progress_service, submission_service
from nodue.utils import (
    NoDueException, ProfileIncompleteError, log_error, create_response, isoformat
)

student_bp = Blueprint('student', __name__)


def _profile_redirect(e: ProfileIncompleteError):
    redirect_url = current_app.config['PROFILE_COMPLETION_URL']
    return jsonify(create_response(False, str(e), {"redirect": redirect_url})), e.status_code


def _applications_for(student_id):
    return (Application.query
            .filter_by(student_id=student_id)
            .order_by(Application.created_at.desc())
            .all())


@student_bp.route('/dashboard', methods=['GET'])
def get_dashboard():
    """Profile, clearance progress, permitted actions and latest notifications"""
    try:
        profile = SessionService.require_student_profile()
        decision = submission_service.is_allowed(profile.batch)
        applications = _applications_for(profile.id)

        summary = progress_service.summarize(applications, profile.student_type, decision.allowed)
        feed = NotificationFeed(profile.id)
        summary.update({
            'profile': profile.to_dict(),
            'submission': decision.to_dict(),
            'notifications': feed.latest(current_app.config['NOTIFICATION_PREVIEW_LIMIT']),
            'unread_notifications': feed.unread_count,
        })
        return jsonify(create_response(True, "Dashboard loaded", summary))

    except ProfileIncompleteError as e:
        return _profile_redirect(e)
    except NoDueException as e:
        return jsonify(create_response(False, str(e))), e.status_code
    except Exception as e:
        log_error("Get dashboard error", e)
        return jsonify(create_response(False, "Failed to load dashboard data")), 500


@student_bp.route('/applications', methods=['GET'])
def get_applications():
    """Get student's applications with their progress"""
    try:
        profile = SessionService.require_student_profile()
        applications_data = []
        for app in _applications_for(profile.id):
            data = app.to_dict()
            data['progress'] = progress_service.progress(app, profile.student_type)
            data['pending_count'] = progress_service.pending_count(app, profile.student_type)
            applications_data.append(data)

        return jsonify(create_response(True, "Applications retrieved", applications_data))

    except ProfileIncompleteError as e:
        return _profile_redirect(e)
    except NoDueException as e:
        return jsonify(create_response(False, str(e))), e.status_code
    except Exception as e:
        log_error("Get applications error", e)
        return jsonify(create_response(False, "Failed to get applications")), 500


@student_bp.route('/submission-status', methods=['GET'])
def get_submission_status():
    """Whether a new application can be submitted now"""
    try:
        profile = SessionService.require_student_profile()
        decision = submission_service.is_allowed(profile.batch)
        return jsonify(create_response(True, "Submission status retrieved", decision.to_dict()))

    except ProfileIncompleteError as e:
        return _profile_redirect(e)
    except NoDueException as e:
        return jsonify(create_response(False, str(e))), e.status_code
    except Exception as e:
        log_error("Get submission status error", e)
        return jsonify(create_response(False, "Failed to check submission status")), 500


@student_bp.route('/certificate', methods=['GET'])
def get_certificate():
    """Certificate details, available once the lab instructor has signed off"""
    try:
        profile = SessionService.require_student_profile()
        applications = _applications_for(profile.id)
        current = applications[0] if applications else None

        if current is None:
            return jsonify(create_response(False, "Certificate data not available")), 404
        if not progress_service.can_download_certificate(current):
            return jsonify(create_response(False, "Certificate is available after lab verification")), 403

        certificate = {
            'application_id': current.id,
            'student_name': profile.name,
            'usn': profile.usn,
            'department': current.department or profile.department,
            'semester': current.semester,
            'batch': current.batch,
            'issued_for': isoformat(current.updated_at),
        }
        return jsonify(create_response(True, "Certificate ready", certificate))

    except ProfileIncompleteError as e:
        return _profile_redirect(e)
    except NoDueException as e:
        return jsonify(create_response(False, str(e))), e.status_code
    except Exception as e:
        log_error("Get certificate error", e)
        return jsonify(create_response(False, "Failed to generate certificate")), 500


@student_bp.route('/notifications', methods=['GET'])
def get_notifications():
    """Get student notifications"""
    try:
        user = SessionService.require_role('student')
        feed = NotificationFeed(user['id'])
        data = {
            'notifications': [notification.to_dict() for notification in feed],
            'unread_count': feed.unread_count,
        }
        return jsonify(create_response(True, "Notifications retrieved", data))

    except NoDueException as e:
        return jsonify(create_response(False, str(e))), e.status_code
    except Exception as e:
        log_error("Get notifications error", e)
        return jsonify(create_response(False, "Failed to get notifications")), 500


@student_bp.route('/notifications/<int:notification_id>/read', methods=['POST'])
def mark_notification_read(notification_id):
    try:
        user = SessionService.require_role('student')
        notification = NotificationFeed(user['id']).mark_read(notification_id)
        return jsonify(create_response(True, "Notification marked as read", notification.to_dict()))

    except NoDueException as e:
        return jsonify(create_response(False, str(e))), e.status_code
    except SQLAlchemyError as e:
        log_error("Mark notification read error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Failed to update notification")), 500


@student_bp.route('/notifications/read-all', methods=['POST'])
def mark_all_notifications_read():
    try:
        user = SessionService.require_role('student')
        updated = NotificationFeed(user['id']).mark_all_read()
        return jsonify(create_response(True, "Notifications marked as read", {"updated": updated}))

    except NoDueException as e:
        return jsonify(create_response(False, str(e))), e.status_code
    except SQLAlchemyError as e:
        log_error("Mark all notifications read error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Failed to update notifications")), 500

"""
Admin control panel routes
"""

from flask import Blueprint, request, jsonify
from nodue.models import STAFF_ROLES
from nodue.services import SessionService, DeletionService
from nodue.services import roster_service
from nodue.utils import (
    NoDueException, log_error, create_response, normalize_criterion, validate_choice
)

admin_bp = Blueprint('admin', __name__)


def _criteria(*names):
    criteria = {name: normalize_criterion(request.args.get(name)) for name in names}
    criteria['search'] = (request.args.get('search') or '').strip()
    return criteria


@admin_bp.route('/faculty', methods=['GET'])
def get_faculty():
    """Faculty and HODs, filtered by search, department and designation"""
    try:
        SessionService.require_admin()
        criteria = _criteria('department', 'designation')
        page = roster_service.roster_page(roster_service.list_faculty(), criteria,
                                          roster_service.FACULTY_SCHEMA)
        return jsonify(create_response(True, "Faculty retrieved", page))

    except NoDueException as e:
        return jsonify(create_response(False, str(e))), e.status_code
    except Exception as e:
        log_error("Get faculty error", e)
        return jsonify(create_response(False, "Failed to fetch faculty")), 500


@admin_bp.route('/staff', methods=['GET'])
def get_staff():
    """Non-teaching staff, filtered by search, department and role"""
    try:
        SessionService.require_admin()
        criteria = _criteria('department', 'role')
        validate_choice(criteria['role'], STAFF_ROLES, 'Role')
        page = roster_service.roster_page(roster_service.list_staff(), criteria,
                                          roster_service.STAFF_SCHEMA)
        return jsonify(create_response(True, "Staff retrieved", page))

    except NoDueException as e:
        return jsonify(create_response(False, str(e))), e.status_code
    except Exception as e:
        log_error("Get staff error", e)
        return jsonify(create_response(False, "Failed to fetch staff")), 500


@admin_bp.route('/students', methods=['GET'])
def get_students():
    """Students, filtered by search, semester, department and batch"""
    try:
        SessionService.require_admin()
        criteria = _criteria('semester', 'department', 'batch')
        page = roster_service.roster_page(roster_service.list_students(), criteria,
                                          roster_service.STUDENT_SCHEMA)
        return jsonify(create_response(True, "Students retrieved", page))

    except NoDueException as e:
        return jsonify(create_response(False, str(e))), e.status_code
    except Exception as e:
        log_error("Get students error", e)
        return jsonify(create_response(False, "Failed to fetch students")), 500


@admin_bp.route('/batches', methods=['GET'])
def get_batches():
    try:
        SessionService.require_admin()
        return jsonify(create_response(True, "Batches retrieved", roster_service.list_batches()))

    except NoDueException as e:
        return jsonify(create_response(False, str(e))), e.status_code
    except Exception as e:
        log_error("Get batches error", e)
        return jsonify(create_response(False, "Failed to fetch batches")), 500


@admin_bp.route('/faculty/<faculty_id>', methods=['DELETE'])
def delete_faculty(faculty_id):
    """Delete a faculty member and their subject assignments"""
    try:
        SessionService.require_admin()
        name = DeletionService.delete_faculty(faculty_id)
        return jsonify(create_response(True, f"Faculty {name} deleted successfully"))

    except NoDueException as e:
        return jsonify(create_response(False, str(e))), e.status_code
    except Exception as e:
        log_error("Delete faculty error", e)
        return jsonify(create_response(False, "Failed to delete faculty")), 500


@admin_bp.route('/staff/<staff_id>', methods=['DELETE'])
def delete_staff(staff_id):
    """Delete a staff member"""
    try:
        SessionService.require_admin()
        name = DeletionService.delete_staff(staff_id)
        return jsonify(create_response(True, f"Staff {name} deleted successfully"))

    except NoDueException as e:
        return jsonify(create_response(False, str(e))), e.status_code
    except Exception as e:
        log_error("Delete staff error", e)
        return jsonify(create_response(False, "Failed to delete staff")), 500


@admin_bp.route('/students/<student_id>', methods=['DELETE'])
def delete_student(student_id):
    """Delete a student and their applications"""
    try:
        SessionService.require_admin()
        name = DeletionService.delete_student(student_id)
        return jsonify(create_response(True, f"Student {name} deleted successfully"))

    except NoDueException as e:
        return jsonify(create_response(False, str(e))), e.status_code
    except Exception as e:
        log_error("Delete student error", e)
        return jsonify(create_response(False, "Failed to delete student")), 500

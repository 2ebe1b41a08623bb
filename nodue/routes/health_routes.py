"""
Health check route
"""

from flask import Blueprint, jsonify
from sqlalchemy.exc import SQLAlchemyError
from nodue.models import check_connection
from nodue.utils import log_error, create_response

health_bp = Blueprint('health', __name__)


@health_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint to test database connection"""
    try:
        check_connection()
        return jsonify(create_response(True, "Database connection is working")), 200
    except SQLAlchemyError as e:
        log_error("Health check failed", e)
        return jsonify(create_response(False, "Database connection failed")), 500

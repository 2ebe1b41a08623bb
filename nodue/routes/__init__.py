"""
Routes package initialization
"""

from nodue.routes.admin_routes import admin_bp
from nodue.routes.health_routes import health_bp
from nodue.routes.student_routes import student_bp

__all__ = ['admin_bp', 'health_bp', 'student_bp']

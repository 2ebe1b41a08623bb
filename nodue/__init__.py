"""
No-Due clearance service application factory
"""

import os
from flask import Flask
from flask_cors import CORS
from nodue.models import db, init_db
from nodue.routes import admin_bp, health_bp, student_bp
from nodue.utils import setup_logging, log_info, log_error


def create_app(config_name: str = None) -> Flask:
    """
    Application factory
    
    Args:
        config_name: Configuration name (development, production, testing)
        
    Returns:
        Flask application instance
    """
    app = Flask(__name__)
    
    # Load configuration
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')
    
    # Import and set configuration
    from config import config
    config_class = config.get(config_name, config['default'])
    app.config.from_object(config_class)
    config_class.init_app(app)
    
    # Initialize extensions
    db.init_app(app)
    CORS(app, origins=app.config['CORS_ORIGINS'])
    
    # Setup logging
    with app.app_context():
        setup_logging()
        log_info("Application initialized")
    
    # Register blueprints
    app.register_blueprint(health_bp)
    app.register_blueprint(admin_bp, url_prefix='/api/admin')
    app.register_blueprint(student_bp, url_prefix='/api/student')
    
    # Create database tables
    with app.app_context():
        try:
            init_db()
            log_info("Database tables created successfully")
        except Exception as e:
            log_error("Database initialization warning", e)
    
    return app

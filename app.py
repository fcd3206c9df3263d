"""
PSP Academy - Training Academy Management System
Flask application factory and initialization
"""

import os
import click
import logging
from flask import Flask, g
from flask_wtf.csrf import generate_csrf
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from config import config
from extensions import csrf
from database import close_db, init_db
from utils.api_response import api_success, api_error
from utils.messages import MESSAGES
from utils.permissions import APPLICATION_MODULES


def create_app(config_name=None):
    """
    Application factory for Flask app.

    Args:
        config_name: Configuration name ('development', 'production', 'test')

    Returns:
        Flask application instance
    """
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app = Flask(__name__)

    app.config.from_object(config[config_name])
    app.json.sort_keys = app.config.get('JSON_SORT_KEYS', False)

    initialize_extensions(app)
    register_blueprints(app)
    register_error_handlers(app)
    register_cli_commands(app)
    register_teardown_handlers(app)
    configure_logging(app)

    return app


def initialize_extensions(app):
    """Initialize Flask extensions."""
    csrf.init_app(app)


def register_blueprints(app):
    """Register Flask blueprints."""
    from blueprints.facilities.routes import facilities_bp
    from blueprints.intake.routes import intake_bp
    from blueprints.profiles.routes import profiles_bp
    from blueprints.training.routes import training_bp
    from blueprints.admin.routes import admin_bp

    app.register_blueprint(facilities_bp, url_prefix='/facilities')
    app.register_blueprint(intake_bp, url_prefix='/intake')
    app.register_blueprint(profiles_bp, url_prefix='/profiles')
    app.register_blueprint(training_bp, url_prefix='/training')
    app.register_blueprint(admin_bp, url_prefix='/admin')

    @app.route('/')
    def index():
        """Application name, version and module catalog."""
        return api_success(data={
            'name': app.config.get('APP_NAME', 'PSP Academy'),
            'version': app.config.get('APP_VERSION', '1.0.0'),
            'modules': [{'id': m['id'], 'name': m['name'], 'description': m['description']}
                        for m in APPLICATION_MODULES],
        })

    @app.route('/csrf-token')
    def csrf_token():
        """Token for the X-CSRFToken header of write requests (bound to the session cookie)."""
        return api_success(data={
            'csrf_token': generate_csrf(),
            'header': app.config['WTF_CSRF_HEADERS'][0],
        })


def register_error_handlers(app):
    """Register JSON error handlers."""

    @app.errorhandler(400)
    def bad_request_error(error):
        """Handle 400 errors (malformed requests, CSRF failures)."""
        return api_error(getattr(error, 'description', None) or MESSAGES['json_required'], status=400)

    @app.errorhandler(404)
    def not_found_error(error):
        """Handle 404 errors."""
        return api_error(MESSAGES['not_found'], status=404)

    @app.errorhandler(405)
    def method_not_allowed_error(error):
        """Handle 405 errors."""
        return api_error(MESSAGES['method_not_allowed'], status=405)

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        # Rollback database on error
        db = g.get('db')
        if db:
            db.rollback()
        return api_error(MESSAGES['internal_error'], status=500)


def register_cli_commands(app):
    """Register Flask CLI commands."""

    @app.cli.command('init-db')
    def init_db_command():
        """Initialize database with schema and seed data."""
        click.echo('Initializing database...')
        with app.app_context():
            init_db()
        click.echo('Database initialized successfully!')

    @app.cli.command('create-user')
    @click.argument('username')
    @click.argument('email')
    @click.option('--full-name', prompt=True, help='Full name of the user')
    @click.option('--cell-number', prompt=True, help='Cell number (at least 10 digits)')
    @click.option('--role', default='Administrator', show_default=True, help='Role name')
    def create_user_command(username, email, full_name, cell_number, role):
        """Create a new administered user."""
        from blueprints.admin.services.user_service import create_admin_user
        from models.role import get_role_by_name

        with app.app_context():
            found = get_role_by_name(role)
            if not found:
                click.echo(f'Error creating user: {MESSAGES["role_not_found"]}', err=True)
                raise SystemExit(1)

            user, errors = create_admin_user({
                'username': username,
                'email': email,
                'full_name': full_name,
                'cell_number': cell_number,
                'role': found['id'],
                'status': 'Active',
            })
            if errors:
                for field, message in errors.items():
                    click.echo(f'{field}: {message}', err=True)
                raise SystemExit(1)

            click.echo(f'User created successfully! ID: {user["id"]}')

    @app.cli.command('cleaning-report')
    def cleaning_report_command():
        """List reservations whose facility needs cleaning."""
        from blueprints.facilities.services.reservation_service import get_reservation_service

        with app.app_context():
            pending = get_reservation_service().list_reservations(needs_cleaning=True)

        if not pending:
            click.echo('No facilities need cleaning.')
            return

        for reservation in pending:
            click.echo(f'{reservation.id}  {reservation.facility_label:<24} '
                       f'{reservation.check_in} to {reservation.check_out}  [{reservation.status}]')
        click.echo(f'{len(pending)} reservation(s) need cleaning.')


def register_teardown_handlers(app):
    """Register teardown handlers."""

    @app.teardown_appcontext
    def teardown_db(error):
        """Close database connection at end of request."""
        close_db(error)


def configure_logging(app):
    """
    Route application and module loggers to logs/academy.log.

    Module loggers (logging.getLogger(__name__)) propagate to the root
    logger, so the file handler is attached there; app.logger propagates
    to it as well.
    """
    if app.debug or app.testing:
        app.logger.setLevel(logging.DEBUG)
        logging.getLogger().setLevel(logging.DEBUG)
        return

    os.makedirs('logs', exist_ok=True)

    file_handler = logging.FileHandler('logs/academy.log')
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s %(levelname)s %(name)s: %(message)s [in %(pathname)s:%(lineno)d]'
    ))
    file_handler.setLevel(logging.INFO)

    root = logging.getLogger()
    root.addHandler(file_handler)
    root.setLevel(logging.INFO)

    app.logger.setLevel(logging.INFO)
    app.logger.info('%s %s startup', app.config['APP_NAME'], app.config['APP_VERSION'])

# Create application instance for development server
if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', debug=True)

"""
Flask application factory.
"""
from flask import Flask

from zonehop.config_loader import load_config

CONFIG_OBJECTS = {
    'development': 'flask_app.config.DevelopmentConfig',
    'production': 'flask_app.config.ProductionConfig',
    'testing': 'flask_app.config.TestingConfig',
}


def create_app(config_name='development', settings=None):
    """
    Create and configure the Flask application.

    Args:
        config_name: One of 'development', 'production', 'testing'
        settings: Optional ConverterSettings; loaded from ZONEHOP_CONFIG_FILE
            (or the environment) when omitted
    """
    app = Flask(__name__)

    # Load configuration
    app.config.from_object(CONFIG_OBJECTS.get(config_name, CONFIG_OBJECTS['development']))

    if settings is None:
        settings = load_config(app.config['ZONEHOP_CONFIG_FILE'])
    app.config['ZONEHOP_SETTINGS'] = settings
    app.logger.info("Loaded %d timezones (default %s)", len(settings.timezones), settings.default_zone)

    @app.context_processor
    def inject_event_title():
        """Expose the configured calendar event title to templates."""
        return {'event_title': settings.event_title}

    # Register blueprints
    from flask_app.routes.main import main_bp

    app.register_blueprint(main_bp)

    return app

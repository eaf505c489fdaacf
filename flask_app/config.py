"""
Flask application configuration.
"""
import os


class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-please-change-in-production'
    ZONEHOP_CONFIG_FILE = os.environ.get('ZONEHOP_CONFIG_FILE') or \
        os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'config.ini'))


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration (built-in timezone table, no config file)."""
    TESTING = True
    ZONEHOP_CONFIG_FILE = None

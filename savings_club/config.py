"""Configurazione per l'applicazione Savings Club"""
import os
import logging


class Config:
    """Configurazione principale dell'applicazione"""

    # Database
    # Il file SQLite di default vive nella cartella `instance/` alla root del repository;
    # DATABASE_URL permette di puntare a un altro database relazionale.
    BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        'DATABASE_URL',
        f'sqlite:///{os.path.join(BASE_DIR, "instance", "savings_club.db")}'
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    CREATE_TABLES = True

    # Flask
    SECRET_KEY = os.environ.get('SECRET_KEY', 'savings-club-dev-key')

    # Server
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', 5001))

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', logging.INFO)

    # Upload immagini membri (servite come file statici)
    UPLOAD_FOLDER = os.path.join(os.path.dirname(__file__), 'static', 'images', 'members')
    UPLOAD_URL_PREFIX = '/static/images/members'
    ALLOWED_IMAGE_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp'}
    MAX_CONTENT_LENGTH = 4 * 1024 * 1024

    # Formato valuta (usato nelle view/templates)
    CURRENCY_FORMAT = "€ {:,.2f}"


class TestingConfig(Config):
    """Configurazione per la test suite: database in memoria"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SECRET_KEY = 'testing'
    LOG_LEVEL = logging.DEBUG


config = {
    'default': Config,
    'testing': TestingConfig,
}

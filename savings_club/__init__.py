"""Applicazione Flask per la gestione della cassa comune (Savings Club)"""

from flask import Flask, render_template, request
from flask_sqlalchemy import SQLAlchemy
from datetime import date
import logging
import os
import uuid
from savings_club.config import config

# Istanze globali
db = SQLAlchemy()


def create_app(config_name='default'):
    """Factory pattern per creare l'applicazione Flask"""
    template_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), 'templates'))
    static_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), 'static'))

    app = Flask(__name__,
                template_folder=template_dir,
                static_folder=static_dir)

    app.config.from_object(config[config_name])
    app.logger.setLevel(app.config.get('LOG_LEVEL', logging.INFO))

    # Inizializza le estensioni
    db.init_app(app)

    @app.context_processor
    def inject_today():
        return {'today': date.today()}

    @app.context_processor
    def inject_active_section():
        """Inietta nei template la sezione attiva corrente basandosi sull'endpoint"""
        section_map = {
            'main': 'Overview',
            'payments': 'Payments',
            'members': 'Members',
            'stats': 'Statistics',
        }
        blueprint = (request.endpoint or '').split('.', 1)[0]
        return {'active_section': section_map.get(blueprint, 'Overview')}

    from savings_club.utils.formatting import format_currency, format_decimal
    app.jinja_env.filters['format_currency'] = format_currency
    app.jinja_env.filters['format_decimal'] = format_decimal

    # Importa e registra i blueprint
    from savings_club.views.main import main_bp
    from savings_club.views.members import members_bp
    from savings_club.views.payments import payments_bp
    from savings_club.views.stats import stats_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(members_bp, url_prefix='/members')
    app.register_blueprint(payments_bp, url_prefix='/payments')
    app.register_blueprint(stats_bp, url_prefix='/stats')

    @app.errorhandler(404)
    def not_found(error):
        return render_template('errors/404.html'), 404

    @app.errorhandler(500)
    def internal_error(error):
        request_id = uuid.uuid4().hex
        app.logger.error('Unhandled error (request %s): %s', request_id, error)
        db.session.rollback()
        return render_template('errors/500.html', request_id=request_id), 500

    # Se il database SQLite è un file, assicura che la cartella esista
    db_uri = app.config.get('SQLALCHEMY_DATABASE_URI', '')
    if db_uri.startswith('sqlite:///'):
        os.makedirs(os.path.dirname(os.path.abspath(db_uri[len('sqlite:///'):])), exist_ok=True)

    # Importa i modelli per popolare i metadata e crea le tabelle se mancano
    with app.app_context():
        from savings_club import models  # noqa: F401
        if app.config.get('CREATE_TABLES', True):
            db.create_all()

    return app

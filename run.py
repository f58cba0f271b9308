"""Entry point per l'applicazione.

Questo script avvia l'app Flask e può popolare il database con dati di
esempio se la variabile d'ambiente `SEED_DB` è impostata (es. SEED_DB=1).
"""

import os
from savings_club import create_app


def main():
    app = create_app(os.environ.get('SAVINGS_CLUB_CONFIG', 'default'))

    # Dati di esempio opzionali (usare solo in sviluppo)
    if os.environ.get('SEED_DB') == '1':
        from scripts.seed_sample_data import seed
        with app.app_context():
            seed()

    app.run(host=app.config.get('HOST', '0.0.0.0'), port=app.config.get('PORT', 5001),
            debug=os.environ.get('FLASK_DEBUG') == '1')


if __name__ == '__main__':
    main()

"""Blueprint dell'applicazione."""

from savings_club.views.main import main_bp
from savings_club.views.members import members_bp
from savings_club.views.payments import payments_bp
from savings_club.views.stats import stats_bp

__all__ = ['main_bp', 'members_bp', 'payments_bp', 'stats_bp']

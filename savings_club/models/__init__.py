"""Modelli del database: membri e pagamenti."""

# Import esplicito dei modelli per assicurare che siano registrati quando l'app importa
from savings_club.models.Member import Member  # noqa: F401
from savings_club.models.Payment import Payment  # noqa: F401

__all__ = ['Member', 'Payment']

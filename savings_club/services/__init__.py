"""
Servizio base per la gestione della business logic
"""
import logging

from sqlalchemy.exc import SQLAlchemyError

from savings_club import db
from savings_club.services.errors import StoreError
from savings_club.utils import ValidationUtils

__all__ = ['BaseService']

logger = logging.getLogger(__name__)


class BaseService:
    """Classe base per i servizi con metodi comuni.

    Ogni operazione di scrittura restituisce ``(True, oggetto)`` oppure
    ``(False, errore)``; in caso di errore la sessione viene annullata.
    """

    def __init__(self):
        self.db = db

    def save(self, obj):
        """Salva un oggetto nel database"""
        try:
            self.db.session.add(obj)
            self.db.session.commit()
            return True, obj
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.exception('Errore nel salvataggio di %r', obj)
            return False, StoreError(f'Could not save record: {e}')

    def delete(self, obj):
        """Elimina un oggetto dal database"""
        try:
            self.db.session.delete(obj)
            self.db.session.commit()
            return True, obj
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.exception('Errore nella eliminazione di %r', obj)
            return False, StoreError(f'Could not delete record: {e}')

    def update(self, obj, **kwargs):
        """Aggiorna un oggetto con i parametri forniti"""
        for key, value in kwargs.items():
            if hasattr(obj, key):
                setattr(obj, key, value)
        return self.save(obj)

    def get_by_id(self, model, record_id):
        """Carica un record per chiave primaria; None se l'id non è valido o non esiste"""
        try:
            parsed_id = ValidationUtils.parse_id(record_id)
        except ValueError:
            return None
        if parsed_id is None:
            return None
        return self.db.session.get(model, parsed_id)

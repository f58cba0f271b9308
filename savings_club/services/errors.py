"""Errori restituiti dai servizi.

I servizi non sollevano questi errori verso le view: li restituiscono come
secondo elemento della tupla ``(success, value)``. Le view decidono come
mostrarli (form ripresentato, 404, messaggio flash).
"""


class SavingsClubError(Exception):
    """Errore base con un messaggio leggibile dall'utente"""

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class ValidationError(SavingsClubError):
    """Una o più regole di business violate, raccolte per campo"""

    def __init__(self, errors):
        self.errors = {field: list(messages) for field, messages in errors.items()}
        super().__init__('; '.join(
            message for messages in self.errors.values() for message in messages
        ))

    def __contains__(self, field):
        return field in self.errors

    def for_field(self, field):
        return self.errors.get(field, [])


class NotFoundError(SavingsClubError):
    """Il record richiesto non esiste"""

    def __init__(self, entity, record_id):
        super().__init__(f'{entity} {record_id} not found')
        self.entity = entity
        self.record_id = record_id


class ReferentialIntegrityError(SavingsClubError):
    """Eliminazione rifiutata perché il record è ancora referenziato"""


class StoreError(SavingsClubError):
    """Errore infrastrutturale del database"""

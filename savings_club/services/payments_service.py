"""Servizio per la gestione dei pagamenti: ricerca, validazione e CRUD"""
import logging
from datetime import date
from decimal import ROUND_HALF_UP

from sqlalchemy.orm import joinedload

from savings_club import db
from savings_club.defaults import AMOUNT_MAX, AMOUNT_MIN, CENT, DESCRIPTION_MAX_LENGTH
from savings_club.models.Member import Member
from savings_club.models.Payment import Payment
from savings_club.services import BaseService
from savings_club.services.errors import NotFoundError, ValidationError
from savings_club.services.filters import PaymentFilter, apply_filter
from savings_club.utils import ValidationUtils

logger = logging.getLogger(__name__)


class PaymentsService(BaseService):
    """Servizio per la gestione dei pagamenti"""

    def get_snapshot(self):
        """Tutti i pagamenti con il membro già caricato, in una sola query"""
        return db.session.query(Payment).options(joinedload(Payment.member)).all()

    def search(self, spec=None):
        """Pagamenti che soddisfano il filtro, dal più recente"""
        return apply_filter(self.get_snapshot(), spec or PaymentFilter())

    def get_payment(self, payment_id):
        payment = self.get_by_id(Payment, payment_id)
        if payment is None:
            return False, NotFoundError('Payment', payment_id)
        return True, payment

    def validate_payment(self, member_id, amount, description, payment_date, is_income,
                         allow_inactive_member=False):
        """Valida un pagamento raccogliendo tutti gli errori per campo.

        Restituisce ``(valori_puliti, errori)``; se ``errori`` è vuoto i valori
        possono essere salvati.
        """
        errors = {}
        cleaned = {'is_income': ValidationUtils.parse_flag(is_income)}

        def add_error(field, message):
            errors.setdefault(field, []).append(message)

        try:
            value = ValidationUtils.parse_amount(amount)
            if value < AMOUNT_MIN or value > AMOUNT_MAX:
                add_error('amount', f'Amount must be between {AMOUNT_MIN} and {AMOUNT_MAX:,.2f}.')
            else:
                cleaned['amount'] = value.quantize(CENT, rounding=ROUND_HALF_UP)
        except ValueError as e:
            add_error('amount', str(e))

        text = (description or '').strip()
        if not text:
            add_error('description', 'Description is required.')
        elif len(text) > DESCRIPTION_MAX_LENGTH:
            add_error('description', f'Description must be at most {DESCRIPTION_MAX_LENGTH} characters.')
        else:
            cleaned['description'] = text

        try:
            parsed_date = ValidationUtils.parse_date(payment_date)
            # data locale del server al momento della validazione
            if parsed_date > date.today():
                add_error('date', 'Date must not be in the future.')
            else:
                cleaned['date'] = parsed_date
        except ValueError as e:
            add_error('date', str(e))

        member = self.get_by_id(Member, member_id)
        if member is None:
            add_error('member_id', 'Member does not exist.')
        elif not allow_inactive_member and not member.is_active:
            add_error('member_id', 'No new payments may be recorded for inactive members.')
        else:
            cleaned['member_id'] = member.id

        return cleaned, errors

    def create_payment(self, member_id, amount, description, payment_date, is_income=True):
        """Crea un nuovo pagamento; i membri inattivi non possono riceverne"""
        cleaned, errors = self.validate_payment(member_id, amount, description, payment_date, is_income)
        if errors:
            logger.info('Pagamento rifiutato: %s', errors)
            return False, ValidationError(errors)

        payment = Payment(**cleaned)
        success, result = self.save(payment)
        if success:
            logger.info('Creato pagamento %s', payment.id)
        return success, result

    def update_payment(self, payment_id, member_id, amount, description, payment_date, is_income):
        """Sostituisce tutti i campi modificabili di un pagamento esistente"""
        found, payment = self.get_payment(payment_id)
        if not found:
            return False, payment

        # in modifica si possono referenziare anche membri inattivi
        cleaned, errors = self.validate_payment(member_id, amount, description, payment_date, is_income,
                                                allow_inactive_member=True)
        if errors:
            logger.info('Modifica pagamento %s rifiutata: %s', payment_id, errors)
            return False, ValidationError(errors)

        return self.update(payment, **cleaned)

    def delete_payment(self, payment_id):
        """Elimina un pagamento"""
        found, payment = self.get_payment(payment_id)
        if not found:
            return False, payment
        success, result = self.delete(payment)
        if success:
            logger.info('Eliminato pagamento %s', payment_id)
        return success, result

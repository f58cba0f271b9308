"""
Utilità comuni per l'applicazione
"""
from datetime import datetime
from decimal import Decimal, InvalidOperation

from savings_club.defaults import ID_MAX, ID_MIN


class ValidationUtils:
    """Conversioni strette dei campi dei form: sollevano ValueError"""

    @staticmethod
    def parse_amount(value):
        """Valida e converte un importo in Decimal (accetta anche la virgola)"""
        if isinstance(value, Decimal):
            return value
        if isinstance(value, (int, float)):
            return Decimal(str(value))
        try:
            amount = Decimal(str(value).strip().replace(',', '.'))
        except (InvalidOperation, AttributeError):
            raise ValueError("Amount must be a number.")
        if not amount.is_finite():
            raise ValueError("Amount must be a number.")
        return amount

    @staticmethod
    def parse_date(value):
        """Valida e converte una data ISO (YYYY-MM-DD)"""
        if isinstance(value, datetime):
            return value.date()
        if hasattr(value, 'isoformat'):
            return value
        if value is None or not str(value).strip():
            raise ValueError("Date is required.")
        try:
            return datetime.strptime(str(value).strip(), '%Y-%m-%d').date()
        except ValueError:
            raise ValueError("Date must be a valid date (YYYY-MM-DD).")

    @staticmethod
    def parse_id(value):
        """Converte un identificativo intero; None se assente"""
        if value is None or value == '':
            return None
        try:
            parsed = int(value)
        except (TypeError, ValueError):
            raise ValueError("Invalid identifier.")
        if not ID_MIN <= parsed <= ID_MAX:
            raise ValueError("Invalid identifier.")
        return parsed

    @staticmethod
    def parse_flag(value):
        """Checkbox/flag dei form: 'true', 'on', '1' sono veri"""
        if isinstance(value, bool):
            return value
        return str(value or '').strip().lower() in ('true', 'on', '1', 'yes')


class QueryUtils:
    """Parametri opzionali della query string: un valore non valido vale come assente"""

    @staticmethod
    def optional_int(value):
        try:
            return ValidationUtils.parse_id(value)
        except ValueError:
            return None

    @staticmethod
    def optional_bool(value):
        normalized = str(value or '').strip().lower()
        if normalized == 'true':
            return True
        if normalized == 'false':
            return False
        return None

    @staticmethod
    def optional_date(value):
        if value is None or not str(value).strip():
            return None
        try:
            return ValidationUtils.parse_date(value)
        except ValueError:
            return None

    @staticmethod
    def optional_limit(value):
        limit = QueryUtils.optional_int(value)
        if limit is None or limit < 0:
            return None
        return limit

    @staticmethod
    def optional_text(value):
        text = (value or '').strip()
        return text or None

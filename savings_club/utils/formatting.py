from decimal import Decimal, InvalidOperation

from flask import current_app, has_app_context


def _to_decimal(value):
    if value is None:
        return Decimal('0')
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return Decimal('0')


def format_currency(value, fmt=None):
    """Formatta un valore numerico usando il formato definito in `CURRENCY_FORMAT`."""
    if fmt is None:
        fmt = current_app.config.get('CURRENCY_FORMAT', '€ {:,.2f}') if has_app_context() else '€ {:,.2f}'
    return fmt.format(_to_decimal(value))


def format_decimal(value, decimals=2):
    """Format a numeric value as a plain decimal string with fixed decimals.

    This is useful for data-attributes or JS code that expects a plain numeric
    string (e.g. "123.45") rather than a localized currency string.
    """
    return f'{_to_decimal(value):.{int(decimals)}f}'

"""
Blueprint per la gestione dei pagamenti
"""
from datetime import date

from flask import Blueprint, abort, current_app, flash, redirect, render_template, request, url_for

from savings_club.defaults import INCOME_OPTIONS, LIMIT_OPTIONS
from savings_club.services.errors import NotFoundError, ValidationError
from savings_club.services.filters import PaymentFilter
from savings_club.services.members_service import MembersService
from savings_club.services.payments_service import PaymentsService
from savings_club.utils import QueryUtils

payments_bp = Blueprint('payments', __name__)


def _form_values():
    return {
        'member_id': request.form.get('member_id', ''),
        'amount': request.form.get('amount', ''),
        'description': request.form.get('description', ''),
        'date': request.form.get('date', ''),
        'is_income': request.form.get('is_income'),
    }


def _render_form(template, values, errors=None, include_inactive=False, payment=None, status=200):
    members_service = MembersService()
    members = members_service.get_all_members() if include_inactive else members_service.get_active_members()
    return render_template(template,
                           values=values,
                           errors=errors or {},
                           members=members,
                           payment=payment), status


def _handle_failure(error):
    """Traduce gli errori non di validazione in 404 o messaggio flash"""
    if isinstance(error, NotFoundError):
        abort(404)
    flash(str(error), 'error')
    return redirect(url_for('main.index'))


@payments_bp.route('/')
def lista():
    """Lista dei pagamenti con filtri (testo, membro, tipo, numero di righe)"""
    spec = PaymentFilter(
        text_query=QueryUtils.optional_text(request.args.get('searchTerm')),
        member_id=QueryUtils.optional_int(request.args.get('memberId')),
        is_income=QueryUtils.optional_bool(request.args.get('isIncome')),
        limit=QueryUtils.optional_limit(request.args.get('pageSize')),
    )
    payments = PaymentsService().search(spec)
    members = MembersService().get_all_members()
    return render_template('payments/index.html',
                           payments=payments,
                           members=members,
                           spec=spec,
                           income_options=INCOME_OPTIONS,
                           limit_options=LIMIT_OPTIONS)


@payments_bp.route('/create', methods=['GET', 'POST'])
def create():
    """Crea un nuovo pagamento (solo per membri attivi)"""
    if request.method == 'GET':
        values = {'date': date.today().isoformat(), 'is_income': 'true',
                  'member_id': request.args.get('memberId', '')}
        return _render_form('payments/create.html', values)

    values = _form_values()
    success, result = PaymentsService().create_payment(
        values['member_id'], values['amount'], values['description'], values['date'], values['is_income']
    )
    if success:
        flash('Payment saved', 'success')
        return redirect(url_for('main.index'))
    if isinstance(result, ValidationError):
        return _render_form('payments/create.html', values, result.errors, status=400)
    return _handle_failure(result)


@payments_bp.route('/<int:payment_id>/edit', methods=['GET', 'POST'])
def edit(payment_id):
    """Modifica un pagamento esistente; ammessi anche membri inattivi"""
    service = PaymentsService()
    found, payment = service.get_payment(payment_id)
    if not found:
        return _handle_failure(payment)

    if request.method == 'GET':
        values = {
            'member_id': payment.member_id,
            'amount': f'{payment.amount:.2f}',
            'description': payment.description,
            'date': payment.date.isoformat(),
            'is_income': 'true' if payment.is_income else '',
        }
        return _render_form('payments/edit.html', values, include_inactive=True, payment=payment)

    values = _form_values()
    success, result = service.update_payment(
        payment_id, values['member_id'], values['amount'], values['description'], values['date'],
        values['is_income']
    )
    if success:
        flash('Payment updated', 'success')
        return redirect(url_for('main.index'))
    if isinstance(result, ValidationError):
        return _render_form('payments/edit.html', values, result.errors, include_inactive=True,
                            payment=payment, status=400)
    return _handle_failure(result)


@payments_bp.route('/<int:payment_id>/delete', methods=['GET', 'POST'])
def delete(payment_id):
    """Conferma ed elimina un pagamento"""
    service = PaymentsService()
    if request.method == 'GET':
        found, payment = service.get_payment(payment_id)
        if not found:
            return _handle_failure(payment)
        return render_template('payments/delete.html', payment=payment)

    success, result = service.delete_payment(payment_id)
    if success:
        flash('Payment deleted', 'success')
    elif isinstance(result, NotFoundError):
        # pagamento già eliminato: nulla da fare
        current_app.logger.info('Delete of missing payment %s ignored', payment_id)
    else:
        flash(str(result), 'error')
    return redirect(url_for('main.index'))

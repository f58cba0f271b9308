"""Blueprint principale: lista dei pagamenti con filtri e pagine statiche"""
from flask import Blueprint, render_template, request

from savings_club.defaults import INCOME_OPTIONS, LIMIT_OPTIONS
from savings_club.services.filters import PaymentFilter
from savings_club.services.members_service import MembersService
from savings_club.services.payments_service import PaymentsService
from savings_club.utils import QueryUtils

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    """Panoramica dei pagamenti, filtrabile per testo, tipo, membro e numero di righe"""
    spec = PaymentFilter(
        text_query=QueryUtils.optional_text(request.args.get('search')),
        is_income=QueryUtils.optional_bool(request.args.get('isIncome')),
        member_id=QueryUtils.optional_int(request.args.get('memberId')),
        limit=QueryUtils.optional_limit(request.args.get('limit')),
    )

    payments = PaymentsService().search(spec)
    members = MembersService().get_all_members()

    return render_template('home/index.html',
                           payments=payments,
                           members=members,
                           spec=spec,
                           income_options=INCOME_OPTIONS,
                           limit_options=LIMIT_OPTIONS)


@main_bp.route('/privacy')
def privacy():
    return render_template('privacy.html')

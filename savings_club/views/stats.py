"""Blueprint per le statistiche e il feed JSON del grafico"""
from flask import Blueprint, jsonify, render_template, request

from savings_club.services.statistics import StatisticsService, StatsFilter
from savings_club.utils import QueryUtils

stats_bp = Blueprint('stats', __name__)


def _stats_filter_from_request():
    return StatsFilter(
        date_from=QueryUtils.optional_date(request.args.get('from')),
        date_to=QueryUtils.optional_date(request.args.get('to')),
        member_id=QueryUtils.optional_int(request.args.get('memberId')),
    )


@stats_bp.route('/')
def index():
    """Panoramica generale, statistiche filtrate e top 5 entrate/uscite"""
    stats = StatisticsService().build_stats(_stats_filter_from_request())
    return render_template('stats/index.html', stats=stats)


@stats_bp.route('/chart-data')
def chart_data():
    """Top 5 entrate e uscite come lista JSON di {label, value}"""
    items = StatisticsService().chart_data(_stats_filter_from_request())
    return jsonify([item.to_dict() for item in items])

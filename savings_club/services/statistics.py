"""Statistiche sui pagamenti: totali, classifiche top-N e dati del grafico.

La pagina delle statistiche e il feed JSON del grafico passano entrambi da
`StatisticsService`, così il calcolo esiste in un solo punto.
"""
import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from savings_club.defaults import CENT, CHART_LABEL_SEPARATOR, TOP_N
from savings_club.services.filters import PaymentFilter, apply_filter, as_date

logger = logging.getLogger(__name__)

ZERO = Decimal('0.00')


def to_money(value):
    """Converte un importo in Decimal con esattamente due decimali"""
    if value is None:
        return ZERO
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class PaymentTotals:
    """Conteggi e somme di entrate/uscite; totale e saldo sono derivati"""
    count_income: int = 0
    count_expense: int = 0
    sum_income: Decimal = ZERO
    sum_expense: Decimal = ZERO

    @property
    def count_all(self):
        return self.count_income + self.count_expense

    @property
    def balance(self):
        return to_money(self.sum_income - self.sum_expense)

    def to_dict(self):
        return {
            'count_income': self.count_income,
            'count_expense': self.count_expense,
            'count_all': self.count_all,
            'sum_income': f'{self.sum_income:.2f}',
            'sum_expense': f'{self.sum_expense:.2f}',
            'balance': f'{self.balance:.2f}',
        }


def aggregate(payments):
    """Calcola i totali su un insieme di pagamenti già caricato"""
    count_income = count_expense = 0
    sum_income = sum_expense = ZERO
    for payment in payments:
        if payment.is_income:
            count_income += 1
            sum_income += to_money(payment.amount)
        else:
            count_expense += 1
            sum_expense += to_money(payment.amount)
    return PaymentTotals(
        count_income=count_income,
        count_expense=count_expense,
        sum_income=to_money(sum_income),
        sum_expense=to_money(sum_expense),
    )


@dataclass(frozen=True)
class ChartItem:
    """Una barra del grafico: le uscite hanno valore negativo"""
    label: str
    value: Decimal

    def to_dict(self):
        return {'label': self.label, 'value': f'{self.value:.2f}'}


def chart_label(payment):
    member = payment.member
    name = member.full_name if member is not None else f'#{payment.member_id}'
    return f'{name}{CHART_LABEL_SEPARATOR}{payment.description}'


def ranking_key(payment):
    # importo, poi data e id: a parità di importo vince il pagamento più recente
    return to_money(payment.amount), as_date(payment.date), payment.id or 0


def top_entries(payments, is_income, n=TOP_N):
    """I primi `n` pagamenti della categoria per importo decrescente"""
    candidates = [p for p in payments if bool(p.is_income) == bool(is_income)]
    ranked = sorted(candidates, key=ranking_key, reverse=True)[:n]
    sign = 1 if is_income else -1
    return [ChartItem(label=chart_label(p), value=sign * to_money(p.amount)) for p in ranked]


def top_mixed(payments, n=TOP_N):
    """Classifica combinata: prima le entrate, poi le uscite"""
    payments = list(payments)
    return top_entries(payments, True, n) + top_entries(payments, False, n)


@dataclass(frozen=True)
class StatsFilter:
    """Filtro della pagina statistiche: intervallo di date e membro"""
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    member_id: Optional[int] = None

    @property
    def has_filter_applied(self):
        return self.date_from is not None or self.date_to is not None or self.member_id is not None

    def to_payment_filter(self):
        return PaymentFilter(
            member_id=self.member_id,
            date_from=self.date_from,
            date_to=self.date_to,
        )


@dataclass
class StatsResult:
    overview: PaymentTotals
    filtered: Optional[PaymentTotals]
    filter: StatsFilter
    top5_mixed: List[ChartItem] = field(default_factory=list)
    members: list = field(default_factory=list)

    @property
    def has_filter_applied(self):
        return self.filter.has_filter_applied


class StatisticsService:
    """Servizio per le statistiche: panoramica, dati filtrati e grafico"""

    def __init__(self, payments_service=None, members_service=None):
        # import ritardato per evitare import circolari con i modelli
        from savings_club.services.payments_service import PaymentsService
        from savings_club.services.members_service import MembersService
        self.payments_service = payments_service or PaymentsService()
        self.members_service = members_service or MembersService()

    def _compute(self, stats_filter):
        # Un'unica lettura dal database: panoramica e dati filtrati vengono
        # dallo stesso snapshot e sono quindi coerenti tra loro.
        snapshot = self.payments_service.get_snapshot()
        filtered = apply_filter(snapshot, stats_filter.to_payment_filter())
        return snapshot, filtered

    def build_stats(self, stats_filter=None):
        """Dati completi per la pagina delle statistiche"""
        stats_filter = stats_filter or StatsFilter()
        snapshot, filtered = self._compute(stats_filter)
        result = StatsResult(
            overview=aggregate(snapshot),
            filtered=aggregate(filtered),
            filter=stats_filter,
            top5_mixed=top_mixed(filtered),
            members=self.members_service.get_all_members(),
        )
        logger.debug('Statistiche calcolate: %d pagamenti totali, %d filtrati',
                     result.overview.count_all, result.filtered.count_all)
        return result

    def chart_data(self, stats_filter=None):
        """Solo la classifica combinata, per l'aggiornamento asincrono del grafico"""
        stats_filter = stats_filter or StatsFilter()
        _, filtered = self._compute(stats_filter)
        return top_mixed(filtered)

"""Filtri sui pagamenti.

Il filtro viene trasformato una sola volta in una lista di predicati, poi
applicato come un'unica AND su una collezione di pagamenti già caricata.
Non dipende dalla sessione del database: lavora su qualsiasi iterabile di
oggetti con gli attributi di `Payment`.
"""
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Iterable, List, Optional


def as_date(value):
    """Normalizza datetime -> date (l'ora del giorno non conta)"""
    if isinstance(value, datetime):
        return value.date()
    return value


@dataclass(frozen=True)
class PaymentFilter:
    """Criteri di ricerca; ogni campo a None non vincola nulla.

    ``limit`` a 0 o None significa nessun limite.
    """
    text_query: Optional[str] = None
    member_id: Optional[int] = None
    is_income: Optional[bool] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    limit: Optional[int] = None

    def __post_init__(self):
        if self.limit is not None and self.limit < 0:
            raise ValueError(f'limit must be a non-negative integer, got {self.limit}')
        object.__setattr__(self, 'date_from', as_date(self.date_from))
        object.__setattr__(self, 'date_to', as_date(self.date_to))

    @property
    def search_text(self):
        return (self.text_query or '').strip()


Predicate = Callable[[object], bool]


def build_predicates(spec: PaymentFilter) -> List[Predicate]:
    """Costruisce i predicati per gli assi effettivamente valorizzati"""
    predicates = []

    needle = spec.search_text.casefold()
    if needle:
        predicates.append(lambda p: needle in (p.description or '').casefold())

    if spec.member_id is not None:
        member_id = spec.member_id
        predicates.append(lambda p: p.member_id == member_id)

    if spec.is_income is not None:
        is_income = bool(spec.is_income)
        predicates.append(lambda p: bool(p.is_income) == is_income)

    if spec.date_from is not None:
        date_from = spec.date_from
        predicates.append(lambda p: as_date(p.date) >= date_from)

    if spec.date_to is not None:
        date_to = spec.date_to
        predicates.append(lambda p: as_date(p.date) <= date_to)

    return predicates


def recency_key(payment):
    # id come spareggio: a parità di giorno viene prima il record creato per ultimo
    return as_date(payment.date), payment.id or 0


def canonical_order(payments: Iterable) -> list:
    """Ordina per data decrescente, poi per id decrescente"""
    return sorted(payments, key=recency_key, reverse=True)


def apply_filter(payments: Iterable, spec: Optional[PaymentFilter] = None) -> list:
    """Restituisce i pagamenti che soddisfano tutti i predicati, in ordine canonico.

    L'ordinamento precede il limite, quindi il limite restituisce sempre
    gli N pagamenti più recenti.
    """
    spec = spec or PaymentFilter()
    predicates = build_predicates(spec)
    matches = [p for p in payments if all(predicate(p) for predicate in predicates)]
    ordered = canonical_order(matches)
    if spec.limit:
        return ordered[:spec.limit]
    return ordered

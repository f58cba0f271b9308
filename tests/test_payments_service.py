"""
Tests for payment validation and CRUD through PaymentsService.
"""
from datetime import date, timedelta
from decimal import Decimal

import pytest

from savings_club import db
from savings_club.models.Payment import Payment
from savings_club.services.errors import NotFoundError, ValidationError
from savings_club.services.filters import PaymentFilter
from savings_club.services.payments_service import PaymentsService


@pytest.fixture
def service(app):
    return PaymentsService()


@pytest.fixture
def member(make_member):
    return make_member('Anna', 'Berger')


class TestValidation:

    @pytest.mark.parametrize('amount', ['0.01', '1000000', '1000000.00', '250,50'])
    def test_amount_within_bounds_is_accepted(self, service, member, amount):
        success, result = service.create_payment(member.id, amount, 'Deposit', date.today(), True)
        assert success, result
        assert result.amount == Decimal(amount.replace(',', '.')).quantize(Decimal('0.01'))

    @pytest.mark.parametrize('amount', ['0', '0.00', '1000000.01', '-5', 'abc', ''])
    def test_amount_out_of_bounds_is_rejected(self, service, member, amount):
        success, error = service.create_payment(member.id, amount, 'Deposit', date.today(), True)
        assert not success
        assert isinstance(error, ValidationError)
        assert list(error.errors) == ['amount']

    def test_date_today_is_accepted(self, service, member):
        success, payment = service.create_payment(member.id, '10.00', 'Deposit', date.today(), True)
        assert success
        assert payment.date == date.today()

    def test_date_in_the_future_is_rejected(self, service, member):
        tomorrow = date.today() + timedelta(days=1)
        success, error = service.create_payment(member.id, '10.00', 'Deposit', tomorrow, True)
        assert not success
        assert error.for_field('date') == ['Date must not be in the future.']

    def test_date_as_iso_string(self, service, member):
        success, payment = service.create_payment(member.id, '10.00', 'Deposit', '2024-02-29', False)
        assert success
        assert payment.date == date(2024, 2, 29)
        assert payment.is_income is False

    def test_all_failures_are_reported_together(self, service):
        tomorrow = (date.today() + timedelta(days=1)).isoformat()
        success, error = service.create_payment(999, '10.00', 'Deposit', tomorrow, True)
        assert not success
        assert set(error.errors) == {'date', 'member_id'}
        assert error.for_field('member_id') == ['Member does not exist.']

    def test_description_is_required_and_limited(self, service, member):
        _, error = service.create_payment(member.id, '10.00', '   ', date.today(), True)
        assert 'description' in error
        _, error = service.create_payment(member.id, '10.00', 'x' * 51, date.today(), True)
        assert 'description' in error
        success, payment = service.create_payment(member.id, '10.00', 'x' * 50, date.today(), True)
        assert success

    def test_missing_member_and_date(self, service):
        _, error = service.create_payment('', '10.00', 'Deposit', '', True)
        assert set(error.errors) == {'member_id', 'date'}

    def test_oversized_member_id_is_a_field_error(self, service):
        success, error = service.create_payment('99999999999999999999999', '10.00', 'Deposit', date.today(), True)
        assert not success
        assert error.for_field('member_id') == ['Member does not exist.']

    def test_amount_is_rounded_half_up_to_cents(self, service, member):
        success, payment = service.create_payment(member.id, '0.125', 'Deposit', date.today(), True)
        assert success
        assert payment.amount == Decimal('0.13')

    def test_inactive_member_cannot_receive_new_payments(self, service, make_member):
        inactive = make_member('Stefan', 'Wagner', is_active=False)
        success, error = service.create_payment(inactive.id, '10.00', 'Deposit', date.today(), True)
        assert not success
        assert error.for_field('member_id') == ['No new payments may be recorded for inactive members.']
        assert Payment.query.count() == 0


class TestWrites:

    def test_update_replaces_all_fields(self, service, member, make_member, make_payment):
        other = make_member('Lukas', 'Huber')
        payment = make_payment(member, '10.00', date(2024, 1, 1), 'Deposit', True)

        success, updated = service.update_payment(payment.id, other.id, '99.90', 'Trip', '2024-03-01', False)

        assert success
        assert (updated.member_id, updated.amount, updated.description, updated.date, updated.is_income) == (
            other.id, Decimal('99.90'), 'Trip', date(2024, 3, 1), False
        )

    def test_update_may_reference_inactive_member(self, service, make_member, make_payment):
        inactive = make_member('Stefan', 'Wagner', is_active=False)
        payment = make_payment(inactive, '10.00')

        success, updated = service.update_payment(payment.id, inactive.id, '12.00', 'Deposit', '2024-01-01', True)

        assert success
        assert updated.amount == Decimal('12.00')

    def test_rejected_update_leaves_record_untouched(self, service, member, make_payment):
        payment = make_payment(member, '10.00', date(2024, 1, 1), 'Deposit', True)

        success, error = service.update_payment(payment.id, member.id, '0', 'Changed', '2024-01-01', True)

        assert not success
        db.session.expire_all()
        stored = db.session.get(Payment, payment.id)
        assert stored.description == 'Deposit'
        assert stored.amount == Decimal('10.00')

    def test_update_unknown_payment(self, service, member):
        success, error = service.update_payment(12345, member.id, '10.00', 'Deposit', '2024-01-01', True)
        assert not success
        assert isinstance(error, NotFoundError)

    def test_oversized_payment_id_is_not_found(self, service, member):
        huge_id = 10 ** 23
        assert isinstance(service.get_payment(huge_id)[1], NotFoundError)
        success, error = service.update_payment(huge_id, member.id, '10.00', 'Deposit', '2024-01-01', True)
        assert not success
        assert isinstance(error, NotFoundError)

    def test_delete(self, service, member, make_payment):
        payment = make_payment(member)
        success, _ = service.delete_payment(payment.id)
        assert success
        assert Payment.query.count() == 0

    def test_delete_unknown_payment(self, service):
        success, error = service.delete_payment(12345)
        assert not success
        assert isinstance(error, NotFoundError)


class TestSearch:

    def test_search_returns_filtered_payments_with_members(self, service, member, make_member, make_payment):
        other = make_member('Lukas', 'Huber')
        make_payment(member, '10.00', date(2024, 1, 1), 'Monthly deposit')
        make_payment(other, '20.00', date(2024, 1, 2), 'Monthly deposit')
        make_payment(member, '30.00', date(2024, 1, 3), 'Raffle')

        result = service.search(PaymentFilter(text_query='monthly'))

        assert [p.member.full_name for p in result] == ['Lukas Huber', 'Anna Berger']

    def test_search_without_limit_returns_every_match(self, service, member, make_payment):
        for day in range(1, 21):
            make_payment(member, '1.00', date(2024, 1, day))
        assert len(service.search()) == 20
        assert len(service.search(PaymentFilter(limit=15))) == 15

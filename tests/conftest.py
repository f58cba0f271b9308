"""
Shared test fixtures for the Savings Club tests

Provides the application (in-memory SQLite), test client and small
factories for members and payments.
"""
from datetime import date
from decimal import Decimal

import pytest

from savings_club import create_app, db
from savings_club.models.Member import Member
from savings_club.models.Payment import Payment


@pytest.fixture
def app(tmp_path):
    """Create a fresh application with an empty database for each test"""
    app = create_app('testing')
    app.config['UPLOAD_FOLDER'] = str(tmp_path / 'uploads')
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_member(app):
    """Factory: persist a member and return it"""
    def _make(first_name='Anna', last_name='Berger', is_active=True, image_path=None):
        member = Member(first_name=first_name, last_name=last_name,
                        is_active=is_active, image_path=image_path)
        db.session.add(member)
        db.session.commit()
        return member
    return _make


@pytest.fixture
def make_payment(app):
    """Factory: persist a payment bypassing the service validation"""
    def _make(member, amount='10.00', payment_date=date(2024, 1, 1), description='Deposit', is_income=True):
        payment = Payment(member_id=member.id, amount=Decimal(amount), date=payment_date,
                          description=description, is_income=is_income)
        db.session.add(payment)
        db.session.commit()
        return payment
    return _make

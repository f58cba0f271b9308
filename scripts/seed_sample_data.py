#!/usr/bin/env python3
"""Inserisce membri e pagamenti di esempio usando i servizi dell'applicazione.

Sicuro da rieseguire: se esistono già membri non fa nulla (usa --force per
aggiungere comunque un nuovo lotto).
"""
import argparse
from datetime import date

from dateutil.relativedelta import relativedelta

from savings_club import create_app
from savings_club.models.Member import Member
from savings_club.services.members_service import MembersService
from savings_club.services.payments_service import PaymentsService

SAMPLE_MEMBERS = [
    ('Anna', 'Berger', True),
    ('Lukas', 'Huber', True),
    ('Maria', 'Gruber', True),
    ('Stefan', 'Wagner', False),
]

# (indice membro, mesi fa, importo, descrizione, entrata?)
SAMPLE_PAYMENTS = [
    (0, 5, '50.00', 'Monthly deposit', True),
    (1, 5, '50.00', 'Monthly deposit', True),
    (2, 4, '120.00', 'Summer party surplus', True),
    (0, 4, '35.50', 'Drinks for meeting', False),
    (3, 3, '50.00', 'Monthly deposit', True),
    (1, 3, '210.00', 'Trip deposit', False),
    (2, 2, '75.25', 'Christmas market booth', True),
    (0, 1, '18.90', 'Stationery', False),
    (1, 1, '300.00', 'Raffle proceeds', True),
    (2, 0, '45.00', 'Bank fees', False),
]


def seed(force=False):
    members_service = MembersService()
    payments_service = PaymentsService()

    if Member.query.count() and not force:
        print('Members already present, nothing to do (use --force to add more).')
        return 0

    members = []
    for first_name, last_name, _ in SAMPLE_MEMBERS:
        success, result = members_service.create_member(first_name, last_name, True)
        if not success:
            print(f'Could not create {first_name} {last_name}: {result}')
            return 1
        members.append(result)

    today = date.today()
    created = 0
    for member_idx, months_ago, amount, description, is_income in SAMPLE_PAYMENTS:
        success, result = payments_service.create_payment(
            members[member_idx].id, amount, description, today - relativedelta(months=months_ago), is_income
        )
        if success:
            created += 1
        else:
            print(f'Skipped payment {description!r}: {result}')

    # i membri inattivi vengono disattivati dopo aver registrato lo storico
    for member, (_, _, is_active) in zip(members, SAMPLE_MEMBERS):
        if not is_active:
            members_service.update_member(member.id, member.first_name, member.last_name, False)

    print(f'Created {len(members)} members and {created} payments')
    return 0


def main():
    parser = argparse.ArgumentParser(description='Seed the savings club database with sample data')
    parser.add_argument('--force', action='store_true', help='add sample data even if members exist')
    parser.add_argument('--config', default='default', help='configuration name (default: default)')
    args = parser.parse_args()

    app = create_app(args.config)
    with app.app_context():
        return seed(force=args.force)


if __name__ == '__main__':
    raise SystemExit(main())

"""Modello per i pagamenti (entrate e uscite)"""
from savings_club import db
from savings_club.defaults import DESCRIPTION_MAX_LENGTH


class Payment(db.Model):
    """Singola entrata o uscita legata a un membro.

    `amount` è sempre positivo: la direzione è data solo da `is_income`.
    """
    __tablename__ = 'payments'

    id = db.Column(db.Integer, primary_key=True)
    is_income = db.Column(db.Boolean, nullable=False, default=True)
    amount = db.Column(db.Numeric(18, 2), nullable=False)
    description = db.Column(db.String(DESCRIPTION_MAX_LENGTH), nullable=False)
    date = db.Column(db.Date, nullable=False, index=True)
    member_id = db.Column(db.Integer, db.ForeignKey('members.id'), nullable=False)
    member = db.relationship('Member', back_populates='payments')

    __table_args__ = (
        db.CheckConstraint('amount > 0', name='ck_payments_amount_positive'),
    )

    def __repr__(self):
        kind = 'income' if self.is_income else 'expense'
        return f'<Payment {self.description}: {self.amount} ({kind})>'

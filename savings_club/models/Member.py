"""Modello per i membri della cassa"""
from savings_club import db
from savings_club.defaults import NAME_MAX_LENGTH


class Member(db.Model):
    """Partecipante che può registrare pagamenti; può essere attivo o inattivo"""
    __tablename__ = 'members'

    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(NAME_MAX_LENGTH), nullable=False)
    last_name = db.Column(db.String(NAME_MAX_LENGTH), nullable=False)
    image_path = db.Column(db.String(255), nullable=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    # L'eliminazione di un membro con pagamenti è rifiutata dal service,
    # quindi niente cascade sui pagamenti.
    payments = db.relationship('Payment', back_populates='member', lazy=True)

    @property
    def full_name(self):
        return f'{self.first_name} {self.last_name}'

    def __repr__(self):
        return f'<Member {self.full_name} ({"active" if self.is_active else "inactive"})>'

"""Servizio per la gestione dei membri della cassa"""
import logging
import os
import uuid

from flask import current_app
from werkzeug.utils import secure_filename

from savings_club.defaults import NAME_MAX_LENGTH
from savings_club.models.Member import Member
from savings_club.models.Payment import Payment
from savings_club.services import BaseService
from savings_club.services.errors import NotFoundError, ReferentialIntegrityError, ValidationError
from savings_club.utils import ValidationUtils

logger = logging.getLogger(__name__)

DELETE_REFUSED_MESSAGE = (
    'Deletion not possible: This member has existing payments. '
    'Please mark the member as inactive instead.'
)


class MembersService(BaseService):
    """Servizio per la gestione dei membri"""

    def get_all_members(self):
        """Tutti i membri ordinati per cognome e nome"""
        return Member.query.order_by(Member.last_name.asc(), Member.first_name.asc()).all()

    def get_active_members(self):
        """Solo i membri attivi (possono ricevere nuovi pagamenti)"""
        return Member.query.filter(Member.is_active.is_(True)).order_by(
            Member.last_name.asc(), Member.first_name.asc()
        ).all()

    def get_member(self, member_id):
        member = self.get_by_id(Member, member_id)
        if member is None:
            return False, NotFoundError('Member', member_id)
        return True, member

    def count_payments(self, member_id):
        return Payment.query.filter_by(member_id=member_id).count()

    def validate_member(self, first_name, last_name, image=None):
        """Valida nome, cognome ed eventuale immagine raccogliendo tutti gli errori"""
        errors = {}
        cleaned = {}
        for field, label, value in (('first_name', 'First name', first_name),
                                    ('last_name', 'Last name', last_name)):
            text = (value or '').strip()
            if not text:
                errors.setdefault(field, []).append(f'{label} is required.')
            elif len(text) > NAME_MAX_LENGTH:
                errors.setdefault(field, []).append(f'{label} must be at most {NAME_MAX_LENGTH} characters.')
            else:
                cleaned[field] = text

        if has_upload(image) and not self.is_allowed_image(image.filename):
            allowed = ', '.join(sorted(current_app.config['ALLOWED_IMAGE_EXTENSIONS']))
            errors.setdefault('image', []).append(f'Image must be one of: {allowed}.')

        return cleaned, errors

    def is_allowed_image(self, filename):
        if '.' not in filename:
            return False
        extension = filename.rsplit('.', 1)[1].lower()
        return extension in current_app.config['ALLOWED_IMAGE_EXTENSIONS']

    def store_image(self, image):
        """Salva l'immagine caricata con un nome univoco e restituisce il path pubblico"""
        filename = secure_filename(image.filename)
        extension = os.path.splitext(filename)[1].lower()
        stored_name = f'{uuid.uuid4().hex}{extension}'
        upload_folder = current_app.config['UPLOAD_FOLDER']
        os.makedirs(upload_folder, exist_ok=True)
        image.save(os.path.join(upload_folder, stored_name))
        return f"{current_app.config['UPLOAD_URL_PREFIX']}/{stored_name}"

    def create_member(self, first_name, last_name, is_active=True, image=None):
        """Crea un nuovo membro con immagine opzionale"""
        cleaned, errors = self.validate_member(first_name, last_name, image)
        if errors:
            return False, ValidationError(errors)

        member = Member(is_active=ValidationUtils.parse_flag(is_active), **cleaned)
        if has_upload(image):
            member.image_path = self.store_image(image)

        success, result = self.save(member)
        if success:
            logger.info('Creato membro %s (%s)', member.id, member.full_name)
        return success, result

    def update_member(self, member_id, first_name, last_name, is_active, image=None):
        """Aggiorna nome, cognome e stato; l'immagine viene sostituita solo se caricata"""
        found, member = self.get_member(member_id)
        if not found:
            return False, member

        cleaned, errors = self.validate_member(first_name, last_name, image)
        if errors:
            return False, ValidationError(errors)

        cleaned['is_active'] = ValidationUtils.parse_flag(is_active)
        if has_upload(image):
            cleaned['image_path'] = self.store_image(image)
        return self.update(member, **cleaned)

    def delete_member(self, member_id):
        """Elimina un membro solo se non ha pagamenti associati"""
        found, member = self.get_member(member_id)
        if not found:
            return False, member

        num_payments = self.count_payments(member.id)
        if num_payments:
            logger.warning('Eliminazione membro %s rifiutata: %d pagamenti associati', member_id, num_payments)
            return False, ReferentialIntegrityError(DELETE_REFUSED_MESSAGE)

        success, result = self.delete(member)
        if success:
            logger.info('Eliminato membro %s', member_id)
        return success, result


def has_upload(image):
    return image is not None and bool(getattr(image, 'filename', ''))

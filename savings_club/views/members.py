"""
Blueprint per la gestione dei membri
"""
from flask import Blueprint, abort, flash, redirect, render_template, request, url_for

from savings_club.services.errors import NotFoundError, ValidationError
from savings_club.services.members_service import MembersService

members_bp = Blueprint('members', __name__)


def _form_values():
    return {
        'first_name': request.form.get('first_name', ''),
        'last_name': request.form.get('last_name', ''),
        'is_active': request.form.get('is_active'),
    }


@members_bp.route('/')
def lista():
    """Lista dei membri ordinata per cognome e nome"""
    members = MembersService().get_all_members()
    return render_template('members/index.html', members=members)


@members_bp.route('/create', methods=['GET', 'POST'])
def create():
    """Crea un nuovo membro con immagine opzionale"""
    if request.method == 'GET':
        return render_template('members/create.html', values={'is_active': 'true'}, errors={})

    values = _form_values()
    success, result = MembersService().create_member(
        values['first_name'], values['last_name'], values['is_active'], request.files.get('image')
    )
    if success:
        flash(f"Member '{result.full_name}' created", 'success')
        return redirect(url_for('members.lista'))
    if isinstance(result, ValidationError):
        return render_template('members/create.html', values=values, errors=result.errors), 400
    flash(str(result), 'error')
    return redirect(url_for('members.lista'))


@members_bp.route('/<int:member_id>/edit', methods=['GET', 'POST'])
def edit(member_id):
    """Modifica nome, cognome, stato e immagine di un membro"""
    service = MembersService()
    found, member = service.get_member(member_id)
    if not found:
        abort(404)

    if request.method == 'GET':
        values = {
            'first_name': member.first_name,
            'last_name': member.last_name,
            'is_active': 'true' if member.is_active else '',
        }
        return render_template('members/edit.html', member=member, values=values, errors={})

    values = _form_values()
    success, result = service.update_member(
        member_id, values['first_name'], values['last_name'], values['is_active'], request.files.get('image')
    )
    if success:
        flash(f"Member '{result.full_name}' updated", 'success')
        return redirect(url_for('members.lista'))
    if isinstance(result, ValidationError):
        return render_template('members/edit.html', member=member, values=values, errors=result.errors), 400
    flash(str(result), 'error')
    return redirect(url_for('members.lista'))


@members_bp.route('/<int:member_id>/delete', methods=['GET', 'POST'])
def delete(member_id):
    """Conferma ed elimina un membro; rifiutato se ha pagamenti"""
    service = MembersService()
    if request.method == 'GET':
        found, member = service.get_member(member_id)
        if not found:
            abort(404)
        return render_template('members/delete.html', member=member,
                               num_payments=service.count_payments(member_id))

    success, result = service.delete_member(member_id)
    if success:
        flash('Member deleted', 'success')
    elif isinstance(result, NotFoundError):
        abort(404)
    else:
        flash(str(result), 'error')
    return redirect(url_for('members.lista'))

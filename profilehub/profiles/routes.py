"""
Profile Routes

Every route except the landing page sits behind ``login_required``. Form
submissions redirect back to the list with 303 so a browser refresh does
not resubmit them.
"""

import logging

from flask import render_template, request, redirect, url_for

from profilehub.auth.decorators import login_required
from profilehub.extensions import get_profile_store
from profilehub.profiles import profiles_bp
from profilehub.utils import parse_int

logger = logging.getLogger(__name__)


def _profile_id():
    # Query string on GET, form field on POST
    return parse_int(request.values.get('id'), 'Profile ID')


def _profile_form():
    return (request.form.get('name', ''),
            request.form.get('age', ''),
            request.form.get('occupation', ''))


def _back_to_list():
    return redirect(url_for('profiles.list_profiles'), code=303)


@profiles_bp.route('/')
def index():
    """Landing page, open to everyone"""
    return render_template('index.html')


@profiles_bp.route('/profiles')
@login_required
def list_profiles():
    profiles = get_profile_store().list_all()
    return render_template('profiles.html', profiles=profiles)


@profiles_bp.route('/profile')
@login_required
def show_profile():
    profile = get_profile_store().get_by_id(_profile_id())
    return render_template('profile.html', profile=profile)


@profiles_bp.route('/addprofile', methods=['GET', 'POST'])
@login_required
def add_profile():
    if request.method == 'POST':
        get_profile_store().create(*_profile_form())
        return _back_to_list()

    return render_template('addprofile.html')


@profiles_bp.route('/editprofile', methods=['GET', 'POST'])
@login_required
def edit_profile():
    """Show the edit form for a profile, or save the submitted fields."""
    profile_id = _profile_id()
    if request.method == 'POST':
        get_profile_store().update(profile_id, *_profile_form())
        logger.info('Profile %s updated', profile_id)
        return _back_to_list()

    profile = get_profile_store().get_by_id(profile_id)
    return render_template('editprofile.html', profile=profile)


@profiles_bp.route('/deleteprofile', methods=['GET', 'POST'])
@login_required
def delete_profile():
    """Ask for confirmation, then delete on POST."""
    profile_id = _profile_id()
    if request.method == 'POST':
        get_profile_store().delete(profile_id)
        logger.info('Profile %s deleted', profile_id)
        return _back_to_list()

    profile = get_profile_store().get_by_id(profile_id)
    return render_template('deleteprofile.html', profile=profile)

"""
Auth Routes

User registration, login and logout. The login handler is the only code
that marks a session as authenticated, and only after the password has
been verified.
"""

import logging

from flask import render_template, request, redirect, url_for, flash

from profilehub.auth import auth_bp
from profilehub.errors import Conflict, InvalidCredentials, ValidationError
from profilehub.extensions import get_credential_store, get_session_manager

logger = logging.getLogger(__name__)


@auth_bp.route('/register', methods=['GET', 'POST'])
def register():
    """User registration route"""
    if request.method == 'POST':
        username = request.form.get('username', '').strip()
        password = request.form.get('password', '')

        try:
            get_credential_store().register(username, password)
        except (ValidationError, Conflict) as e:
            flash(e.description, 'danger')
            return render_template('register.html'), e.code

        flash('Registration successful! Please login.', 'success')
        return redirect(url_for('auth.login'), code=303)

    return render_template('register.html')


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """User login route"""
    if request.method == 'POST':
        username = request.form.get('username', '').strip()
        password = request.form.get('password', '')

        try:
            get_credential_store().authenticate(username, password)
        except InvalidCredentials as e:
            logger.info('Failed login for %r', username)
            flash(e.description, 'danger')
            return render_template('login.html'), e.code

        get_session_manager().establish(username)
        logger.info('User %s logged in', username)
        return redirect(url_for('profiles.list_profiles'), code=303)

    return render_template('login.html')


@auth_bp.route('/logout')
def logout():
    """Clear the session and go back to the login page"""
    username = get_session_manager().load().username
    get_session_manager().clear()
    if username:
        logger.info('User %s logged out', username)
    return redirect(url_for('auth.login'), code=303)

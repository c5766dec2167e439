"""
Profiles Blueprint

Landing page and the profile list/view/add/edit/delete pages.
"""

from flask import Blueprint

profiles_bp = Blueprint('profiles', __name__)

from profilehub.profiles import routes  # noqa: E402, F401

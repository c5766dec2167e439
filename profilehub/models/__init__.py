"""
Models Package

Exports all models for easy importing.
"""

from profilehub.models.user import User
from profilehub.models.profile import Profile

__all__ = ['User', 'Profile']

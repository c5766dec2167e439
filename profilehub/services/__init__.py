"""
Services Package

Exports all services for easy importing.
"""

from profilehub.services.credentials import CredentialStore
from profilehub.services.profiles import ProfileStore

__all__ = [
    'CredentialStore',
    'ProfileStore',
]

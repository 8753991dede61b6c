"""
Configuration for the storage client
"""

from .settings import Settings, settings

__all__ = ['Settings', 'settings']

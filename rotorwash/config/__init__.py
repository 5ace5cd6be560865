"""
Configuration package for the RotorWash theme settings service.

This package contains the environment settings and the logging
configuration used by the application.
"""

from rotorwash.config.settings import Settings, get_settings, settings

__all__ = ['Settings', 'get_settings', 'settings']

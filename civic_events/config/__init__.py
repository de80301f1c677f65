"""Configuration package."""

from .environment import IS_PRODUCTION_ENVIRONMENT, DISPLAY_LOCALE

__all__ = ['IS_PRODUCTION_ENVIRONMENT', 'DISPLAY_LOCALE']

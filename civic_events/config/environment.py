"""Environment configuration module.

This module MUST be imported before any other project modules that depend on environment variables.
It loads the .env file and sets up the environment configuration that will be used throughout the project,
both when running the FastAPI app and when running standalone scripts.

Usage:
    from civic_events.config.environment import IS_PRODUCTION_ENVIRONMENT

Note:
    In production, environment variables should be set directly in the
    platform's environment configuration rather than in a .env file.
"""

import os
import logging
from dotenv import load_dotenv

# Load environment variables - this must happen before any other imports
load_dotenv()

# Environment configuration
env_setting = os.environ.get('ENVIRONMENT', '').lower()
IS_PRODUCTION_ENVIRONMENT = env_setting == 'production'

if env_setting not in ['development', 'production']:
    logging.warning(
        f"Environment setting '{env_setting}' is invalid or not specified. "
        "Expected 'development' or 'production'. Defaulting to development environment."
    )

# Optional locale override for date formatting (e.g. 'de_DE')
DISPLAY_LOCALE = os.environ.get('CIVIC_EVENTS_LOCALE') or None

__all__ = ['IS_PRODUCTION_ENVIRONMENT', 'DISPLAY_LOCALE']

#!/usr/bin/env python3

import sys
from pathlib import Path

# Add project root to Python path
sys.path.append(str(Path(__file__).parent.parent))

from civic_events.db import EventRepository, db
from civic_events.utils.logging_config import setup_logging

setup_logging()

def clear_all_events():
    """Clear all events from the database"""
    db.init_db()
    EventRepository(db).clear()

if __name__ == "__main__":
    clear_all_events()

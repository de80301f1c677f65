"""Main application entry point."""

import os

from civic_events.config.environment import IS_PRODUCTION_ENVIRONMENT
from civic_events.api.app import app

if __name__ == "__main__":
    import uvicorn

    port = int(os.environ.get('PORT', 8000))
    if not IS_PRODUCTION_ENVIRONMENT:
        # Import string so reload can re-import the app
        uvicorn.run(
            "civic_events.api.app:app",
            host="0.0.0.0",
            port=port,
            reload=True,
            log_level="debug"
        )
    else:
        uvicorn.run(app, host="0.0.0.0", port=port)

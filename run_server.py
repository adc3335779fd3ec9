#!/usr/bin/env python3
"""Development server runner for Starforge."""

import uvicorn

from starforge.config import Settings

if __name__ == "__main__":
    settings = Settings.from_env()
    uvicorn.run(
        "starforge.server.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,  # Auto-reload on code changes
        log_level=settings.log_level.lower(),
    )

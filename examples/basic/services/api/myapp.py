"""API service overrides, evaluated when the file is loaded."""

import os


async def config():
    return {
        "environment": os.environ.get("MYAPP_ENV", "development"),
        "workers": os.cpu_count() or 1,
    }

"""Run the NOVA API locally with auto-reload.

Host, port and log level come from the environment or ``.env``
(see :mod:`app.core.config`).  Requires the project to be installed,
e.g. ``pip install -e .``.

Usage:
    python scripts/run_dev.py
"""

import uvicorn
from dotenv import load_dotenv

load_dotenv()

from app.core.config import settings  # noqa: E402  (reads the loaded environment)

if __name__ == "__main__":
    print(f"NOVA Performance Engine on http://{settings.HOST}:{settings.PORT} (docs at /docs)")
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=True,
        log_config=None,
        log_level=settings.LOG_LEVEL.lower(),
    )

# run_dev.py
"""
Local development launcher for FastAPI.
Equivalent to: `uvicorn src.app:app --reload --host 0.0.0.0 --port 8000`
"""

import logging

import uvicorn

from src.settings import settings

if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    uvicorn.run(
        "src.app:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )

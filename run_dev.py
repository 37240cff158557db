# run_dev.py
"""
Local development launcher for FastAPI.
Equivalent to: `uvicorn src.app:app --reload --host 0.0.0.0 --port 4000`
"""

import uvicorn

from src.settings import settings

if __name__ == "__main__":
    uvicorn.run(
        "src.app:app",
        host="0.0.0.0",
        port=settings.API_PORT,
        reload=True,
    )

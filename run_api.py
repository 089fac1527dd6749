"""
Main entry point for the FastAPI application.

Usage:
    python run_api.py

Or with uvicorn directly:
    uvicorn gift_exchange.fastapi_app:create_default_app --factory --host 0.0.0.0 --port 5001
"""

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from gift_exchange.config.settings import Config

if __name__ == "__main__":
    debug = Config.APP_ENV == "development"

    print(f"Starting FastAPI application in {Config.APP_ENV} mode...")
    print(f"Server running on http://{Config.HOST}:{Config.PORT}")
    print(f"API docs available at http://{Config.HOST}:{Config.PORT}/docs")

    uvicorn.run(
        "gift_exchange.fastapi_app:create_default_app",
        factory=True,
        host=Config.HOST,
        port=Config.PORT,
        reload=debug,
        log_level="info" if debug else "warning",
    )

"""
Main entry point for the package search bot.
Run this file to start the FastAPI server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn package_search_bot.fastapi_app:app --host 0.0.0.0 --port 3978 --reload
"""

import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

if __name__ == "__main__":
    env = os.getenv("APP_ENV", "development")
    debug = env == "development"
    port = int(os.getenv("PORT", 3978))
    host = os.getenv("HOST", "0.0.0.0")

    print(f"Starting package search bot in {env} mode...")
    print(f"Bot endpoint: http://{host}:{port}/api/messages")

    uvicorn.run(
        "package_search_bot.fastapi_app:app",
        host=host,
        port=port,
        reload=debug,
        log_level="info" if debug else "warning",
    )

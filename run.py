"""Entry point for the Grocery Store API.

Serves the FastAPI application with uvicorn; see
``grocery_store_api.server`` for the environment variables it reads.
After installation the same launcher is available as the
``grocery-store-api`` command.

Usage:
    python run.py
"""
from grocery_store_api.server import main


if __name__ == "__main__":
    main()

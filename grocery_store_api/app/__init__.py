"""FastAPI application for the grocery store customer API."""

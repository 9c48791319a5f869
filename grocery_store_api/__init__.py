"""Grocery Store customer API package."""

"""Configuration, logging and storage plumbing."""

"""FastAPI presentation layer."""

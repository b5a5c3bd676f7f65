"""Standup attendance tracking: SQLite storage, services and a Flask app."""

__version__ = "0.1.0"
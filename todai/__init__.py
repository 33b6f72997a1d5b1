"""todAI: single-resource task manager (REST service, client, console UI)."""

__version__ = "1.0.0"

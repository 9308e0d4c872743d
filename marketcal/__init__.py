"""Business-day and holiday calendars for financial markets and countries."""

__version__ = "0.1.0"
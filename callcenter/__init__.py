"""Call-center simulator with priority queues, attendance history, reports and a terminal menu."""

__version__ = "0.1.0"
__all__ = ["calls", "history", "service", "cli"]
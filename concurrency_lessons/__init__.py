"""Runnable demonstrations of classic concurrency patterns with threads, locks and queues."""

__version__ = "0.1.0"
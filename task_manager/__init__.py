"""Task Manager - REST backend for tasks, statuses, labels and users."""

__version__ = "1.0.0"

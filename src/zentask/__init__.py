"""ZenTask: tasks, focus/break timer, wellness reminders and achievements."""

__version__ = "0.1.0"

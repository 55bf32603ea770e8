"""Water/stretch reminders driven by persisted watermarks."""

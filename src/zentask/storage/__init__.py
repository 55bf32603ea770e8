"""Local persistence: SQLite key-value store + typed preferences."""

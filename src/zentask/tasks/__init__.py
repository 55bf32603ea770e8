"""Task list: tag parsing, ordering, filters."""

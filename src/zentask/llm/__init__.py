"""LLM access for the daily summary."""

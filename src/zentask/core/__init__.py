"""
Core domain.

Components:
- models.py: data structures (Task, ReminderSettings, UserStats, enums)
- ports.py: Protocols for storage, host capabilities and the LLM
- i18n.py: per-language text tables
- state.py: AppState shared by connectors and commands
"""

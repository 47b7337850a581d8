"""Configuration — scheme tables, settings discovery, and logging."""

"""Core configuration and logging helpers."""

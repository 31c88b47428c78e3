"""Core infrastructure: settings and logging configuration."""

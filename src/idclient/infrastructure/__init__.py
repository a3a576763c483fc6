"""Shared infrastructure: settings and logging configuration."""

"""Presentation layer for the Identifiers bounded context."""

"""Domain layer for the Identifiers bounded context.

Pure identifier derivation and allocation logic with no infrastructure
dependencies.
"""

"""Identifiers bounded context.

Derives stable identifiers for submitted ICGC entities (donors, specimens,
samples, mutations, files, objects) and allocates analysis identifiers.
"""

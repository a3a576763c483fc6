"""Shared Kernel module.

Small set of components shared by the identifiers context and the
infrastructure layer. Changes here affect every client variant.
"""

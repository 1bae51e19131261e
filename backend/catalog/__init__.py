"""Catalog Listing Package: course and school listings for the education portal.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

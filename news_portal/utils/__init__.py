# utils/__init__.py

"""
Shared helpers: errors, pagination, dates, metadata and dependency wiring.
"""

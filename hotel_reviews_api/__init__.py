"""
Top‑level package for the Hotel Reviews API.

This file makes ``hotel_reviews_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``hotel_reviews_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []

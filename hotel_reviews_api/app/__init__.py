"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Hotels, reviews, users and destinations each expose a
router defined in ``api/v1/endpoints``.  Data lives behind an entity
store (``storage``) and is shaped into read models by the aggregation
functions in ``services``.
"""

from .main import app  # noqa: F401

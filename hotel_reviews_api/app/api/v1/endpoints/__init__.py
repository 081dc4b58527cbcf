"""
Endpoint subpackage for API v1.

Each module in this package defines an APIRouter for a specific
domain (hotels, reviews, destinations, auth).  The routers are
aggregated in ``router.py`` at the package level.
"""

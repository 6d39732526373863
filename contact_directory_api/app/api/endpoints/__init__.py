"""
Endpoint subpackage.

Each module in this package defines an APIRouter for a specific
domain (contacts, reference data, health).  The routers are
aggregated in ``api/router.py`` and included in the main application.
"""

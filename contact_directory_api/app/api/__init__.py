"""
API package containing the HTTP routes.

``router.py`` aggregates the domain routers defined in ``endpoints``
under the ``/api`` prefix.
"""

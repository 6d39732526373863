"""
Security response headers.

``add_security_headers`` is registered as HTTP middleware and covers
every response that flows back through the middleware stack.  Starlette
renders the catch‑all ``Exception`` handler in its outermost
``ServerErrorMiddleware``, outside that stack, so the 500 handler in
``core.errors`` passes ``SECURITY_HEADERS`` explicitly.
"""

from fastapi import Request

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "X-DNS-Prefetch-Control": "off",
    "Cross-Origin-Resource-Policy": "same-origin",
}


async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response

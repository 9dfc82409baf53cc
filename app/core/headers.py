"""Security headers added to every response, including generic 500s."""

from starlette.responses import Response

DOCS_URL = "/docs"
REDOC_URL = "/redoc"

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-DNS-Prefetch-Control": "off",
}
CONTENT_SECURITY_POLICY = "default-src 'self'; frame-ancestors 'none'"


def apply_security_headers(response: Response, path: str) -> Response:
    """Set the security headers on response unless already present."""
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    # Swagger UI and ReDoc load their assets from a CDN.
    if path not in (DOCS_URL, REDOC_URL):
        response.headers.setdefault("Content-Security-Policy", CONTENT_SECURITY_POLICY)
    return response

# Middleware package init
"""
NexParcel Backend — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters):
    Request → [Rate Limit] → [Request ID] → [Access Log] → [GZip] → [CORS] → Route
    Responses travel the chain in reverse, so the request ID header and the
    access log line both see the final status code.
"""

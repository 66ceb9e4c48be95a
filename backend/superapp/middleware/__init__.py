# Middleware package init
"""
SuperApp Backend — Middleware Package
=======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [View Invalidation] → [CORS/GZip] → Route

    - Request ID first so every later log line carries it
    - Logging measures everything below it, including view bookkeeping
    - View Invalidation wraps the route so services can mark views stale

    Responses pass back through in reverse order, so X-Invalidated-Views and
    X-Request-ID are both present on the final response.
"""

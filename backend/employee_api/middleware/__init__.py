# Middleware package init
"""
Employee Directory — Middleware Package
========================================

Middleware Chain:
    Request → [Request ID] → [Access Logging] → [CORS] → Route Handler

Request ID runs first so the access log line and any error response can
carry the same correlation id.
"""

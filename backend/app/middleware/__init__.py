# Middleware package init
"""
Game Reviews Backend — Middleware Package
===========================================

Middleware Chain:
    Request → [Request ID] → [Access Log] → [GZip] → [CORS] → Route Handler

    RequestIDMiddleware runs first so every access log line (and every
    error logged by the exception handlers) carries the request id.
"""

"""
MEMOPYK Server Package.

This package contains the web server implementation for the MEMOPYK site backend.
It includes the API definition, admin authentication, configuration and services.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Core configurations and constants.
    middleware: Request logging and tracing middleware.
    exception_handlers: Global and validation error handlers.
    services: Admin sessions, sitemap cache, legal content storage and dependencies.
"""

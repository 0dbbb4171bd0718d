"""
Server-side services shared by the API routers.

Modules:
- auth: Admin session store and login rate limiter
- sitemap_cache: Process-wide sitemap/robots.txt cache
- legal_content: JSON document store for the legal pages
- deps: FastAPI dependencies (admin guard, repositories, services)
"""

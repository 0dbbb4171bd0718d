"""MEMOPYK site backend.

This package contains the content-management backend for the MEMOPYK bilingual
(English/French) marketing website.

High-level architecture
-----------------------

The codebase is organized around a thin REST layer over a relational database,
plus two side utilities used directly by route handlers:

- **Content records**: contacts, hero videos, gallery items, FAQs grouped by
  section, SEO settings and deployment log rows. Each one is a flat SQLModel
  entity with an async repository and camelCase I/O schemas.
- **Side utilities**: a sitemap / robots.txt generator with a time-to-live
  cache, and an FFmpeg wrapper that extracts thumbnails from gallery videos and
  resizes cover images to match them.

Core subpackages
----------------

- ``memopyk.core``: logging, Logfire monitoring, database engine/session,
  entities, repositories and API I/O models.
- ``memopyk.media``: FFmpeg / ffprobe shell-outs, the gallery temp store and
  the social image validator.
- ``memopyk.seo``: sitemap, robots.txt and JSON-LD builders.
- ``memopyk.server``: the FastAPI application, configuration, admin session
  authentication and the ``/api`` routers.
"""

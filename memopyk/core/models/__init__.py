"""
Models shared across the MEMOPYK backend.

- io: Pydantic request/response schemas for the REST API
"""

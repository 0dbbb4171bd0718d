"""
Version 1 API routers of the MEMOPYK server.
"""

"""
Server constants shared by the application factory and routers.
"""

PROJECT_NAME = "MEMOPYK Site API"
API_PREFIX = "/api"
API_VERSION = "1.0.0"

# Default identity attached to admin sessions; there is a single admin account.
ADMIN_USER_ID = "admin"

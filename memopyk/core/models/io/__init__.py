"""
I/O models for API requests and responses.

This package contains Pydantic-based I/O schemas that define the contract
between API endpoints and clients. They are kept separate from the database
entities so the JSON shape (camelCase) can differ from the column names.

Modules:
- common: CamelModel base and generic acknowledgements
- auth: Admin login/verify models
- contacts: Contact form and dashboard stats models
- hero_videos: Hero video models
- gallery: Gallery item and media processing models
- faqs: FAQ and section models
- seo_settings: SEO settings, import/export and image validation models
- deployments: Deployment log models
"""

from .auth import AdminUser, LoginRequest, LoginResponse, VerifyResponse
from .common import CamelModel, MessageResponse
from .contacts import ContactCreate, ContactCreated, ContactRead, StatsRead
from .deployments import DeploymentCreate, DeploymentRead, DeploymentStatusUpdate
from .faqs import (
    FaqCreate,
    FaqRead,
    FaqSectionRead,
    FaqUpdate,
    MoveFaq,
    ReorderFaqs,
    ReorderSections,
    UpdatedCount,
    UpdateSectionNames,
)
from .gallery import (
    CleanupResult,
    GalleryItemCreate,
    GalleryItemRead,
    GalleryItemResponse,
    GalleryItemUpdate,
    GalleryReorder,
    ProcessRequest,
    ProcessResult,
    ResizeRequest,
    ResizeResult,
    VideoInfoRead,
)
from .hero_videos import HeroVideoCreate, HeroVideoRead, HeroVideoReorder, HeroVideoUpdate
from .seo_settings import (
    FetchAsGoogleResult,
    ImageValidateRequest,
    ImageValidationRead,
    SeoExport,
    SeoImportRequest,
    SeoImportResult,
    SeoSettingCreate,
    SeoSettingRead,
    SeoSettingResponse,
    SeoSettingUpdate,
)

__all__ = [
    "AdminUser",
    "CamelModel",
    "CleanupResult",
    "ContactCreate",
    "ContactCreated",
    "ContactRead",
    "DeploymentCreate",
    "DeploymentRead",
    "DeploymentStatusUpdate",
    "FaqCreate",
    "FaqRead",
    "FaqSectionRead",
    "FaqUpdate",
    "FetchAsGoogleResult",
    "GalleryItemCreate",
    "GalleryItemRead",
    "GalleryItemResponse",
    "GalleryItemUpdate",
    "GalleryReorder",
    "HeroVideoCreate",
    "HeroVideoRead",
    "HeroVideoReorder",
    "HeroVideoUpdate",
    "ImageValidateRequest",
    "ImageValidationRead",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "MoveFaq",
    "ProcessRequest",
    "ProcessResult",
    "ReorderFaqs",
    "ReorderSections",
    "ResizeRequest",
    "ResizeResult",
    "SeoExport",
    "SeoImportRequest",
    "SeoImportResult",
    "SeoSettingCreate",
    "SeoSettingRead",
    "SeoSettingResponse",
    "SeoSettingUpdate",
    "StatsRead",
    "UpdatedCount",
    "UpdateSectionNames",
    "VerifyResponse",
]

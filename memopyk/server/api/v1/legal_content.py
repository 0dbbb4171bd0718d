"""
Legal Content Endpoints.

The bilingual legal pages are stored as a single JSON document.
"""

from typing import Any, Dict

from fastapi import APIRouter, Body

from memopyk.core.logging_config import get_logger
from memopyk.core.models.io import MessageResponse
from memopyk.server.services.deps import AdminDep, LegalContentDep

logger = get_logger(__name__)

router = APIRouter(tags=["legal-content"])


@router.get("", summary="Get Legal Content", description="The stored legal content, or an empty object.")
async def get_legal_content(store: LegalContentDep) -> Dict[str, Any]:
    return store.load()


@router.post(
    "",
    response_model=MessageResponse,
    summary="Save Legal Content",
    description="Replace the whole legal content document.",
)
async def save_legal_content(
    _: AdminDep,
    store: LegalContentDep,
    content: Dict[str, Any] = Body(..., description="Legal content document"),
) -> MessageResponse:
    store.save(content)
    logger.info(f"Legal content updated ({len(content)} top-level keys)")
    return MessageResponse(message="Legal content saved successfully")

"""
FAQ Endpoints.

FAQs are grouped into sections by a language-neutral key. Besides per-FAQ
CRUD the admin panel reorders whole sections, moves FAQs between sections
and renames sections.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from memopyk.core.database.entities.faqs import Faq
from memopyk.core.logging_config import get_logger
from memopyk.core.models.io import (
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
from memopyk.server.services.deps import AdminDep, FaqRepoDep

logger = get_logger(__name__)

router = APIRouter(tags=["faqs"])


@router.get(
    "",
    response_model=List[FaqRead],
    summary="List FAQs",
    description="FAQs ordered by section order, then order within the section.",
)
async def list_faqs(faqs: FaqRepoDep, active_only: bool = False) -> List[FaqRead]:
    """
    List FAQs in display order.

    - **active_only**: Only return FAQs that are switched on.
    """
    filters = {"is_active": True} if active_only else None
    return [FaqRead.model_validate(f) for f in await faqs.list(filters=filters)]


@router.get(
    "/sections",
    response_model=List[FaqSectionRead],
    summary="List FAQ Sections",
    description="FAQs grouped by section, sections and FAQs in display order.",
)
async def list_faq_sections(faqs: FaqRepoDep, active_only: bool = False) -> List[FaqSectionRead]:
    filters = {"is_active": True} if active_only else None
    sections: dict[str, FaqSectionRead] = {}
    for faq in await faqs.list(filters=filters):
        group = sections.get(faq.section)
        if group is None:
            group = FaqSectionRead(
                section=faq.section,
                section_name_en=faq.section_name_en,
                section_name_fr=faq.section_name_fr,
                section_order=faq.section_order,
                faqs=[],
            )
            sections[faq.section] = group
        group.faqs.append(FaqRead.model_validate(faq))
    return list(sections.values())


@router.post(
    "",
    response_model=FaqRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create FAQ",
    description="Create a FAQ; a new section key starts a new section.",
)
async def create_faq(payload: FaqCreate, _: AdminDep, faqs: FaqRepoDep) -> FaqRead:
    faq = await faqs.create(Faq(**payload.model_dump()))
    logger.info(f"Created FAQ {faq.id} in section {faq.section}")
    return FaqRead.model_validate(faq)


@router.post(
    "/reorder-sections",
    response_model=UpdatedCount,
    summary="Reorder FAQ Sections",
    description="Set the section order of every FAQ in each listed section.",
)
async def reorder_sections(payload: ReorderSections, _: AdminDep, faqs: FaqRepoDep) -> UpdatedCount:
    """
    Reorder sections.

    - **sectionOrders**: List of ``{section, sectionOrder}``.
    """
    updated = await faqs.reorder_sections((s.section, s.section_order) for s in payload.section_orders)
    return UpdatedCount(updated=updated)


@router.post(
    "/reorder",
    response_model=UpdatedCount,
    summary="Reorder FAQs",
    description="Set the order of FAQs within their sections.",
)
async def reorder_faqs(payload: ReorderFaqs, _: AdminDep, faqs: FaqRepoDep) -> UpdatedCount:
    updated = await faqs.reorder((f.id, f.order) for f in payload.faq_orders)
    return UpdatedCount(updated=updated)


@router.post(
    "/move",
    response_model=FaqRead,
    summary="Move FAQ",
    description="Move a FAQ into another existing section at the given position.",
    responses={404: {"description": "FAQ or target section not found"}},
)
async def move_faq(payload: MoveFaq, _: AdminDep, faqs: FaqRepoDep) -> FaqRead:
    """
    Move a FAQ to another section.

    The FAQ takes over the target section's key, display names and order.

    - **faqId**: FAQ to move.
    - **newSection**: Key of an existing section.
    - **newOrder**: Position inside the target section.
    """
    template = await faqs.get_section_template(payload.new_section)
    if template is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Target section not found")
    faq = await faqs.get_by_id(payload.faq_id)
    if faq is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"FAQ {payload.faq_id} not found")

    moved = await faqs.move(faq, template, payload.new_order)
    logger.info(f"Moved FAQ {moved.id} to section {moved.section} at {moved.order}")
    return FaqRead.model_validate(moved)


@router.post(
    "/update-section-names",
    response_model=UpdatedCount,
    summary="Rename FAQ Section",
    description="Change the display names of a section on all of its FAQs.",
)
async def update_section_names(payload: UpdateSectionNames, _: AdminDep, faqs: FaqRepoDep) -> UpdatedCount:
    """
    Rename a section.

    - **section**: Section key.
    - **sectionNameEn**: New English name.
    - **sectionNameFr**: New French name; left unchanged when omitted.
    """
    updated = await faqs.update_section_names(payload.section, payload.section_name_en, payload.section_name_fr)
    return UpdatedCount(updated=updated)


@router.put(
    "/{faq_id}",
    response_model=FaqRead,
    summary="Update FAQ",
    description="Partially update a FAQ.",
    responses={404: {"description": "FAQ not found"}},
)
async def update_faq(faq_id: str, payload: FaqUpdate, _: AdminDep, faqs: FaqRepoDep) -> FaqRead:
    faq = await faqs.get_by_id(faq_id)
    if faq is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"FAQ {faq_id} not found")

    for key, value in payload.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(faq, key, value)
    return FaqRead.model_validate(await faqs.update(faq))


@router.delete(
    "/{faq_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete FAQ",
    description="Delete a FAQ. Deleting a FAQ that no longer exists is not an error.",
)
async def delete_faq(faq_id: str, _: AdminDep, faqs: FaqRepoDep) -> None:
    if await faqs.delete(faq_id):
        logger.info(f"Deleted FAQ {faq_id}")
    else:
        logger.info(f"FAQ {faq_id} was already deleted")

"""
Contact Form and Dashboard Statistics Endpoints.
"""

from typing import List

from fastapi import APIRouter, status

from memopyk.core.database.entities.contacts import Contact
from memopyk.core.logging_config import get_logger
from memopyk.core.models.io import ContactCreate, ContactCreated, ContactRead, StatsRead
from memopyk.server.services.deps import (
    AdminDep,
    ContactRepoDep,
    FaqRepoDep,
    GalleryRepoDep,
    HeroVideoRepoDep,
)

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/contacts",
    response_model=ContactCreated,
    status_code=status.HTTP_201_CREATED,
    tags=["contacts"],
    summary="Submit Contact Form",
    description="Store a contact request sent from the public site.",
    responses={400: {"description": "Invalid contact data"}},
)
async def create_contact(payload: ContactCreate, contacts: ContactRepoDep) -> ContactCreated:
    """
    Submit the public contact form.

    - **name**: Visitor name.
    - **email**: Reply address.
    - **package**: Package the visitor is interested in.
    - **message**: Optional free-form message.
    """
    contact = await contacts.create(Contact(**payload.model_dump()))
    logger.info(f"New contact request {contact.id} for package {contact.package}")
    return ContactCreated(contact=ContactRead.model_validate(contact))


@router.get(
    "/contacts",
    response_model=List[ContactRead],
    tags=["contacts"],
    summary="List Contacts",
    description="All contact requests in the order they arrived.",
)
async def list_contacts(_: AdminDep, contacts: ContactRepoDep) -> List[ContactRead]:
    return [ContactRead.model_validate(c) for c in await contacts.list()]


@router.get(
    "/stats",
    response_model=StatsRead,
    tags=["stats"],
    summary="Dashboard Statistics",
    description="Counts shown on the admin dashboard.",
)
async def get_stats(
    _: AdminDep,
    contacts: ContactRepoDep,
    hero_videos: HeroVideoRepoDep,
    gallery: GalleryRepoDep,
    faqs: FaqRepoDep,
) -> StatsRead:
    """
    Dashboard counters.

    ``faqSections`` counts distinct FAQ sections rather than FAQs.
    """
    return StatsRead(
        hero_videos=await hero_videos.count(),
        gallery_items=await gallery.count(),
        faq_sections=await faqs.count_sections(),
        contacts=await contacts.count(),
    )

"""
schema.org structured data.

Builds the JSON-LD blocks a page can carry automatically: an ``FAQPage``
from the active FAQs and ``VideoObject`` entries for gallery items that have
a video. English text is used throughout.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from memopyk.core.database.entities.faqs import Faq
from memopyk.core.database.entities.gallery_items import GalleryItem

SCHEMA_CONTEXT = "https://schema.org"


def build_faq_page(faqs: Iterable[Faq]) -> Optional[dict[str, Any]]:
    """``FAQPage`` for the active FAQs, or None when there are none."""
    questions = [
        {
            "@type": "Question",
            "name": faq.question_en,
            "acceptedAnswer": {"@type": "Answer", "text": faq.answer_en},
        }
        for faq in faqs
        if faq.is_active
    ]
    if not questions:
        return None
    return {"@context": SCHEMA_CONTEXT, "@type": "FAQPage", "mainEntity": questions}


def build_video_objects(items: Iterable[GalleryItem]) -> list[dict[str, Any]]:
    videos = []
    for item in items:
        if not item.is_active or not item.video_url:
            continue
        videos.append(
            {
                "@context": SCHEMA_CONTEXT,
                "@type": "VideoObject",
                "name": item.title_en,
                "description": item.description_en,
                "contentUrl": item.video_url,
                "thumbnailUrl": item.image_url_en or item.image_url_fr,
                "uploadDate": item.created_at.isoformat() if item.created_at else None,
            }
        )
    return videos


def build_auto_json_ld(
    *,
    include_faq: bool,
    include_videos: bool,
    faqs: Iterable[Faq] = (),
    gallery_items: Iterable[GalleryItem] = (),
    manual: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    """
    Combine generated and hand-written structured data for a page.

    Generated blocks are stored under ``faqPage`` and ``videos``; keys of the
    manual ``json_ld`` object are merged over them.
    """
    data: dict[str, Any] = {}
    if include_faq:
        faq_page = build_faq_page(faqs)
        if faq_page is not None:
            data["faqPage"] = faq_page
    if include_videos:
        videos = build_video_objects(gallery_items)
        if videos:
            data["videos"] = videos
    if manual:
        data.update(manual)
    return data

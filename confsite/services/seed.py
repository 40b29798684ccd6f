"""Default content for a fresh installation.

Seeding only fills what is missing: a collection is populated only while it
is empty and a content document only while its key has never been saved, so
running it against a live site changes nothing.
"""

import logging
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from confsite.models import (
    ContentKey,
    DisplayStyle,
    DownloadableDocument,
    GalleryItem,
    Highlight,
    HighlightIcon,
    MediaType,
    ScheduleDay,
    ScheduleEvent,
    SecretariatMember,
)
from confsite.services.ordering import OrderedItemStore
from confsite.services.site_content_service import SiteContentService

logger = logging.getLogger(__name__)

PLACEHOLDER_WIDE = "https://placehold.co/600x400.png"
PLACEHOLDER_SQUARE = "https://placehold.co/400x400.png"

DEFAULT_CONTENT: dict[ContentKey, dict[str, Any]] = {
    ContentKey.HOME_PAGE: {
        "hero_title": "HARMUN 2025 Portal",
        "hero_subtitle": (
            "Engage in diplomacy, foster international cooperation, and shape the "
            "future. Welcome, delegates!"
        ),
        "hero_image_url": "https://placehold.co/1920x1080.png",
    },
    ContentKey.ABOUT_PAGE: {
        "title": "About HARMUN",
        "subtitle": (
            "Discover the history, mission, and spirit of the Harvard Model United "
            "Nations conference."
        ),
        "image_url": PLACEHOLDER_WIDE,
        "what_is_title": "What is Model UN?",
        "what_is_para1": (
            "Model United Nations is an academic simulation of the United Nations where "
            "students play the role of delegates from different countries and attempt to "
            "solve real world issues with the policies and perspectives of their assigned "
            "country."
        ),
        "what_is_para2": (
            "Participants learn about diplomacy, international relations, and the United "
            "Nations. Delegates are placed in committees and assigned countries, research "
            "topics, and formulate positions to debate with their peers."
        ),
        "story_title": "The Story of HARMUN",
        "story_para1": (
            "Harvard Model United Nations (HARMUN) was founded in 1953, only a few years "
            "after the creation of the United Nations itself."
        ),
        "story_para2": (
            "Each year, HARMUN brings together high school students from across the globe "
            "to our campus in Cambridge."
        ),
    },
    ContentKey.REGISTRATION_PAGE: {
        "title": "Delegate Registration",
        "subtitle": (
            "Complete the form below to register for HARMUN 2025. Fields marked with an "
            "asterisk (*) are required."
        ),
    },
    ContentKey.DOCUMENTS_PAGE: {
        "title": "Conference Documents",
        "subtitle": "Access important resources and other downloadable materials here.",
    },
    ContentKey.GALLERY_PAGE: {
        "title": "Conference Gallery",
        "subtitle": "A collection of memorable moments from past and present HARMUN conferences.",
    },
    ContentKey.SITE_CONFIG: {
        "conference_date": "2025-01-30T09:00:00",
        "social_links": [
            {"platform": "Twitter", "url": "#"},
            {"platform": "Instagram", "url": "#"},
            {"platform": "Facebook", "url": "#"},
        ],
        "footer_text": "This is a fictional event created for demonstration purposes.",
        "map_embed_url": (
            "https://www.google.com/maps/embed?pb=!1m18!1m12!1m3!1d2925.733553224765"
            "!2d-71.1194179234839!3d42.37361573426569!2m3!1f0!2f0!3f0!3m2!1i1024!2i768"
            "!4f13.1!3m3!1m2!1s0x89e377427d73825b%3A0x5e567c1d7756919a"
            "!2sHarvard%20University!5e0!3m2!1sen!2sus!4v1709876543210!5m2!1sen!2sus"
        ),
        "nav_visibility": {
            route: True
            for route in (
                "/about",
                "/committees",
                "/news",
                "/sg-notes",
                "/registration",
                "/schedule",
                "/secretariat",
                "/documents",
                "/gallery",
            )
        },
    },
}


def default_collections() -> dict[type, list[Any]]:
    """Fresh, unsaved rows for each ordered collection, in display order."""
    return {
        SecretariatMember: [
            SecretariatMember(
                name="James Harrison",
                role="Secretary-General",
                bio=(
                    "A senior at Harvard studying Government and Economics. This is his "
                    "fourth and final HARMUN."
                ),
                image_url=PLACEHOLDER_SQUARE,
            ),
            SecretariatMember(
                name="Chloe Davis",
                role="Director-General",
                bio=(
                    "A junior concentrating in History & Literature. Chloe oversees all "
                    "committee operations."
                ),
                image_url=PLACEHOLDER_SQUARE,
            ),
        ],
        Highlight: [
            Highlight(
                icon=HighlightIcon.CALENDAR,
                title="Conference Dates",
                description="January 30 - February 2, 2025",
            ),
            Highlight(
                icon=HighlightIcon.MAP_PIN,
                title="Location",
                description="Harvard University, Cambridge, MA",
            ),
        ],
        DownloadableDocument: [
            DownloadableDocument(
                title="Conference Handbook",
                description="The official guide to rules, procedures, and conference etiquette.",
                url="#",
            ),
            DownloadableDocument(
                title="Background Guide: Security Council",
                description=(
                    "Essential reading material for all delegates in the Security "
                    "Council committee."
                ),
                url="#",
            ),
        ],
        GalleryItem: [
            GalleryItem(
                title="Opening Ceremony",
                media_type=MediaType.IMAGE,
                image_url=PLACEHOLDER_WIDE,
                display=DisplayStyle.LANDSCAPE,
                column_span=1,
            ),
            GalleryItem(
                title="Debate in Session",
                media_type=MediaType.IMAGE,
                image_url="https://placehold.co/400x600.png",
                display=DisplayStyle.CLASSIC_PORTRAIT,
                column_span=1,
            ),
        ],
    }


async def _is_empty(db: AsyncSession, model: type) -> bool:
    result = await db.execute(select(func.count()).select_from(model))
    return not result.scalar()


async def seed_defaults(db: AsyncSession) -> list[str]:
    """Insert default content where nothing exists yet.

    Returns the names of the collections and content keys that were seeded.
    The caller owns the transaction.
    """
    seeded: list[str] = []

    content = SiteContentService(db)
    for key, document in DEFAULT_CONTENT.items():
        if not await content.exists(key):
            await content.update(key, document)
            seeded.append(key.value)

    for model, items in default_collections().items():
        if not await _is_empty(db, model):
            continue
        store = OrderedItemStore(db, model)
        for item in items:
            await store.append(item)
        seeded.append(model.__tablename__)

    if await _is_empty(db, ScheduleDay):
        day = await OrderedItemStore(db, ScheduleDay).append(
            ScheduleDay(title="Day 1: Thursday", date="January 30, 2025")
        )
        await OrderedItemStore(db, ScheduleEvent, scope={"day_id": day.id}).append(
            ScheduleEvent(
                time="2:00 PM - 5:00 PM",
                title="Delegate Registration",
                description="Pick up your credentials and welcome packet.",
                location="Main Hall",
            )
        )
        seeded.append(ScheduleDay.__tablename__)

    if seeded:
        logger.info(f"Seeded default content: {', '.join(seeded)}")
    else:
        logger.debug("Nothing to seed")
    return seeded

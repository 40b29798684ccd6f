"""Tests for default content seeding."""

from sqlalchemy import func, select

from confsite.models import ContentKey, GalleryItem, Highlight, HighlightIcon, ScheduleEvent
from confsite.services.ordering import OrderedItemStore
from confsite.services.seed import seed_defaults
from confsite.services.site_content_service import SiteContentService


async def count(session, model) -> int:
    return (await session.execute(select(func.count()).select_from(model))).scalar()


class TestSeed:
    async def test_seeds_empty_database(self, session):
        seeded = await seed_defaults(session)

        assert "site_config" in seeded
        assert "secretariat_members" in seeded
        home = await SiteContentService(session).get(ContentKey.HOME_PAGE)
        assert home["hero_title"] == "HARMUN 2025 Portal"

        highlights = await OrderedItemStore(session, Highlight).read_all()
        assert [h.icon for h in highlights] == [HighlightIcon.CALENDAR, HighlightIcon.MAP_PIN]
        assert [h.position for h in highlights] == [0, 1]

        [event] = (await session.execute(select(ScheduleEvent))).scalars().all()
        assert event.title == "Delegate Registration"
        assert event.location == "Main Hall"

        config = await SiteContentService(session).get(ContentKey.SITE_CONFIG)
        assert config["conference_date"] == "2025-01-30T09:00:00"
        assert all(config["nav_visibility"].values())

    async def test_is_idempotent(self, session):
        await seed_defaults(session)
        assert await seed_defaults(session) == []
        assert await count(session, GalleryItem) == 2

    async def test_keeps_existing_content(self, session):
        await SiteContentService(session).update(ContentKey.HOME_PAGE, {"hero_title": "Our own"})
        await OrderedItemStore(session, GalleryItem).append(
            GalleryItem(title="Ours", image_url="https://img.test/ours.png")
        )

        seeded = await seed_defaults(session)

        assert "home_page" not in seeded
        assert "gallery_items" not in seeded
        home = await SiteContentService(session).get(ContentKey.HOME_PAGE)
        assert home["hero_title"] == "Our own"
        assert await count(session, GalleryItem) == 1

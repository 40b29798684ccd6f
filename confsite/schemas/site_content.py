"""Pydantic schemas for keyed site content documents."""

from pydantic import BaseModel, ConfigDict, Field

from confsite.models.site_content import ContentKey


class ContentDocument(BaseModel):
    """Base for content documents. Unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")


class HomePageContent(ContentDocument):
    hero_title: str = ""
    hero_subtitle: str = ""
    hero_image_url: str = ""
    highlights_title: str = ""
    highlights_subtitle: str = ""


class AboutPageContent(ContentDocument):
    title: str = ""
    subtitle: str = ""
    image_url: str = ""
    what_is_title: str = ""
    what_is_para1: str = ""
    what_is_para2: str = ""
    story_title: str = ""
    story_image_url: str = ""
    story_para1: str = ""
    story_para2: str = ""


class TitledPageContent(ContentDocument):
    """Pages whose editable copy is just a title and a subtitle."""

    title: str = ""
    subtitle: str = ""


class RegistrationPageContent(TitledPageContent):
    pass


class DocumentsPageContent(TitledPageContent):
    pass


class GalleryPageContent(TitledPageContent):
    pass


class SiteSocialLink(BaseModel):
    platform: str = Field(..., min_length=1, max_length=50)
    url: str = Field(..., min_length=1, max_length=500)


class SiteConfig(ContentDocument):
    """Site-wide settings: countdown date, footer, social links, navigation."""

    # ISO local datetime for the countdown, e.g. 2025-01-30T09:00:00
    conference_date: str = ""
    social_links: list[SiteSocialLink] = Field(default_factory=list)
    footer_text: str = ""
    sg_avatar_url: str = ""
    map_embed_url: str = ""
    nav_visibility: dict[str, bool] = Field(default_factory=dict)


CONTENT_SCHEMAS: dict[ContentKey, type[ContentDocument]] = {
    ContentKey.HOME_PAGE: HomePageContent,
    ContentKey.ABOUT_PAGE: AboutPageContent,
    ContentKey.REGISTRATION_PAGE: RegistrationPageContent,
    ContentKey.DOCUMENTS_PAGE: DocumentsPageContent,
    ContentKey.GALLERY_PAGE: GalleryPageContent,
    ContentKey.SITE_CONFIG: SiteConfig,
}

"""Helpers shared by content schemas."""

import re

# drive.google.com/file/d/<id>, drive.google.com/uc?id=<id>, lh3.googleusercontent.com/d/<id>
GOOGLE_DRIVE_PATTERN = re.compile(
    r"(?:drive\.google\.com/(?:file/d/|uc\?id=)|lh3\.googleusercontent\.com/d/)([a-zA-Z0-9_-]+)"
)
HTTP_URL_PATTERN = re.compile(r"^https?://[^\s/$.?#].[^\s]*$", re.IGNORECASE)


def convert_google_drive_link(url: str | None) -> str:
    """Turn a Google Drive share link into a direct, embeddable image link.

    Anything that is not a recognised Drive link is returned unchanged.
    """
    if not url:
        return ""
    match = GOOGLE_DRIVE_PATTERN.search(url)
    if match:
        return f"https://lh3.googleusercontent.com/d/{match.group(1)}"
    return url


def require_http_url(url: str) -> str:
    """Validate that a value is an absolute http(s) URL."""
    if not HTTP_URL_PATTERN.match(url):
        raise ValueError("Must be a valid URL")
    return url


def optional_image_url(url: str | None) -> str:
    """Empty, or an http(s) URL with Drive links converted."""
    if not url:
        return ""
    return require_http_url(convert_google_drive_link(url.strip()))

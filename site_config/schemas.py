"""
Pydantic models for the site configuration record.

Attribute names are snake_case; the wire format (YAML/JSON files, dumps and
the exported JSON Schema) uses the theme's camelCase keys.
"""

import math
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

CONTACT_PLATFORMS = (
    "email",
    "twitter",
    "github",
    "rss",
    "vkontakte",
    "linkedin",
    "instagram",
    "line",
    "gitlab",
    "weibo",
    "codepen",
    "youtube",
    "soundcloud",
)

DEFAULT_POSTS_PER_PAGE = 4

# at least one non-whitespace character
NON_BLANK = r"\S"


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
    )


def _none_to_empty(value: Any) -> Any:
    # null and "" both mean "not provided"
    return "" if value is None else value


class Contacts(_Record):
    """Social/contact handles keyed by platform; empty string means not provided."""

    email: str = ""
    twitter: str = ""
    github: str = ""
    rss: str = ""
    vkontakte: str = ""
    linkedin: str = ""
    instagram: str = ""
    line: str = ""
    gitlab: str = ""
    weibo: str = ""
    codepen: str = ""
    youtube: str = ""
    soundcloud: str = ""

    normalize_missing = field_validator(
        *CONTACT_PLATFORMS, mode="before", json_schema_input_type=str | None
    )(_none_to_empty)

    def provided(self) -> dict[str, str]:
        """Return only the platforms that have a value, in declaration order."""
        return {
            platform: getattr(self, platform)
            for platform in CONTACT_PLATFORMS
            if getattr(self, platform)
        }


class Author(_Record):
    """Blog author shown in the sidebar and on the about page."""

    name: str = Field(min_length=1, pattern=NON_BLANK)
    photo: str = ""
    bio: str = ""
    contacts: Contacts = Field(default_factory=Contacts)

    normalize_missing = field_validator(
        "photo", "bio", mode="before", json_schema_input_type=str | None
    )(_none_to_empty)


class MenuItem(_Record):
    """Navigation entry."""

    label: str = Field(min_length=1, pattern=NON_BLANK)
    path: str = Field(min_length=1, pattern=NON_BLANK)


class SiteConfig(_Record):
    """Site-wide metadata, navigation and author record."""

    url: str = Field(pattern=r"^https?://[^\s/]+")
    path_prefix: str = Field(default="/", pattern=r"^/")
    title: str = Field(min_length=1, pattern=NON_BLANK)
    subtitle: str = ""
    copyright: str = ""
    disqus_shortname: str = ""
    posts_per_page: int = Field(default=DEFAULT_POSTS_PER_PAGE, ge=1, strict=True)
    google_analytics_id: str = ""
    use_katex: bool = Field(default=False, strict=True)
    menu: tuple[MenuItem, ...] = ()
    author: Author

    normalize_missing = field_validator(
        "subtitle",
        "copyright",
        "disqus_shortname",
        "google_analytics_id",
        mode="before",
        json_schema_input_type=str | None,
    )(_none_to_empty)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SiteConfig":
        """Validate a wire-shaped mapping. Raises pydantic.ValidationError."""
        return cls.model_validate(data)

    def to_mapping(self) -> dict[str, Any]:
        """Return the wire-shaped dict (camelCase keys, JSON-compatible values)."""
        return self.model_dump(mode="json", by_alias=True)

    def menu_labels(self) -> list[str]:
        return [item.label for item in self.menu]

    def absolute_url(self, path: str = "/") -> str:
        """Join the site origin, path prefix and a site-relative path."""
        segments = [self.url.rstrip("/")]
        prefix = self.path_prefix.strip("/")
        if prefix:
            segments.append(prefix)
        return "/".join(segments) + "/" + path.lstrip("/")

    def page_count(self, total_posts: int) -> int:
        """Number of index pages needed for total_posts; the index always exists."""
        if total_posts < 0:
            raise ValueError("total_posts must not be negative")
        return max(1, math.ceil(total_posts / self.posts_per_page))

    def page_path(self, index: int) -> str:
        """Path of the index page at zero-based position index."""
        if index < 0:
            raise ValueError("page index must not be negative")
        return "/" if index == 0 else f"/page/{index}"

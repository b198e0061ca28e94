"""
Contact link resolution for the author widget.

Contact values are either bare handles ("kjmesc") or complete URLs
("https://twitter.com/kjmesc"); both forms resolve to the same kind of href.
"""

from .schemas import CONTACT_PLATFORMS, Contacts

ABSOLUTE_PREFIXES = ("http://", "https://", "mailto:")

HREF_TEMPLATES = {
    "email": "mailto:{}",
    "twitter": "https://www.twitter.com/{}",
    "github": "https://github.com/{}",
    "rss": "{}",
    "vkontakte": "https://vk.com/{}",
    "linkedin": "https://www.linkedin.com/in/{}",
    "instagram": "https://www.instagram.com/{}",
    "line": "line://ti/p/{}",
    "gitlab": "https://www.gitlab.com/{}",
    "weibo": "https://weibo.com/{}",
    "codepen": "https://www.codepen.io/{}",
    "youtube": "https://www.youtube.com/channel/{}",
    "soundcloud": "https://soundcloud.com/{}",
}


def contact_href(platform: str, value: str | None) -> str | None:
    """
    Build the link rendered for a contact value.

    Args:
        platform: One of CONTACT_PLATFORMS.
        value: Handle or URL; empty/None means not provided.

    Returns:
        The href, or None when no value is provided.

    Raises:
        ValueError: If platform is not a known contact platform.
    """
    if platform not in HREF_TEMPLATES:
        raise ValueError(f"Unknown contact platform: {platform!r}")
    if not value:
        return None
    if value.startswith(ABSOLUTE_PREFIXES):
        return value
    return HREF_TEMPLATES[platform].format(value)


def contact_links(contacts: Contacts) -> list[tuple[str, str]]:
    """Return (platform, href) pairs for every provided contact, in declaration order."""
    links = []
    for platform in CONTACT_PLATFORMS:
        href = contact_href(platform, getattr(contacts, platform))
        if href is not None:
            links.append((platform, href))
    return links

"""
Facebook markup for the theme: the SDK root in the footer and the Open
Graph tags in the head.
"""

from typing import List, Mapping, Tuple
from urllib.parse import quote

from markupsafe import Markup

from rotorwash.core.logging import get_logger
from rotorwash.schemas.theme import PageContext
from rotorwash.services.settings.templates import build_environment

logger = get_logger(__name__)

EXCERPT_LENGTH = 100
EXCERPT_MORE = "…"

_env = build_environment()


def _missing_setting(what: str, theme_name: str) -> None:
    logger.warning(
        f'No {what} supplied. Add this on the "{theme_name} Settings" page in the Dashboard.'
    )


def auto_excerpt(content: str, length: int = EXCERPT_LENGTH) -> str:
    """Plain-text excerpt of at most ``length`` words."""
    words = Markup(content).striptags().split()
    if len(words) > length:
        return " ".join(words[:length]) + EXCERPT_MORE
    return " ".join(words)


def render_fb_root(
    blob: Mapping[str, str],
    locale: str = "en_US",
    theme_name: str = "RotorWash",
) -> Markup:
    """
    The ``fb-root`` element and asynchronous SDK loader.

    Nothing is emitted when no app id is configured.
    """
    app_id = (blob.get("fb_app_id") or "").strip()
    if not app_id:
        _missing_setting("Facebook App ID was", theme_name)
        return Markup("")

    sdk_url = f"//connect.facebook.net/{quote(locale)}/all.js#xfbml=1&appId={quote(app_id, safe='')}"
    return Markup(_env.get_template("theme/fb_root.html").render(sdk_url=sdk_url))


def og_tags(context: PageContext, blob: Mapping[str, str], theme_name: str = "RotorWash") -> List[Tuple[str, str]]:
    """Open Graph ``(property, content)`` pairs for the current page."""
    if context.is_single:
        entry = context.entry
        title = entry.title
        url = entry.permalink
        og_type = "article"
        image = entry.thumbnail_url or context.default_image
        if entry.excerpt:
            description = Markup(entry.excerpt).striptags().strip()
        else:
            description = auto_excerpt(entry.content)
    else:
        title = context.site_name
        url = context.site_url
        og_type = "website"
        image = context.default_image
        description = context.site_description

    tags = [
        ("og:title", title),
        ("og:type", og_type),
        ("og:image", image),
        ("og:url", url),
        ("og:description", description),
        ("og:site_name", context.site_name),
        ("og:locale", context.locale),
    ]

    fb_admins = (blob.get("fb_admins") or "").strip()
    if fb_admins:
        tags.append(("fb:admins", fb_admins))
    else:
        _missing_setting("Facebook Admin IDs were", theme_name)
    return tags


def render_og_tags(context: PageContext, blob: Mapping[str, str], theme_name: str = "RotorWash") -> Markup:
    tags = og_tags(context, blob, theme_name)
    return Markup(_env.get_template("theme/og_tags.html").render(tags=tags))

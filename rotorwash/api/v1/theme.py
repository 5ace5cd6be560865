"""
Theme fragment endpoints: markup the site templates pull into the head,
the footer and donation areas.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from rotorwash.api import deps
from rotorwash.config.settings import Settings
from rotorwash.schemas.theme import Entry, PageContext
from rotorwash.services.settings import SettingsStore
from rotorwash.services.theme import render_fb_root, render_og_tags, render_paypal_button

router = APIRouter(prefix="/theme", tags=["Theme Fragments"])


@router.get("/head", response_class=HTMLResponse)
def head_fragment(
    post_id: Optional[int] = Query(default=None, ge=0),
    title: Optional[str] = None,
    permalink: Optional[str] = None,
    excerpt: str = "",
    content: str = "",
    thumbnail: Optional[str] = None,
    config: Settings = Depends(deps.get_app_settings),
    store: SettingsStore = Depends(deps.get_store),
) -> HTMLResponse:
    """Open Graph tags; a post is described when its id, title and permalink are given."""
    entry = None
    if post_id is not None and title and permalink:
        entry = Entry(
            id=post_id,
            title=title,
            permalink=permalink,
            excerpt=excerpt,
            content=content,
            thumbnail_url=thumbnail,
        )
    context = PageContext(
        site_name=config.SITE_NAME,
        site_description=config.SITE_DESCRIPTION,
        site_url=config.SITE_URL,
        locale=config.LOCALE,
        default_image=config.DEFAULT_OG_IMAGE,
        entry=entry,
    )
    blob = store.load(config.OPTION_NAME)
    return HTMLResponse(str(render_og_tags(context, blob, config.THEME_NAME)))


@router.get("/footer", response_class=HTMLResponse)
def footer_fragment(
    config: Settings = Depends(deps.get_app_settings),
    store: SettingsStore = Depends(deps.get_store),
) -> HTMLResponse:
    blob = store.load(config.OPTION_NAME)
    return HTMLResponse(str(render_fb_root(blob, config.LOCALE, config.THEME_NAME)))


@router.get("/donate", response_class=HTMLResponse)
def donate_fragment(
    post_id: Optional[int] = Query(default=None, ge=0),
    config: Settings = Depends(deps.get_app_settings),
    store: SettingsStore = Depends(deps.get_store),
) -> HTMLResponse:
    blob = store.load(config.OPTION_NAME)
    return HTMLResponse(str(render_paypal_button(blob, post_id)))

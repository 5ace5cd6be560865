# --- File: rotorwash/schemas/theme.py ---
"""
Page context passed to the theme output helpers.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from rotorwash.schemas.base import BaseSchema

__all__ = ["Entry", "PageContext"]


class Entry(BaseSchema):
    """A single post being displayed."""

    id: int = Field(..., ge=0, description="Post ID")
    title: str = Field(..., description="Post title")
    permalink: str = Field(..., description="Canonical URL of the post")
    excerpt: str = Field(default="", description="Hand-written excerpt")
    content: str = Field(default="", description="Post body (HTML)")
    thumbnail_url: Optional[str] = Field(default=None, description="Featured image URL")


class PageContext(BaseSchema):
    """
    What the current page is about.

    ``entry`` is set on single-post pages; every other page describes the
    site itself.
    """

    site_name: str
    site_description: str = ""
    site_url: str
    locale: str = "en_US"
    default_image: str
    entry: Optional[Entry] = None

    @property
    def is_single(self) -> bool:
        return self.entry is not None

from rotorwash.services.theme.facebook import render_fb_root, render_og_tags
from rotorwash.services.theme.paypal import render_paypal_button
from rotorwash.services.theme.sections import FACEBOOK_SECTION, PAYPAL_SECTION, THEME_SECTIONS

__all__ = [
    "FACEBOOK_SECTION",
    "PAYPAL_SECTION",
    "THEME_SECTIONS",
    "render_fb_root",
    "render_og_tags",
    "render_paypal_button",
]

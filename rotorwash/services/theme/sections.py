"""Built-in settings sections of the RotorWash theme."""

from typing import Tuple

from rotorwash.schemas.settings import FieldDefinition, FieldKind, SettingsSection

# Currencies accepted by PayPal donation buttons, with their symbols.
SUPPORTED_CURRENCIES: Tuple[Tuple[str, str], ...] = (
    ("USD", "$"),
    ("AUD", "$"),
    ("BRL", "R$"),
    ("GBP", "£"),
    ("CZK", ""),
    ("DKK", ""),
    ("EUR", "€"),
    ("HKD", "$"),
    ("HUF", ""),
    ("ILS", "₪"),
    ("JPY", "¥"),
    ("MXN", "$"),
    ("TWD", "NT$"),
    ("NZD", "$"),
    ("NOK", ""),
    ("PHP", "P"),
    ("PLN", ""),
    ("SGD", "$"),
    ("SEK", ""),
    ("CHF", ""),
    ("THB", "฿"),
)

FACEBOOK_SECTION = SettingsSection(
    id="rw-facebook-settings",
    title="Facebook Settings",
    description=(
        "Facebook settings. These are for comment administration and other good stuff.",
        "Register your site with Facebook at https://developers.facebook.com/apps/ to get its app ID.",
        "To get the Facebook admin ID(s), open https://graph.facebook.com/<username> for each "
        "administrator. Multiple values must be comma-separated.",
    ),
    fields=(
        FieldDefinition(key="fb_app_id", label="Facebook App ID"),
        FieldDefinition(key="fb_admins", label="Facebook Admins"),
    ),
)

PAYPAL_SECTION = SettingsSection(
    id="rw-paypal-settings",
    title="PayPal Donation Button Settings",
    description=(
        "These settings are required if you plan to place a donation button on the site.",
        "The PayPal Email is where donations will be sent. This should be tied to a valid PayPal account.",
        "The post ID from which the donation was made is used as the item number for the sake of tracking.",
        "Supply a title for the form to tell the reader why they should donate "
        "(i.e. Buy Me a Cup of Coffee).",
        "The item description shows up on the PayPal checkout page.",
    ),
    fields=(
        FieldDefinition(key="paypal_title", label="Donation Button Title"),
        FieldDefinition(key="paypal_addr", label="PayPal Email"),
        FieldDefinition(key="paypal_item", label="PayPal Item Description"),
        FieldDefinition(
            key="paypal_currency",
            label="Choose Your Currency",
            kind=FieldKind.SELECT,
            options=tuple((code, code, symbol or None) for code, symbol in SUPPORTED_CURRENCIES),
        ),
    ),
)

THEME_SECTIONS: Tuple[SettingsSection, ...] = (FACEBOOK_SECTION, PAYPAL_SECTION)

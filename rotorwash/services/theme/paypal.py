"""PayPal donation button."""

from typing import Mapping, Optional

from markupsafe import Markup

from rotorwash.core.logging import get_logger
from rotorwash.services.settings.templates import build_environment

logger = get_logger(__name__)

PAYPAL_DONATE_URL = "https://www.paypal.com/cgi-bin/webscr"
DEFAULT_CURRENCY = "USD"
BUTTON_LABEL = "Donate"

_env = build_environment()


def render_paypal_button(
    blob: Mapping[str, str],
    item_number: Optional[int] = None,
    *,
    action: str = PAYPAL_DONATE_URL,
    button_label: str = BUTTON_LABEL,
) -> Markup:
    """
    Donation form posting to PayPal.

    The id of the post the button sits on is sent as the item number so
    donations can be traced back to it. Nothing is emitted when no PayPal
    email is configured.
    """
    business = (blob.get("paypal_addr") or "").strip()
    if not business:
        logger.warning("No PayPal email supplied; the donation button is not shown.")
        return Markup("")

    return Markup(
        _env.get_template("theme/paypal_button.html").render(
            action=action,
            title=(blob.get("paypal_title") or "").strip(),
            business=business,
            item_name=(blob.get("paypal_item") or "").strip(),
            item_number="" if item_number is None else str(item_number),
            currency=(blob.get("paypal_currency") or "").strip() or DEFAULT_CURRENCY,
            button_label=button_label,
        )
    )

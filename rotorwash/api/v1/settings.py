"""
Theme settings page endpoints.

GET renders the form from the stored values; POST takes the urlencoded
form body, unwraps ``<option>[<key>]`` names and hands the values to the
page composer.
"""
from typing import Dict, Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse
from starlette.datastructures import FormData, UploadFile

from rotorwash.api import deps
from rotorwash.core.exceptions import PersistenceUnavailableError
from rotorwash.core.logging import get_logger
from rotorwash.services.settings import SettingsPageComposer

logger = get_logger(__name__)

router = APIRouter(prefix="/settings", tags=["Theme Settings"])


def parse_form_input(form: FormData, option_name: str) -> Dict[str, Optional[str]]:
    """
    Flatten a submitted form into ``{field key: value}``.

    Both ``rw_theme_settings[fb_app_id]`` and bare ``fb_app_id`` names are
    accepted; fields named for a different option and file uploads are
    skipped. The last value wins for repeated names.
    """
    prefix = f"{option_name}["
    raw_input: Dict[str, Optional[str]] = {}
    for name, value in form.multi_items():
        if isinstance(value, UploadFile):
            continue
        if name.startswith(prefix) and name.endswith("]"):
            key = name[len(prefix):-1]
        elif "[" not in name:
            key = name
        else:
            continue
        if key:
            raw_input[key] = value
    return raw_input


@router.get("", response_class=HTMLResponse)
def view_settings(composer: SettingsPageComposer = Depends(deps.get_composer)) -> HTMLResponse:
    return HTMLResponse(str(composer.view()))


@router.post("", response_class=HTMLResponse)
async def submit_settings(
    request: Request,
    composer: SettingsPageComposer = Depends(deps.get_composer),
) -> HTMLResponse:
    form = await request.form()
    raw_input = parse_form_input(form, composer.option_name)
    result = composer.handle_submit(None, raw_input)

    if result.is_success:
        status_code = status.HTTP_200_OK
    elif any(isinstance(e, PersistenceUnavailableError) for e in result.errors):
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
        logger.info(
            "Settings submission rejected",
            extra={"invalid_fields": sorted(result.errors_by_field())},
        )

    return HTMLResponse(str(result.metadata["page"]), status_code=status_code)

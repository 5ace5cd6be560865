from __future__ import annotations

from typing import Iterable, Optional

from fastapi import FastAPI
from sqlalchemy.exc import SQLAlchemyError

from rotorwash.api.v1.router import router as api_v1_router
from rotorwash.config.logging import setup_logging
from rotorwash.config.settings import Settings, get_settings
from rotorwash.core.logging import get_logger
from rotorwash.core.middleware import register_middlewares
from rotorwash.db.init_db import init_db
from rotorwash.db.session import build_engine, build_session_factory
from rotorwash.repositories.option_backends import (
    InMemoryOptionBackend,
    OptionBackend,
    SqlAlchemyOptionBackend,
)
from rotorwash.schemas.settings import SettingsSection
from rotorwash.services.settings import (
    FieldRegistry,
    FieldRenderer,
    SettingsPageComposer,
    SettingsStore,
)
from rotorwash.services.theme import THEME_SECTIONS

logger = get_logger(__name__)


def build_backend(config: Settings) -> OptionBackend:
    """Option backend selected by OPTION_BACKEND."""
    if config.OPTION_BACKEND == "memory":
        return InMemoryOptionBackend()

    engine = build_engine(config.DATABASE_URL, echo=config.DATABASE_ECHO)
    try:
        init_db(engine)
    except SQLAlchemyError as e:
        logger.error(f"Option table could not be created; serving defaults until the database is reachable: {e}")
    return SqlAlchemyOptionBackend(build_session_factory(engine))


def create_app(
    config: Optional[Settings] = None,
    *,
    backend: Optional[OptionBackend] = None,
    sections: Iterable[SettingsSection] = THEME_SECTIONS,
    renderer: Optional[FieldRenderer] = None,
    configure_logging: bool = True,
) -> FastAPI:
    """
    Application factory for the FastAPI app.

    - Declares the settings sections and freezes the registry.
    - Builds one settings store and page composer for the process.
    - Registers core middleware and the settings/theme routes.
    """
    config = config or get_settings()
    if configure_logging:
        setup_logging(config)

    registry = FieldRegistry(sections).freeze()
    store = SettingsStore(backend or build_backend(config), registry)
    composer = SettingsPageComposer(
        store,
        registry,
        config.OPTION_NAME,
        renderer=renderer,
        page_title=config.settings_page_title(),
    )

    app = FastAPI(
        title=config.APP_NAME,
        debug=config.DEBUG,
        version=config.API_VERSION,
    )
    app.state.settings = config
    app.state.registry = registry
    app.state.store = store
    app.state.composer = composer

    register_middlewares(app)
    app.include_router(api_v1_router)

    logger.info(
        f"{config.settings_menu_label()} ready",
        extra={"section_count": len(registry), "option_name": config.OPTION_NAME},
    )
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("rotorwash.main:create_app", factory=True, host="0.0.0.0", port=8000)

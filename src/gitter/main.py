# src/gitter/main.py
"""Main entry point for the Gitter application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from sqlalchemy.orm import Session, sessionmaker

from gitter.api import auth_router, feed_router, pages_router, posts_router
from gitter.api.endpoints.pages import STATIC_DIR
from gitter.api.errors import register_exception_handlers
from gitter.core.settings import Settings, settings as default_settings
from gitter.db.session import Base, SessionLocal
from gitter.services.page_counter import PageCounter

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    session_factory: sessionmaker[Session] | None = None,
) -> FastAPI:
    """Build the application with its own page counter and session factory.

    Args:
        settings: Configuration; defaults to the environment-derived settings.
        session_factory: Factory for request sessions; defaults to ``SessionLocal``.

    Returns:
        A configured FastAPI application. The page counter is seeded from
        storage when the application starts.
    """
    cfg = settings or default_settings
    factory = session_factory or SessionLocal

    app = FastAPI(
        title=cfg.app_name,
        description="Minimal forum with a paginated post feed",
        version=cfg.app_version,
        debug=cfg.debug,
    )
    app.state.settings = cfg
    app.state.session_factory = factory
    app.state.page_counter = PageCounter()

    register_exception_handlers(app)

    app.include_router(feed_router)
    app.include_router(posts_router)
    app.include_router(auth_router)
    app.include_router(pages_router)
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    @app.on_event("startup")
    def on_startup() -> None:
        with factory() as session:
            if cfg.auto_create_tables:
                Base.metadata.create_all(bind=session.get_bind())
            app.state.page_counter.initialize(session)

    @app.get("/health")
    def health_check() -> dict[str, str]:
        """Health check endpoint to verify the service is running."""
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    logging.basicConfig(
        level=default_settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "gitter.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.debug,
    )


if __name__ == "__main__":
    run()

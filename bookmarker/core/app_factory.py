from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings
from .container import ApplicationContainer
from .logging import configure_logging
from ..application.services.auth_service import AuthService
from ..application.services.bookmark_service import BookmarkService
from ..application.services.user_service import UserService
from ..infrastructure.persistence.sqlite import SQLitePersistence
from ..presentation.api.errors import register_exception_handlers
from ..presentation.api.routers import auth as auth_router
from ..presentation.api.routers import bookmarks as bookmarks_router
from ..presentation.api.routers import user_router
from ..services.email_service import EmailService

logger = logging.getLogger(__name__)


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(title="Bookmarker API", lifespan=_create_lifespan(settings))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(auth_router.router)
    app.include_router(user_router.router)
    app.include_router(bookmarks_router.router)

    @app.get("/health")
    async def health() -> Dict[str, Any]:
        return {"ok": True}

    return app


def _create_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging()
        persistence = SQLitePersistence(settings.database_path)
        email_service = EmailService(
            smtp_host=settings.smtp_host,
            smtp_port=settings.smtp_port,
            smtp_username=settings.smtp_username,
            smtp_password=settings.smtp_password,
            from_email=settings.mail_from,
            from_name=settings.mail_from_name,
        )
        if not email_service.enabled:
            logger.info("SMTP not configured; verification links will be logged instead of sent")
        auth_service = AuthService(
            persistence,
            email_service,
            secret_key=settings.jwt_secret,
            token_exp_minutes=settings.jwt_exp_minutes,
            base_url=settings.app_base_url,
        )

        container = ApplicationContainer(
            settings=settings,
            persistence=persistence,
            email_service=email_service,
            auth_service=auth_service,
            bookmark_service=BookmarkService(persistence),
            user_service=UserService(persistence),
        )

        app.state.container = container  # type: ignore[attr-defined]
        logger.info("Using database at %s", settings.database_path)

        try:
            yield
        finally:
            persistence.close()

    return lifespan

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi

from .api.errors import register_exception_handlers
from .api.middleware import RecoveryMiddleware, RequestLoggingMiddleware
from .api.routing import build_api_router, build_health_router
from .core.config import Settings, get_settings
from .services.character_store import build_character_store
from .services.characters import CharacterService

logger = logging.getLogger("webservice.backend")

API_TITLE = "Anvil Recipes Web Service API"
API_VERSION = "1.0"
API_DESCRIPTION = "A RESTful web service for managing D&D character data"


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.logging_level, format="%(levelname)s %(name)s %(message)s")
    logging.getLogger().setLevel(settings.logging_level)


def _install_openapi(app: FastAPI) -> None:
    """Serve the API description with the declared (not enforced) API key scheme."""

    def openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema
        schema = get_openapi(
            title=app.title,
            version=app.version,
            description=app.description,
            routes=app.routes,
            terms_of_service=app.terms_of_service,
            contact=app.contact,
            license_info=app.license_info,
        )
        schema.setdefault("components", {})["securitySchemes"] = {
            "ApiKeyAuth": {"type": "apiKey", "in": "header", "name": "Authorization"},
        }
        app.openapi_schema = schema
        return schema

    app.openapi = openapi  # type: ignore[method-assign]


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    docs_path = settings.docs_path.rstrip("/")
    app = FastAPI(
        title=API_TITLE,
        version=API_VERSION,
        description=API_DESCRIPTION,
        terms_of_service="http://swagger.io/terms/",
        contact={"name": "API Support", "url": "http://www.swagger.io/support", "email": "support@swagger.io"},
        license_info={"name": "Apache 2.0", "url": "http://www.apache.org/licenses/LICENSE-2.0.html"},
        debug=settings.debug,
        docs_url=f"{docs_path}/index.html",
        openapi_url=f"{docs_path}/doc.json",
        swagger_ui_oauth2_redirect_url=f"{docs_path}/oauth2-redirect",
        redoc_url=None,
    )
    _install_openapi(app)

    store = build_character_store(settings.storage_backend)
    app.state.settings = settings
    app.state.character_store = store
    app.state.character_service = CharacterService(store)

    register_exception_handlers(app)
    app.add_middleware(RecoveryMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(build_health_router())
    app.include_router(build_api_router(settings.api_prefix))

    logger.debug("Application created in %s mode", settings.mode)
    return app


app = create_app()


__all__ = ["app", "create_app"]

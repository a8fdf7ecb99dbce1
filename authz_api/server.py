# authz_api/server.py
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from loguru import logger
from prometheus_client import make_asgi_app

from authz.authorizer import Authorizer
from authz.config import Settings, get_settings
from authz.errors import AuthorizationCheckError
from authz.factory import authorizer_from_file
from authz.schemas import AuthorizationDecision


def create_app(
    authorizer: Optional[Authorizer] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.authorizer is None and settings.config_file:
            logger.info(f"Loading RBAC config from {settings.config_file}")
            app.state.authorizer = authorizer_from_file(settings.config_file)
        if app.state.authorizer is None:
            logger.warning("No authorizer configured; every check will be refused")
        yield

    app = FastAPI(title="rbac-gate", lifespan=lifespan)
    app.state.authorizer = authorizer
    app.state.role_header = settings.role_header

    if settings.enable_metrics:
        app.mount("/metrics", make_asgi_app())

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.get("/authorize", response_model=AuthorizationDecision)
    def authorize(role: Optional[str] = None, resource: Optional[str] = None):
        """Answer a single check without guarding any route."""
        current = app.state.authorizer
        if current is None:
            return JSONResponse(
                status_code=503,
                content=AuthorizationDecision(
                    role=role, resource=resource, granted=False,
                    error="Authorization not configured",
                ).model_dump(),
            )
        try:
            granted = current.is_granted(role, resource)
        except AuthorizationCheckError as e:
            return JSONResponse(
                status_code=500,
                content=AuthorizationDecision(
                    role=role, resource=resource, granted=False, error=str(e)
                ).model_dump(),
            )
        return AuthorizationDecision(role=role, resource=resource, granted=granted)

    return app


app = create_app()

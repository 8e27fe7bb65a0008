from urllib.parse import urlparse

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from promocode_factory.api.exception_handlers import register_exception_handlers
from promocode_factory.api.v1.router import api_router
from promocode_factory.core.config import Settings, settings


def create_app(app_settings: Settings = settings) -> FastAPI:
    """Build the API. The frontend's origin, if configured, is the only one allowed by CORS."""
    application = FastAPI(title="PromoCodeFactory")

    if app_settings.frontend_url:
        parsed = urlparse(app_settings.frontend_url)
        application.add_middleware(
            CORSMiddleware,
            allow_origins=[f"{parsed.scheme}://{parsed.netloc}"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(application)
    application.include_router(api_router, prefix="/api/v1")

    @application.get("/health")
    def health():
        return {"status": "ok"}

    return application


app = create_app()

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Settings, settings as default_settings
from app.core.handlers import register_exception_handlers
from app.core.logging import logger, setup_logging
from app.api.v1.router import api_router
from app.services.student.student import StudentStore


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[StudentStore] = None,
) -> FastAPI:
    """
    Build the API application.

    The store is created from the settings unless one is injected. The
    STUDENT_DETAILS table is ensured at startup; a failure aborts startup.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.store = store or StudentStore.from_settings(settings)
        engine_url = app.state.store.engine.url.render_as_string(hide_password=True)
        logger.info(f"Using database {engine_url}")
        app.state.store.ensure_table()
        yield

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include API router
    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/")
    def root():
        """
        Health check endpoint
        """
        return {
            "message": f"Welcome to {settings.PROJECT_NAME}",
            "docs": "/docs",
            "version": settings.APP_VERSION
        }

    return app


app = create_app()


def run():
    """Serve the API with uvicorn on the configured host and port."""
    import uvicorn

    setup_logging(default_settings.LOG_LEVEL)
    logger.info(f"Server listening on port {default_settings.PORT}")
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)


if __name__ == "__main__":
    run()

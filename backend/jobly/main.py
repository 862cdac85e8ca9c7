import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from jobly import __version__
from jobly.api.auth import router as auth_router
from jobly.api.company import router as company_router
from jobly.api.user import router as user_router
from jobly.core.handlers import register_error_handlers
from jobly.core.settings import Settings, get_settings
from jobly.db import make_engine, make_session_factory


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)

    engine = make_engine(settings.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        engine.dispose()

    app = FastAPI(title=settings.APP_NAME, version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)

    register_error_handlers(app)

    app.include_router(auth_router)
    app.include_router(company_router)
    app.include_router(user_router)

    @app.get("/health")
    def health():
        return {
            "ok": True,
            "service": "jobly",
            "env": settings.ENV,
            "version": __version__,
        }

    return app


app = create_app()

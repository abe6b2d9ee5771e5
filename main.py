"""
Message.ly backend — application entry point.
"""

from __future__ import annotations

import logging
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.errors import register_exception_handlers
from api.middleware import register_middleware
from api.users import router as users_router
from auth.jwt import TokenIssuer
from auth.password import PasswordHasher
from auth.routes import router as auth_router
from config.settings import Settings, config
from database.session import build_engine, build_session_factory, init_db

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("sqlalchemy.engine", "asyncio"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or config

    app = FastAPI(
        title="Message.ly",
        version="1.0.0",
        description="Users, authentication and message listings.",
    )

    app.state.settings = settings
    app.state.password_hasher = PasswordHasher(settings.bcrypt_work_factor)
    app.state.token_issuer = TokenIssuer(settings.secret_key)
    app.state.engine = build_engine(settings.database_url)
    app.state.session_factory = build_session_factory(app.state.engine)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middleware(app)
    register_exception_handlers(app)

    # Routes
    app.include_router(auth_router)
    app.include_router(users_router, prefix="/users")

    @app.on_event("startup")
    async def on_startup():
        if settings.create_tables:
            logger.info("Creating tables…")
            await init_db(app.state.engine)
        logger.info("Application ready to accept requests.")

    @app.on_event("shutdown")
    async def on_shutdown():
        await app.state.engine.dispose()

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )

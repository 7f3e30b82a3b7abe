from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from starlette.middleware.cors import CORSMiddleware
from .config import settings
from .db import close_client, db
from .errors import register_error_handlers
from .logging_config import setup_logging
from .routers import blogs
import logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"using MongoDB database {db.name} ({settings.ENVIRONMENT} mode)")
    yield
    close_client()


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Bloglist", lifespan=lifespan)
    app.include_router(blogs.router, prefix="/api/blogs", tags=["blogs"])

    # Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_logger(request: Request, call_next):
        response = await call_next(request)
        logger.info(f"{request.method} {request.url.path} -> {response.status_code}")
        return response

    register_error_handlers(app)

    @app.get("/health")
    async def health():
        return {"status": "ok", "service": "bloglist"}

    return app


app = create_app()

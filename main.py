import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from context import RequestContextMiddleware
from models.rpc import RPC_CODES, RpcError, RpcErrorBody, RpcErrorData
from routes.posts import MUTATIONS, QUERIES, router as posts_router
from services.errors import FeedError, ValidationError
from services.posts import PostStore
from utils.logging import configure_logging

load_dotenv()

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
CORS_ALLOW_ORIGINS = [o.strip() for o in os.environ.get("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()]
SEED_FIXTURES = os.environ.get("SEED_FIXTURES", "true").lower() not in ("0", "false", "no", "off")

RPC_PREFIX = "/trpc"

configure_logging(LOG_LEVEL)
logger = logging.getLogger(__name__)


def error_response(request: Request, error: FeedError) -> JSONResponse:
    """Render a feed error in the RPC error envelope, logging it first"""
    path = request.url.path.rsplit("/", 1)[-1]
    logger.warning(f"{path} failed with {error.code}: {error}")
    body = RpcError(
        error=RpcErrorBody(
            message=str(error),
            code=RPC_CODES.get(error.code, RPC_CODES["INTERNAL_SERVER_ERROR"]),
            data=RpcErrorData(
                code=error.code,
                http_status=error.status_code,
                path=path,
                issues=getattr(error, "issues", None),
            ),
        )
    )
    return JSONResponse(
        status_code=error.status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


async def feed_error_handler(request: Request, exc: FeedError) -> JSONResponse:
    return error_response(request, exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(request, ValidationError.from_errors(exc.errors()))


def create_app(store: Optional[PostStore] = None) -> FastAPI:
    """
    Build the feed API around a store.

    Args:
        store: store to serve; when omitted a new one is built, seeded with
            the fixture feed unless SEED_FIXTURES is off
    """
    if store is None:
        store = PostStore.seeded() if SEED_FIXTURES else PostStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Feed store ready with {len(app.state.store.list_posts())} posts")
        yield
        logger.info("Shutting down feed API")

    app = FastAPI(title="Feed API", lifespan=lifespan)
    app.state.store = store

    # middleware to set request context
    app.add_middleware(RequestContextMiddleware)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_credentials="*" not in CORS_ALLOW_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    app.add_exception_handler(FeedError, feed_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Include routers
    app.include_router(posts_router, prefix=RPC_PREFIX, tags=["posts"])

    @app.get("/")
    async def index():
        """Simple liveness check listing the procedures"""
        return {
            "message": "Feed API is running!",
            "endpoints": {name: f"{RPC_PREFIX}/{name}" for name in QUERIES + MUTATIONS},
        }

    @app.get("/health")
    async def health(request: Request):
        return {"status": "ok", "posts": len(request.app.state.store.list_posts())}

    return app


app = create_app()

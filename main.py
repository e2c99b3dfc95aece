import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from config import Config
from routes.posts import router as posts_router
from services.posts import PostStore

logger = logging.getLogger(__name__)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies, path IDs and query parameters are client errors"""
    logger.warning("Invalid request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


def create_app(store: Optional[PostStore] = None) -> FastAPI:
    """
    Build the API application

    Args:
        store: Post store to serve from; a fresh empty one is created when omitted
    """
    logging.basicConfig(level=Config.LOG_LEVEL,
                        format="%(levelname)s: %(message)s")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Each app owns exactly one store for its lifetime
        app.state.post_store = store if store is not None else PostStore()
        logger.info("Post store initialized")
        yield

    app = FastAPI(lifespan=lifespan)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Include routers
    app.include_router(posts_router, prefix="/posts", tags=["posts"])

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=Config.HOST, port=Config.PORT, log_level=Config.LOG_LEVEL.lower())

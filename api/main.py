import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from core import config, cors, errors
from pages import router as pages_router
from posts import repository as post_repository
from posts import router as posts_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("blog_api_started posts=%s", len(app.state.post_store))
    try:
        yield
    finally:
        logger.info("blog_api_stopped posts=%s", len(app.state.post_store))


def create_app(store: post_repository.PostStore | None = None) -> FastAPI:
    """
    Build the API around `store` (a fresh, optionally seeded store when omitted).
    """
    config.configure_logging()
    if store is None:
        store = post_repository.build_store(seed=config.seed_posts_enabled())

    # Trailing-slash variants are unknown routes, not redirects.
    app = FastAPI(title="Blog API", lifespan=lifespan, redirect_slashes=False)
    app.state.post_store = store

    # Answer preflights and add CORS headers to JSON responses from any origin.
    cors.install(app)
    errors.install(app)

    app.include_router(pages_router.router, tags=["pages"])
    app.include_router(posts_router.router, tags=["posts"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()

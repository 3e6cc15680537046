"""Reference forum backend implementing the REST contract the client speaks."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from forum_client.config.server import ServerSettings
from forum_client.config.server import get_server_settings
from forum_client.server.api.auth import router as auth_router
from forum_client.server.api.comments import router as comments_router
from forum_client.server.api.posts import router as posts_router
from forum_client.server.api.topics import router as topics_router
from forum_client.server.store import ForumStore

logger = logging.getLogger(__name__)


def create_app(
    settings: ServerSettings | None = None, store: ForumStore | None = None
) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_server_settings()
    if store is None:
        store = ForumStore.with_seed_data() if settings.seed_data else ForumStore()

    app = FastAPI(
        title="Forum Reference Backend",
        description="Topics, posts and comments with moderator pinning",
        version="0.1.0",
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    app.include_router(auth_router)
    app.include_router(topics_router)
    app.include_router(posts_router)
    app.include_router(comments_router)

    @app.get("/health", response_class=PlainTextResponse)
    async def health_check() -> str:
        """Health check endpoint."""
        return "OK\n"

    return app


def main():
    """Main entry point - creates and returns the app instance."""
    return create_app()


if __name__ == "__main__":
    # Only run uvicorn when called directly, not when imported
    import uvicorn

    server_settings = get_server_settings()
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(
        "forum_client.server.main:main",
        factory=True,
        host=server_settings.host,
        port=server_settings.port,
        reload=server_settings.reload,
        log_level="info",
    )

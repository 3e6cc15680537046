"""Topics endpoint for the reference backend."""

from fastapi import APIRouter

from forum_client.models.topic import Topic
from forum_client.server.dependencies import StoreDep

router = APIRouter(prefix="/topics", tags=["topics"])


@router.get("")
async def list_topics(store: StoreDep) -> list[Topic]:
    """List every topic ordered by id."""
    return store.list_topics()

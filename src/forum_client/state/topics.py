"""Topic list controller."""

from forum_client.models.topic import Topic
from forum_client.state.controller import EntityListController


class TopicListController(EntityListController[Topic]):
    """Topics are loaded once and never mutated by the client."""

    label = "topics"

    async def _fetch(self, parent_id: int | None) -> list[Topic]:
        return await self._api.list_topics()

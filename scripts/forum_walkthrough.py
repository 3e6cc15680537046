#!/usr/bin/env python3
"""
Walkthrough script for the forum client.

Logs in, browses the first topic and exercises create, edit, pin and delete
against a running backend (FORUM_CLIENT_BASE_URL, default
http://localhost:8080). Start the reference backend with
``python -m forum_client.server.main``.
"""

import argparse
import asyncio
import logging
import sys

from pathlib import Path

# Add the src directory to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from forum_client.config.settings import get_settings
from forum_client.state.app import ForumClientApp
from forum_client.state.base import Outcome
from forum_client.state.prompts import ScriptedPrompts

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def walkthrough(username: str) -> int:
    """Run one scripted session; returns a process exit code."""
    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level.upper())

    async with ForumClientApp.from_settings(
        settings.client, ScriptedPrompts(confirm_result=True)
    ) as app:
        if not await app.api.health():
            logger.error(f"Backend at {app.api.base_url} is not reachable")
            return 1

        if await app.mount() is not Outcome.SUCCESS:
            logger.error(f"Could not load topics: {app.topics.error}")
            return 1
        for topic in app.topics.items:
            logger.info(f"Topic {topic.id}: {topic.title} - {topic.description}")
        if not app.topics.items:
            logger.warning("No topics to browse")
            return 0

        if await app.login(username) is not Outcome.SUCCESS:
            logger.error(f"Login failed: {app.session.error}")
            return 1

        topic = app.topics.items[0]
        await app.select_topic(topic.id)
        for post in app.posts.items:
            logger.info(f"  Post {post.id} by {post.author}: {post.title}")

        outcome = await app.posts.create(
            {"title": "Walkthrough post", "content": "Created by the walkthrough"}
        )
        if outcome is not Outcome.SUCCESS:
            logger.error(f"Create failed: {app.posts.form.error}")
            return 1
        created = app.posts.items[-1]

        await app.posts.update(
            created.id, {"title": "Walkthrough post (edited)", "content": "Edited"}
        )
        await app.select_post(created.id)
        await app.comments.create({"content": "First!"})
        logger.info(f"  Post {created.id} has {len(app.comments.items)} comment(s)")

        pin_outcome = await app.posts.toggle_pin(created.id)
        if pin_outcome is Outcome.SKIPPED:
            logger.info(f"  {username} is not a moderator; pin skipped")

        await app.posts.delete(created.id)
        logger.info(
            f"Done: {len(app.posts.items)} post(s) left in {topic.title}, "
            f"selected post={app.selection.selected_post}"
        )
    return 0


def main():
    parser = argparse.ArgumentParser(description="Forum client walkthrough")
    parser.add_argument("--username", default="alice", help="User to log in as")
    args = parser.parse_args()
    sys.exit(asyncio.run(walkthrough(args.username)))


if __name__ == "__main__":
    main()

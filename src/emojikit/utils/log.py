"""
log.py.

Does: Lightweight topic debug printer controlled by EMOJIKIT_DEBUG_TOPICS (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level. Used by the CLI and catalogue loading.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "enabled", "reload_topics"]

TOPICS_ENV = "EMOJIKIT_DEBUG_TOPICS"


def _load_topics(raw: str | None = None) -> set[str]:
    if raw is None:
        raw = os.getenv(TOPICS_ENV, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics(topics: str | None = None) -> None:
    """Does: Reload topics from `topics` (same syntax) or, when None, from EMOJIKIT_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics(topics)


def enabled(topic: str) -> bool:
    """Does: Tell whether `topic` is switched on (nothing is on by default)."""
    topic_key = topic.lower().strip()
    return "all" in _DEBUG_TOPICS or topic_key in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "emojikit",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if enabled via EMOJIKIT_DEBUG_TOPICS.
    """
    if not enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)

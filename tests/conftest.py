"""Shared test fixtures for facadetrace tests."""

from __future__ import annotations

import pytest
from loguru import logger

from facadetrace.geometry.primitives import Point


@pytest.fixture
def square_cw() -> list[Point]:
    """10x10 square traced clockwise on screen (y grows downwards)."""
    return [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]


@pytest.fixture
def square_ccw(square_cw: list[Point]) -> list[Point]:
    return list(reversed(square_cw))


@pytest.fixture
def diamond_cw() -> list[Point]:
    """Square rotated by 45 degrees, traced clockwise on screen."""
    return [Point(5, 0), Point(10, 5), Point(5, 10), Point(0, 5)]


@pytest.fixture
def log_messages():
    """Collect loguru messages at WARNING and above."""
    messages: list[str] = []
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)

"""Shared fixtures for linkhooks tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest

from linkhooks.graph import TargetRegistry
from linkhooks.runtime.eventbus import EventBus


@pytest.fixture
def eventbus() -> EventBus:
    return EventBus()


@pytest.fixture
def registry(eventbus: EventBus) -> TargetRegistry:
    return TargetRegistry(eventbus=eventbus, name="test")


@pytest.fixture
def write_hook(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a hook file under tmp_path/hooks and return its path."""

    hooks_dir = tmp_path / "hooks"
    hooks_dir.mkdir()

    def _write(name: str, body: str) -> Path:
        path = hooks_dir / name
        path.write_text(textwrap.dedent(body), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def marker_hook(write_hook: Callable[[str, str], Path]) -> Callable[[str], Path]:
    """Build hook files that append their tag to the consumer's HOOK_LOG."""

    def _make(tag: str) -> Path:
        return write_hook(
            f"{tag}.py",
            f"""
            def on_linked_as_dependency(consumer):
                consumer.append_property("HOOK_LOG", "{tag}:" + consumer.name)
            """,
        )

    return _make

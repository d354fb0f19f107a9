"""Pytest configuration and shared fixtures."""
import random

import pytest

from zapchat.chat import ConversationController, ManualScheduler, MockFileDownloader
from zapchat.config import ChatConfig
from zapchat.storage import CredentialStore, InMemoryStore


class RecordingDebug:
    """Debug callback that keeps every (level, component, message)."""

    def __init__(self):
        self.entries = []

    def __call__(self, level, component, message):
        self.entries.append((level, component, message))

    def components(self):
        return {component for _, component, _ in self.entries}


@pytest.fixture
def scheduler():
    """Virtual-clock scheduler."""
    return ManualScheduler()


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def config():
    """Default timings, memory-backed key storage."""
    return ChatConfig(store_backend="memory")


@pytest.fixture
def memory_store():
    return InMemoryStore()


@pytest.fixture
def credentials(memory_store):
    return CredentialStore(memory_store)


@pytest.fixture
def downloader():
    return MockFileDownloader()


@pytest.fixture
def opened_urls():
    return []


@pytest.fixture
def debug():
    return RecordingDebug()


@pytest.fixture
def controller(scheduler, config, rng, credentials, downloader, opened_urls, debug):
    """Controller with a manual clock, past the loading splash."""
    ctrl = ConversationController(
        scheduler,
        config,
        rng=rng,
        credentials=credentials,
        downloader=downloader,
        open_url=opened_urls.append,
        debug_callback=debug,
    )
    yield ctrl
    ctrl.close()

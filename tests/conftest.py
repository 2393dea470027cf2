"""
Shared fixtures: a small phrase catalog, a scripted remote client and a
router wired from them.
"""
import asyncio
from typing import List, Optional

import pytest

from phrase_router.core.metrics import reset_metrics
from phrase_router.models.internal_models import PhraseCategory, PhraseEntry
from phrase_router.services.fuzzy_matcher import FuzzyMatcher
from phrase_router.services.phrase_index import PhraseIndex
from phrase_router.services.remote_client import BaseRemoteTranslationClient
from phrase_router.services.translation_cache import TranslationCache
from phrase_router.services.translation_history_service import HistoryLog
from phrase_router.services.translation_router import TranslationRouter


SMALL_CATALOG = (
    PhraseEntry("greeting_01", "你好", "안녕하세요", "Annyeonghaseyo", PhraseCategory.GREETING),
    PhraseEntry("greeting_02", "谢谢", "감사합니다", "Gamsahamnida", PhraseCategory.GREETING),
    PhraseEntry("restaurant_05", "请给我菜单", "메뉴 주세요", "Menyu juseyo", PhraseCategory.RESTAURANT),
    PhraseEntry("shopping_09", "多少钱？", "얼마예요?", "Eolmayeyo?", PhraseCategory.SHOPPING),
    PhraseEntry("emergency_01", "救命！", "살려주세요!", "Sallyeojuseyo!", PhraseCategory.EMERGENCY),
)


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeRemoteClient(BaseRemoteTranslationClient):
    """
    Remote client returning scripted outcomes in order; an exception instance
    in the script is raised instead of returned. The last outcome repeats.
    With block=True the first call hangs until cancelled.
    """

    def __init__(self, outcomes: Optional[List] = None, block: bool = False):
        self.outcomes = list(outcomes or ["번역"])
        self.calls = []
        self.block = block
        self.started = asyncio.Event()
        self.closed = False

    async def translate(self, text, source_lang, target_lang):
        self.calls.append((text, source_lang, target_lang))
        if self.block and len(self.calls) == 1:
            self.started.set()
            await asyncio.Event().wait()
        outcome = self.outcomes[0] if len(self.outcomes) == 1 else self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def aclose(self):
        self.closed = True


@pytest.fixture(autouse=True)
def clean_metrics():
    reset_metrics()
    yield
    reset_metrics()


@pytest.fixture
def small_catalog():
    return SMALL_CATALOG


@pytest.fixture
def small_index():
    return PhraseIndex.from_catalog(SMALL_CATALOG)


@pytest.fixture
def matcher(small_index):
    return FuzzyMatcher(small_index)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def client_factory():
    return FakeRemoteClient


@pytest.fixture
def fake_client():
    return FakeRemoteClient(["안녕하세요~"])


@pytest.fixture
def make_router(matcher, clock):
    def _make(client: BaseRemoteTranslationClient, **kwargs) -> TranslationRouter:
        return TranslationRouter(
            matcher=matcher,
            cache=TranslationCache(ttl_seconds=3600, clock=clock),
            client=client,
            history=HistoryLog(max_size=20),
            **kwargs
        )
    return _make


@pytest.fixture
def router(make_router, fake_client):
    return make_router(fake_client)


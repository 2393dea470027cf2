"""
Unit tests for the translation router: offline-first routing, caching,
degraded fallback, batch translation and cancellation.
"""
import asyncio

import pytest

from phrase_router.core.exceptions import (
    InvalidInputError,
    ProviderRateLimitedError,
    ProviderServerError,
    TranslationCancelledError,
    UnknownTranslationError,
)
from phrase_router.core.metrics import get_metrics_snapshot
from phrase_router.models.internal_models import Language
from phrase_router.services.romanizer import romanize_korean
from phrase_router.services.translation_router import CONNECTIVITY_GUIDANCE

ZH, KO = Language.CHINESE, Language.KOREAN


@pytest.mark.asyncio
async def test_catalog_phrase_served_offline(router, fake_client):
    result = await router.translate("你好", ZH, KO)

    assert result.is_offline
    assert result.translated_text == "안녕하세요"
    assert result.romanization == "Annyeonghaseyo"
    assert result.matched_phrase.id == "greeting_01"
    assert result.similarity == pytest.approx(0.9)
    assert fake_client.calls == []
    assert router.get_stats()["offline"] == 1


@pytest.mark.asyncio
async def test_offline_romanization_keeps_catalog_capitalization(router):
    # catalog romanizations are capitalized ("Annyeonghaseyo"); generated ones are lowercase
    result = await router.translate("你好", ZH, KO)

    assert result.romanization == "Annyeonghaseyo"
    assert romanize_korean(result.translated_text) == "annyeonghaseyo"
    assert result.romanization.lower() == romanize_korean(result.translated_text)


@pytest.mark.asyncio
async def test_korean_to_chinese_offline_has_no_romanization(router):
    result = await router.translate("안녕하세요", KO, ZH)
    assert result.translated_text == "你好"
    assert result.romanization is None


@pytest.mark.asyncio
async def test_near_miss_escalates_exactly_once(router, fake_client):
    result = await router.translate("你好呀", ZH, KO)

    assert not result.is_offline
    assert result.translated_text == "안녕하세요~"
    assert result.romanization == romanize_korean("안녕하세요~")
    assert result.matched_phrase is None
    assert fake_client.calls == [("你好呀", ZH, KO)]
    assert router.cache.get("你好呀", ZH, KO) == "안녕하세요~"


@pytest.mark.asyncio
async def test_second_request_served_from_cache(router, fake_client):
    await router.translate("你好呀", ZH, KO)
    result = await router.translate("  你好呀 ", ZH, KO)

    assert not result.is_offline
    assert result.translated_text == "안녕하세요~"
    assert len(fake_client.calls) == 1
    assert router.get_stats() == {"offline": 0, "cached": 1, "remote": 1, "degraded": 0, "failed": 0}


@pytest.mark.asyncio
async def test_remote_and_cached_korean_results_are_romanized(make_router, client_factory):
    router = make_router(client_factory(["안녕하세요"]))

    remote = await router.translate("你好呀", ZH, KO)
    cached = await router.translate("你好呀", ZH, KO)

    assert remote.romanization == "annyeonghaseyo"
    assert cached.romanization == "annyeonghaseyo"
    assert router.get_stats()["cached"] == 1
    assert router.history.list()[0].romanization == "annyeonghaseyo"


@pytest.mark.asyncio
async def test_remote_chinese_result_has_no_romanization(make_router, client_factory):
    router = make_router(client_factory(["你好啊"]))

    result = await router.translate("안녕하세요요", KO, ZH)

    assert not result.is_offline
    assert result.translated_text == "你好啊"
    assert result.romanization is None


@pytest.mark.asyncio
async def test_expired_cache_entry_calls_provider_again(router, fake_client, clock):
    await router.translate("你好呀", ZH, KO)
    clock.advance(3601)
    await router.translate("你好呀", ZH, KO)
    assert len(fake_client.calls) == 2


@pytest.mark.asyncio
async def test_remote_failure_falls_back_to_looser_catalog_match(make_router, client_factory):
    client = client_factory([ProviderServerError()])
    router = make_router(client)

    result = await router.translate("请给我菜单吧", ZH, KO)

    assert result.is_offline
    assert result.translated_text == "메뉴 주세요"
    assert result.romanization == "Menyu juseyo"
    assert result.similarity == pytest.approx(0.5 + 0.1 - 0.2 / 6)
    assert router.get_stats()["degraded"] == 1
    assert len(router.cache) == 0


@pytest.mark.asyncio
async def test_remote_failure_without_fallback_raises_with_guidance(make_router, client_factory):
    router = make_router(client_factory([ProviderRateLimitedError()]))

    with pytest.raises(ProviderRateLimitedError) as exc_info:
        await router.translate("你好呀", ZH, KO)

    assert exc_info.value.message.endswith(CONNECTIVITY_GUIDANCE)
    assert isinstance(exc_info.value.__cause__, ProviderRateLimitedError)
    assert router.get_stats()["failed"] == 1
    assert len(router.cache) == 0
    assert len(router.history) == 0


@pytest.mark.asyncio
async def test_degraded_threshold_is_configurable(make_router, client_factory):
    router = make_router(client_factory([ProviderServerError()]), degraded_threshold=0.8)

    with pytest.raises(ProviderServerError):
        await router.translate("请给我菜单吧", ZH, KO)


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["", "   "])
async def test_empty_input_rejected(router, fake_client, text):
    with pytest.raises(InvalidInputError):
        await router.translate(text, ZH, KO)
    assert fake_client.calls == []


@pytest.mark.asyncio
async def test_oversized_input_rejected(router, fake_client):
    with pytest.raises(InvalidInputError):
        await router.translate("字" * 5001, ZH, KO)
    assert fake_client.calls == []


@pytest.mark.asyncio
async def test_same_language_rejected(router):
    with pytest.raises(InvalidInputError):
        await router.translate("你好", ZH, ZH)


@pytest.mark.asyncio
async def test_auto_detect_sets_both_languages(router):
    result = await router.translate("안녕하세요", ZH, ZH, auto_detect=True)

    assert result.source_language == KO
    assert result.target_language == ZH
    assert result.translated_text == "你好"


@pytest.mark.asyncio
async def test_history_records_trimmed_source(router):
    await router.translate("  你好 ", ZH, KO)
    await router.translate("你好呀", ZH, KO)

    records = router.history.list()
    assert [r.source_text for r in records] == ["你好呀", "你好"]
    assert records[1].is_offline
    assert records[1].romanization == "Annyeonghaseyo"
    assert not records[0].is_offline


@pytest.mark.asyncio
async def test_batch_skips_failed_items(make_router, client_factory):
    router = make_router(client_factory([ProviderServerError()]))

    results = await router.translate_batch(["你好", "你好呀", "谢谢"], ZH, KO)

    assert [r.translated_text for r in results] == ["안녕하세요", "감사합니다"]
    assert all(r.is_offline for r in results)


@pytest.mark.asyncio
async def test_batch_of_empty_list(router):
    assert await router.translate_batch([], ZH, KO) == []


@pytest.mark.asyncio
async def test_detailed_batch_keeps_input_positions(make_router, client_factory):
    router = make_router(client_factory([ProviderServerError()]))

    outcome = await router.translate_batch_detailed(["你好", "新句子", "", "谢谢"], ZH, KO)

    assert [(i, r.translated_text) for i, r in outcome.results] == [(0, "안녕하세요"), (3, "감사합니다")]
    assert [i for i, _ in outcome.failures] == [1, 2]
    assert isinstance(outcome.failures[0][1], ProviderServerError)
    assert isinstance(outcome.failures[1][1], InvalidInputError)


@pytest.mark.asyncio
async def test_cancelling_batch_stops_remaining_items(make_router, client_factory):
    client = client_factory(["新的"], block=True)
    router = make_router(client)

    task = asyncio.create_task(router.translate_batch(["新句子一", "新句子二", "新句子三"], ZH, KO))
    await client.started.wait()
    task.cancel()

    with pytest.raises(TranslationCancelledError):
        await task
    assert len(client.calls) == 1
    assert len(router.history) == 0


@pytest.mark.asyncio
async def test_unexpected_client_error_is_wrapped(make_router, client_factory):
    router = make_router(client_factory([RuntimeError("boom")]))

    with pytest.raises(UnknownTranslationError) as exc_info:
        await router.translate("新句子", ZH, KO)

    assert "boom" in exc_info.value.message
    assert exc_info.value.message.endswith(CONNECTIVITY_GUIDANCE)
    assert router.get_stats()["failed"] == 1


@pytest.mark.asyncio
async def test_unexpected_client_error_skips_only_that_batch_item(make_router, client_factory):
    router = make_router(client_factory([RuntimeError("boom"), "好", "好"]))

    results = await router.translate_batch(["新句子一", "新句子二", "新句子三"], ZH, KO)

    assert [r.translated_text for r in results] == ["好", "好"]


@pytest.mark.asyncio
async def test_cancellation_leaves_cache_untouched(make_router, client_factory):
    client = client_factory(["안녕~"], block=True)
    router = make_router(client)

    task = asyncio.create_task(router.translate("你好呀", ZH, KO))
    await client.started.wait()
    task.cancel()

    with pytest.raises(TranslationCancelledError):
        await task
    assert len(router.cache) == 0
    assert len(router.history) == 0
    assert router.get_stats()["failed"] == 1


@pytest.mark.asyncio
async def test_routing_metrics_recorded(router):
    await router.translate("你好", ZH, KO)
    await router.translate("你好呀", ZH, KO)

    snapshot = get_metrics_snapshot()
    assert snapshot["counters"]["translation.offline"] == 1
    assert snapshot["counters"]["translation.remote"] == 1
    assert snapshot["timers"]["translation.route"]["count"] == 2
    assert snapshot["timers"]["translation.remote"]["count"] == 1

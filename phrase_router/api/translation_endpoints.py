"""Translation endpoints: single and batch translation, history and cache management."""
from fastapi import APIRouter, Depends, HTTPException, Request
import logging

from phrase_router.core.metrics import get_metrics_snapshot
from phrase_router.schemas.translation import (
    BatchTranslationCreate,
    HistoryRead,
    TranslationCreate,
    TranslationRead,
)
from phrase_router.services.translation_router import TranslationRouter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/translation", tags=["translation"])


def get_translation_router(request: Request) -> TranslationRouter:
    return request.app.state.translation_router


@router.post("/text")
async def translate_text(
    body: TranslationCreate,
    engine: TranslationRouter = Depends(get_translation_router),
):
    """
    Translate text, preferring the offline phrase catalog.
    Engine errors are rendered by the registered error handlers.
    """
    result = await engine.translate(
        body.text,
        source_lang=body.source_language,
        target_lang=body.target_language,
        auto_detect=body.auto_detect,
    )
    data = TranslationRead.from_result(body.text.strip(), result)
    return {"status": "ok", "data": data.model_dump(mode="json"), "error": None}


@router.post("/batch")
async def translate_batch(
    body: BatchTranslationCreate,
    engine: TranslationRouter = Depends(get_translation_router),
):
    """Translate several texts; failed items are reported by index instead of aborting the batch."""
    outcome = await engine.translate_batch_detailed(
        body.texts,
        source_lang=body.source_language,
        target_lang=body.target_language,
        auto_detect=body.auto_detect,
    )
    items = [
        TranslationRead.from_result(body.texts[i].strip(), result).model_dump(mode="json")
        for i, result in outcome.results
    ]
    failures = [
        {"index": i, "error": f"{e.error_code.value}: {e.message}"}
        for i, e in outcome.failures
    ]
    return {
        "status": "ok",
        "data": {"results": items, "failed": failures},
        "error": None,
    }


@router.get("/history")
async def list_history(
    limit: int | None = None,
    engine: TranslationRouter = Depends(get_translation_router),
):
    records = engine.history.list(limit) if engine.history is not None else []
    return {
        "status": "ok",
        "data": [HistoryRead.from_record(r).model_dump(mode="json") for r in records],
        "error": None,
    }


@router.get("/history/stats")
async def history_stats(engine: TranslationRouter = Depends(get_translation_router)):
    stats = engine.history.stats() if engine.history is not None else {}
    return {"status": "ok", "data": stats, "error": None}


@router.delete("/history")
async def clear_history(engine: TranslationRouter = Depends(get_translation_router)):
    if engine.history is not None:
        engine.history.clear()
    return {"status": "ok", "data": {"cleared": True}, "error": None}


@router.delete("/history/{record_id}")
async def delete_history_item(
    record_id: str,
    engine: TranslationRouter = Depends(get_translation_router),
):
    if engine.history is None or not engine.history.delete(record_id):
        raise HTTPException(status_code=404, detail="History record not found")
    return {"status": "ok", "data": {"deleted": record_id}, "error": None}


@router.get("/cache/stats")
async def cache_stats(engine: TranslationRouter = Depends(get_translation_router)):
    return {"status": "ok", "data": engine.cache.stats(), "error": None}


@router.delete("/cache")
async def clear_cache(engine: TranslationRouter = Depends(get_translation_router)):
    engine.cache.clear()
    return {"status": "ok", "data": {"cleared": True}, "error": None}


@router.get("/stats")
async def routing_stats(engine: TranslationRouter = Depends(get_translation_router)):
    return {
        "status": "ok",
        "data": {"paths": engine.get_stats(), "metrics": get_metrics_snapshot()},
        "error": None,
    }

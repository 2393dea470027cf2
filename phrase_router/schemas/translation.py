from pydantic import BaseModel, Field
from typing import Optional

from phrase_router.models.internal_models import HistoryRecord, Language, TranslationResult
from phrase_router.schemas.phrase import PhraseRead


class TranslationCreate(BaseModel):
    text: str
    source_language: Language = Language.CHINESE
    target_language: Language = Language.KOREAN
    auto_detect: bool = False


class BatchTranslationCreate(BaseModel):
    texts: list[str] = Field(..., max_length=50)
    source_language: Language = Language.CHINESE
    target_language: Language = Language.KOREAN
    auto_detect: bool = False


class TranslationRead(BaseModel):
    source_text: str
    translated_text: str
    source_language: Language
    target_language: Language
    romanization: Optional[str] = None
    is_offline: bool
    matched_phrase: Optional[PhraseRead] = None
    similarity: Optional[float] = Field(None, description="Catalog match score for offline results")

    @classmethod
    def from_result(cls, source_text: str, result: TranslationResult) -> "TranslationRead":
        return cls(
            source_text=source_text,
            translated_text=result.translated_text,
            source_language=result.source_language,
            target_language=result.target_language,
            romanization=result.romanization,
            is_offline=result.is_offline,
            matched_phrase=PhraseRead.from_entry(result.matched_phrase) if result.matched_phrase else None,
            similarity=result.similarity,
        )


class HistoryRead(BaseModel):
    id: str
    source_text: str
    target_text: str
    source_language: Language
    target_language: Language
    romanization: Optional[str] = None
    is_offline: bool
    timestamp: float

    @classmethod
    def from_record(cls, record: HistoryRecord) -> "HistoryRead":
        return cls(
            id=record.id,
            source_text=record.source_text,
            target_text=record.target_text,
            source_language=record.source_language,
            target_language=record.target_language,
            romanization=record.romanization,
            is_offline=record.is_offline,
            timestamp=record.timestamp,
        )

from pydantic import BaseModel

from phrase_router.models.internal_models import PhraseEntry


class PhraseRead(BaseModel):
    id: str
    primary_text: str
    secondary_text: str
    secondary_pronunciation: str | None = None
    category: str

    @classmethod
    def from_entry(cls, entry: PhraseEntry) -> "PhraseRead":
        return cls(
            id=entry.id,
            primary_text=entry.primary_text,
            secondary_text=entry.secondary_text,
            secondary_pronunciation=entry.secondary_pronunciation or None,
            category=entry.category.value,
        )


class SimilarPhrase(BaseModel):
    phrase: PhraseRead
    similarity: float
    matched_language: str

"""
Phrase index over the offline catalog.

Entries are bucketed by category and by the first character of each language
field so the fuzzy matcher can prune its candidate set. The index is built once
and then only read, so it needs no locking.
"""
import logging
from collections import defaultdict
from typing import Dict, Iterable, List

from phrase_router.models.internal_models import Language, PhraseCategory, PhraseEntry

logger = logging.getLogger(__name__)

DEFAULT_MIN_BUCKET_SIZE = 5


class PhraseIndex:
    """Category and first-character lookup structures for the phrase catalog"""

    def __init__(self, min_bucket_size: int = DEFAULT_MIN_BUCKET_SIZE):
        self.min_bucket_size = min_bucket_size
        self._entries: List[PhraseEntry] = []
        self._by_category: Dict[PhraseCategory, List[PhraseEntry]] = {}
        self._by_first_char: Dict[Language, Dict[str, List[PhraseEntry]]] = {
            language: {} for language in Language
        }

    @classmethod
    def from_catalog(cls, catalog: Iterable[PhraseEntry], **kwargs) -> "PhraseIndex":
        index = cls(**kwargs)
        index.build(catalog)
        return index

    def build(self, catalog: Iterable[PhraseEntry]) -> "PhraseIndex":
        """
        (Re)build all buckets from the catalog.

        Args:
            catalog: Phrase entries in canonical order

        Returns:
            The index itself, for chaining
        """
        entries = list(catalog)
        by_category = defaultdict(list)
        by_first_char = {language: defaultdict(list) for language in Language}

        for entry in entries:
            by_category[entry.category].append(entry)
            for language in Language:
                text = entry.text_for(language)
                if text:
                    by_first_char[language][text[0]].append(entry)

        self._entries = entries
        self._by_category = dict(by_category)
        self._by_first_char = {
            language: dict(buckets) for language, buckets in by_first_char.items()
        }

        logger.info(
            f"Phrase index built: {len(entries)} entries, "
            f"{len(self._by_category)} categories"
        )
        return self

    def by_category(self, category: PhraseCategory) -> List[PhraseEntry]:
        return list(self._by_category.get(category, []))

    def by_first_char(self, language: Language, char: str) -> List[PhraseEntry]:
        return list(self._by_first_char[language].get(char, []))

    def all_entries(self) -> List[PhraseEntry]:
        """All entries in catalog order"""
        return list(self._entries)

    def candidates_for(self, language: Language, input_text: str) -> List[PhraseEntry]:
        """
        Candidate entries for fuzzy matching input_text in the given language.

        Falls back to the whole catalog when the first-character bucket holds
        fewer than min_bucket_size entries.
        """
        bucket = self._by_first_char[language].get(input_text[0], []) if input_text else []
        if len(bucket) < self.min_bucket_size:
            return self.all_entries()
        return list(bucket)

    def __len__(self) -> int:
        return len(self._entries)

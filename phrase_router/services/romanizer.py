"""Revised Romanization of Korean text for remote and cached translations."""
import logging
from typing import Optional

from korean_romanizer.romanizer import Romanizer

from phrase_router.services.lang_detect import is_korean

logger = logging.getLogger(__name__)


def romanize_korean(text: str) -> Optional[str]:
    """
    Romanize Korean text.

    Args:
        text: Korean text, typically a provider translation

    Returns:
        Romanized text, or None when the text has no Hangul or cannot be romanized
    """
    if not text or not is_korean(text):
        return None

    try:
        return Romanizer(text).romanize()
    except Exception as e:
        # the translation itself is still usable without a pronunciation
        logger.warning(f"Korean romanization failed ({type(e).__name__}): {e}")
        return None

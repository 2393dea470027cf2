"""Very lightweight script-based language detection for Chinese/Korean input."""
from phrase_router.models.internal_models import Language


def _is_hangul_syllable(char: str) -> bool:
    return '\uac00' <= char <= '\ud7a3'


def _is_cjk_ideograph(char: str) -> bool:
    return '\u4e00' <= char <= '\u9fff'


def detect_language(text: str) -> Language:
    """
    Detect language using simple script heuristics.

    Args:
        text: Input text to analyze

    Returns:
        Language.KOREAN if any Hangul syllable is present, else Language.CHINESE
    """
    trimmed = text.strip()
    if not trimmed:
        return Language.CHINESE

    if any(_is_hangul_syllable(char) for char in trimmed):
        return Language.KOREAN

    return Language.CHINESE


def is_korean(text: str) -> bool:
    return detect_language(text) is Language.KOREAN


def is_chinese(text: str) -> bool:
    """True when the text contains CJK ideographs and no Hangul."""
    return detect_language(text) is Language.CHINESE and any(
        _is_cjk_ideograph(char) for char in text
    )

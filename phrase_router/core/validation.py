"""
Input validation for translation requests
"""
from phrase_router.core.exceptions import InvalidInputError
from phrase_router.models.internal_models import Language

DEFAULT_MAX_TEXT_LENGTH = 5000


def validate_text_length(text: str, max_length: int = DEFAULT_MAX_TEXT_LENGTH,
                         field_name: str = "Text to translate") -> str:
    """
    Validate text length

    Args:
        text: Text to validate
        max_length: Maximum allowed length
        field_name: Name of field for error message

    Returns:
        Validated text, trimmed

    Raises:
        InvalidInputError: If text is too long or empty
    """
    if not text or not text.strip():
        raise InvalidInputError(f"{field_name} cannot be empty")

    if len(text) > max_length:
        raise InvalidInputError(
            f"{field_name} too long ({len(text)} chars, max {max_length})",
            details={"length": len(text), "max_length": max_length},
        )

    return text.strip()


def validate_language_pair(source_lang: Language, target_lang: Language) -> None:
    if Language(source_lang) == Language(target_lang):
        raise InvalidInputError(
            "Source and target language must differ",
            details={"language": Language(source_lang).value},
        )

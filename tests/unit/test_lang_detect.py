from phrase_router.models.internal_models import Language
from phrase_router.services.lang_detect import detect_language, is_chinese, is_korean


def test_detect_korean():
    assert detect_language("안녕하세요") == Language.KOREAN
    assert detect_language("你好 안녕") == Language.KOREAN


def test_detect_chinese():
    assert detect_language("你好") == Language.CHINESE
    assert detect_language("多少钱？") == Language.CHINESE


def test_non_cjk_defaults_to_chinese():
    assert detect_language("hello") == Language.CHINESE
    assert detect_language("   ") == Language.CHINESE


def test_helpers():
    assert is_korean("감사합니다")
    assert not is_korean("谢谢")
    assert is_chinese("谢谢")
    assert not is_chinese("hello")
    assert not is_chinese("감사합니다")


def test_language_other():
    assert Language.CHINESE.other == Language.KOREAN
    assert Language.KOREAN.other == Language.CHINESE

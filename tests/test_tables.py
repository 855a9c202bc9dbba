import pytest

from varnavinyas.core import Origin
from varnavinyas.tables import lookup_origin


@pytest.mark.parametrize(
    "word, expected",
    [
        ("विज्ञान", Origin.TATSAM),
        ("आगो", Origin.TADBHAV),
        ("टोपी", Origin.DESHAJ),
        ("कम्प्युटर", Origin.AAGANTUK),
        ("महत्त्व", Origin.TATSAM),
        ("हामी", Origin.TADBHAV),
        ("अग्नि", Origin.TATSAM),
        ("ऋषि", Origin.TATSAM),
        ("शेष", Origin.TATSAM),
        ("लक्ष्य", Origin.TATSAM),
        ("कृति", Origin.TATSAM),
        ("हात", Origin.TADBHAV),
        ("मिठो", Origin.TADBHAV),
        ("दिदी", Origin.TADBHAV),
        ("रजिस्टर", Origin.AAGANTUK),
        ("इन्डिया", Origin.AAGANTUK),
        ("मुद्दा", Origin.AAGANTUK),
        ("चुला", Origin.DESHAJ),
        ("भाका", Origin.DESHAJ),
        ("सुरुआत", Origin.TADBHAV),
        ("हरू", Origin.TADBHAV),
        ("इन्स्टिच्यूट", Origin.AAGANTUK),
        ("इन्स्टिच्युट", Origin.AAGANTUK),
    ],
)
def test_lookup_known_words(word, expected):
    assert lookup_origin(word) is expected


def test_lookup_unknown_word_returns_none():
    assert lookup_origin("घरघर") is None
    assert lookup_origin("") is None


def test_lookup_heuristic_only_word_returns_none():
    assert lookup_origin("क़लम") is None


def test_lookup_requires_exact_match():
    assert lookup_origin("विज्ञानमा") is None
    assert lookup_origin("विज्ञा") is None
    assert lookup_origin("ऋषिमुनि") is Origin.TATSAM
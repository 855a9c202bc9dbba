import pytest

from varnavinyas.core import Lexicon, Origin


@pytest.mark.parametrize(
    "origin, nepali, translit, bilingual",
    [
        (Origin.TATSAM, "तत्सम", "tatsam", "तत्सम (tatsam)"),
        (Origin.TADBHAV, "तद्भव", "tadbhav", "तद्भव (tadbhav)"),
        (Origin.DESHAJ, "देशज", "deshaj", "देशज (deshaj)"),
        (Origin.AAGANTUK, "आगन्तुक", "aagantuk", "आगन्तुक (aagantuk)"),
    ],
)
def test_origin_labels_are_bilingual_and_stable(origin, nepali, translit, bilingual):
    assert origin.nepali_label() == nepali
    assert origin.transliterated_label() == translit
    assert origin.bilingual_label() == bilingual


def test_lexicon_from_mapping():
    lex = Lexicon({"विज्ञान": Origin.TATSAM, "टोपी": None})
    assert "विज्ञान" in lex
    assert "टोपी" in lex
    assert "घर" not in lex
    assert lex.origin_of("विज्ञान") is Origin.TATSAM
    assert lex.origin_of("टोपी") is None
    assert lex.origin_of("घर") is None
    assert len(lex) == 2


def test_lexicon_from_word_list():
    lex = Lexicon(["क", "ख"])
    assert sorted(lex) == ["क", "ख"]
    assert lex.origin_of("क") is None


def test_lexicon_source_languages():
    lex = Lexicon({"कागज": Origin.AAGANTUK}, {"कागज": "फारसी", "किताब": "अरबी"})
    assert lex.source_language_of("कागज") == "फारसी"
    assert lex.source_language_of("किताब") == "अरबी"
    assert "किताब" in lex
    assert lex.source_language_of("घर") is None


def test_lexicon_add_and_keep_existing_tag():
    lex = Lexicon()
    assert "शासन" not in lex
    lex.add("शासन", Origin.TATSAM)
    assert lex.origin_of("शासन") is Origin.TATSAM
    lex.add("शासन", source_language="संस्कृत")
    assert lex.origin_of("शासन") is Origin.TATSAM
    assert lex.source_language_of("शासन") == "संस्कृत"
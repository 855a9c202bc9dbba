import pytest

from varnavinyas.core import Lexicon
from varnavinyas.vyakaran import (
    Case,
    Features,
    Number,
    Person,
    RuleBasedAnalyzer,
    Tense,
    transform_negative,
)


@pytest.fixture
def analyzer():
    return RuleBasedAnalyzer(Lexicon(["केटो", "घर"]))


def test_nominal_case_and_plural_detected(analyzer):
    analyses = analyzer.analyze("केटाहरूलाई")
    m = next(a for a in analyses if a.features.case is Case.DATIVE)
    assert m.features.number is Number.PLURAL
    assert m.suffix == "हरूलाई"


def test_oblique_o_to_a_recovers_lemma(analyzer):
    analyses = analyzer.analyze("केटालाई")
    m = next(a for a in analyses if a.features.case is Case.DATIVE)
    assert m.lemma == "केटो"


def test_verbal_infinitive_detected(analyzer):
    analyses = analyzer.analyze("लेखनु")
    assert any(a.suffix == "नु" and a.features.tense is Tense.UNKNOWN for a in analyses)


def test_detects_plural_genitive_stack(analyzer):
    analyses = analyzer.analyze("केटाहरूको")
    nominal = next(a for a in analyses if a.features.case is Case.GENITIVE)
    assert nominal.features.number is Number.PLURAL
    assert nominal.suffix == "हरूको"


def test_detects_progressive_present(analyzer):
    analyses = analyzer.analyze("गर्दैछ")
    assert any(a.features.tense is Tense.PRESENT and a.suffix == "छ" for a in analyses)


def test_detects_na_prefix_in_nonfinite_forms(analyzer):
    analyses = analyzer.analyze("नगर्दा")
    assert any(a.prefix == "न" and a.lemma == "गर्दा" for a in analyses)
    analyses = analyzer.analyze("नखाई")
    assert any(a.prefix == "न" and a.lemma == "खाई" for a in analyses)


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("गर्छ", "गर्दैन"),
        ("गर्छु", "गर्दिन"),
        ("गर्छौ", "गर्दैनौ"),
        ("गर्छन्", "गर्दैनन्"),
        ("गयो", "गएन"),
    ],
)
def test_transform_negative(word, expected):
    assert transform_negative(word) == expected


@pytest.mark.parametrize("word", ["छ", "घर", "यो"])
def test_transform_negative_without_stem_or_ending(word):
    assert transform_negative(word) is None


def test_detects_person_in_present_negative_endings(analyzer):
    first = analyzer.analyze("गर्दिन")
    assert any(
        a.suffix == "दिन" and a.features.tense is Tense.PRESENT and a.features.person is Person.FIRST
        for a in first
    )
    third = analyzer.analyze("गर्दैनन्")
    assert any(
        a.suffix == "दैनन्" and a.features.tense is Tense.PRESENT and a.features.person is Person.THIRD
        for a in third
    )


def test_detects_na_prefix_in_finite_present_forms(analyzer):
    analyses = analyzer.analyze("नगर्छु")
    assert any(
        a.prefix == "न"
        and a.lemma == "गर्छु"
        and a.suffix == "छु"
        and a.features.tense is Tense.PRESENT
        and a.features.person is Person.FIRST
        for a in analyses
    )
    analyses = analyzer.analyze("नजान्छ")
    assert any(
        a.prefix == "न"
        and a.lemma == "जान्छ"
        and a.suffix == "छ"
        and a.features.tense is Tense.PRESENT
        and a.features.person is Person.THIRD
        for a in analyses
    )


def test_detects_finite_future_person_endings(analyzer):
    first = analyzer.analyze("जानेछु")
    assert any(
        a.suffix == "नेछु" and a.features.tense is Tense.FUTURE and a.features.person is Person.FIRST
        for a in first
    )
    third = analyzer.analyze("जानेछन्")
    assert any(
        a.suffix == "नेछन्" and a.features.tense is Tense.FUTURE and a.features.person is Person.THIRD
        for a in third
    )


def test_detects_finite_past_positive_cues(analyzer):
    third = analyzer.analyze("गयो")
    assert any(
        a.suffix == "यो" and a.features.tense is Tense.PAST and a.features.person is Person.THIRD
        for a in third
    )
    second = analyzer.analyze("गयौ")
    assert any(
        a.suffix == "यौ" and a.features.tense is Tense.PAST and a.features.person is Person.SECOND
        for a in second
    )


def test_detects_na_prefix_in_finite_future_forms(analyzer):
    analyses = analyzer.analyze("नजानेछु")
    assert any(
        a.prefix == "न"
        and a.lemma == "जानेछु"
        and a.suffix == "नेछु"
        and a.features.tense is Tense.FUTURE
        and a.features.person is Person.FIRST
        for a in analyses
    )


def test_detects_derivational_suffix_unjel(analyzer):
    analyses = analyzer.analyze("खाउन्जेल")
    assert any(a.suffix == "उन्जेल" for a in analyses)


def test_detects_derivational_suffix_at(analyzer):
    analyses = analyzer.analyze("सुरुआत")
    assert any(a.suffix in ("आत", "अट") for a in analyses)


def test_empty_word_has_no_analyses(analyzer):
    assert analyzer.analyze("") == []


def test_unanalysable_word_falls_back_to_itself(analyzer):
    analyses = analyzer.analyze("घर")
    assert len(analyses) == 1
    assert analyses[0].lemma == "घर"
    assert analyses[0].prefix is None
    assert analyses[0].suffix is None
    assert analyses[0].features == Features()


def test_locative_lemma_from_lexicon(analyzer):
    analyses = analyzer.analyze("घरमा")
    m = next(a for a in analyses if a.features.case is Case.LOCATIVE)
    assert m.lemma == "घर"
    assert m.suffix == "मा"
    assert m.features.number is Number.SINGULAR


def test_present_negative_chhaina(analyzer):
    analyses = analyzer.analyze("गर्छैन")
    assert any(a.suffix == "छैन" and a.features.tense is Tense.PRESENT for a in analyses)


def test_past_negative(analyzer):
    analyses = analyzer.analyze("गएन")
    assert any(a.suffix == "एन" and a.features.tense is Tense.PAST for a in analyses)
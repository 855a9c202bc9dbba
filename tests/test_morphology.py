import pytest

from varnavinyas.core import Lexicon, Origin
from varnavinyas.morphology import decompose


@pytest.fixture
def lexicon():
    return Lexicon(
        {
            "शासन": Origin.TATSAM,
            "लिखित": Origin.TATSAM,
            "लिख": None,
            "सुन्दर": Origin.TATSAM,
            "खा": None,
            "सुरु": None,
            "गो": None,
            "गाई": None,
            "केटा": None,
        }
    )


def test_s5_decompose_prashaasan(lexicon):
    m = decompose("प्रशासन", lexicon)
    assert m.prefixes == ["प्र"]
    assert m.root == "शासन"
    assert m.origin is Origin.TATSAM


def test_s6_decompose_ullikhit(lexicon):
    m = decompose("उल्लिखित", lexicon)
    assert m.prefixes == ["उत्"]
    assert m.root == "लिखित"


def test_decompose_ullikhit_no_over_decompose(lexicon):
    m = decompose("उल्लिखित", lexicon)
    assert m.prefixes == ["उत्"]
    assert m.root == "लिखित"
    assert m.suffixes == []


def test_decompose_empty(lexicon):
    m = decompose("", lexicon)
    assert m.root == ""
    assert m.prefixes == []
    assert m.suffixes == []
    assert m.origin is Origin.DESHAJ


def test_decompose_simple_word(lexicon):
    m = decompose("शासन", lexicon)
    assert m.prefixes == []
    assert m.root == "शासन"


def test_decompose_suffix_ta(lexicon):
    m = decompose("सुन्दरता", lexicon)
    assert m.prefixes == []
    assert m.suffixes == ["ता"]
    assert m.root == "सुन्दर"


def test_decompose_explicit_derivational_unjel(lexicon):
    m = decompose("खाउन्जेल", lexicon)
    assert "उन्जेल" in m.suffixes
    assert m.root == "खा"


def test_decompose_explicit_derivational_at(lexicon):
    m = decompose("सुरुआत", lexicon)
    assert "आत" in m.suffixes or "अट" in m.suffixes
    assert m.root == "सुरु"


def test_short_prefix_needs_long_root(lexicon):
    m = decompose("आगो", lexicon)
    assert m.prefixes == []
    assert m.root == "आगो"
    assert m.origin is Origin.TADBHAV


def test_prefix_requires_root_in_lexicon():
    m = decompose("प्रशासन", Lexicon())
    assert m.prefixes == []
    assert m.root == "प्रशासन"


def test_iterative_strips_stacked_case_markers(lexicon):
    m = decompose("गाईप्रतिको", lexicon, iterative=True)
    assert m.root == "गाई"
    assert m.suffixes == ["प्रति", "को"]


def test_iterative_strips_plural_and_case(lexicon):
    m = decompose("केटाहरूलाई", lexicon, iterative=True)
    assert m.root == "केटा"
    assert m.suffixes == ["हरू", "लाई"]


def test_non_iterative_leaves_case_markers_unless_lexical(lexicon):
    m = decompose("केटाहरूलाई", lexicon)
    assert m.root == "केटाहरूलाई"
    assert m.suffixes == []


def test_iterative_derivational_when_no_markers(lexicon):
    m = decompose("सुन्दरता", lexicon, iterative=True)
    assert m.root == "सुन्दर"
    assert m.suffixes == ["ता"]
# varnavinyas

Rule-based tools for Nepali (Devanagari) orthography:

- **Sandhi** (`varnavinyas.sandhi`) joins two morphemes using vowel, visarga and consonant sandhi rules.
- **Splitting** (`varnavinyas.splitting`) finds the sandhi boundaries of a compound word and checks them against a lexicon.
- **Origin classification** (`varnavinyas.classify`) assigns a word to tatsam, tadbhav, deshaj or aagantuk and reports which source made the decision.
- **Morphology** (`varnavinyas.morphology`) strips prefixes (upasarga) and suffixes (pratyaya) to find a root.
- **Grammar** (`varnavinyas.vyakaran`) gives a rule-based analysis of case, number, tense and person, and forms present and simple past negatives.

The package has no runtime dependencies and needs Python 3.10 or later.

## Install

```
pip install .
```

## Sandhi

```python
from varnavinyas.sandhi import apply, SandhiType, NoRuleAppliesError

result = apply("अति", "अधिक")
result.output         # "अत्यधिक"
result.sandhi_type    # SandhiType.VOWEL
result.rule_citation  # "यण् सन्धि: इ/ई + स्वर → य"

apply("पुनः", "अवलोकन").output  # "पुनरवलोकन"
apply("उत्", "लिखित").output    # "उल्लिखित"
```

`apply` tries visarga sandhi first, then consonant sandhi, then vowel sandhi. You can also call each rule set on its own: `apply_visarga_sandhi`, `apply_consonant_sandhi` and `apply_vowel_sandhi` each return a `SandhiResult`, or `None` when they do not apply.

An empty morpheme raises `EmptyInputError`. If no rule joins the two parts, `apply` raises `NoRuleAppliesError`. Both are subclasses of `SandhiError`, which is a `ValueError`.

## Lexicon

Splitting, classification, decomposition and analysis look words up in a `Lexicon`. You fill it yourself:

```python
from varnavinyas.core import Lexicon, Origin

lex = Lexicon({"अति": Origin.TATSAM, "अधिक": Origin.TATSAM})
lex.add("अत्यधिक", Origin.TATSAM)
lex.add("कम्प्युटर", Origin.AAGANTUK, source_language="अङ्ग्रेजी")

"अति" in lex                          # True
lex.origin_of("अति")                  # Origin.TATSAM
lex.source_language_of("कम्प्युटर")   # "अङ्ग्रेजी"
```

`Lexicon` also takes a plain iterable of words with no origin tags. Each `Origin` has the methods `nepali_label()`, `transliterated_label()` and `bilingual_label()`. For example, `Origin.TATSAM.bilingual_label()` returns `"तत्सम (tatsam)"`.

## Splitting

```python
from varnavinyas.splitting import split, split_aksharas

for left, right, result in split("अत्यधिक", lex):
    print(left, "+", right, "→", result.output)

split_aksharas("प्रगति")  # ["प्र", "ग", "ति"]
```

`split` returns `(left, right, SandhiResult)` triples, sorted and without duplicates. Both parts must be in the lexicon. Words with fewer than three aksharas are never split. A left part of a single akshara is kept only for a few upasargas (such as प्र and वि), and only when both the word and the right part are tagged tatsam.

## Origin classification

```python
from varnavinyas.classify import classify, classify_with_provenance, source_language

classify("विज्ञान", lex)                 # Origin.TATSAM
decision = classify_with_provenance("क़लम", lex)
decision.source, decision.origin        # OriginSource.HEURISTIC, Origin.AAGANTUK
source_language("कम्प्युटर", lex)       # "अङ्ग्रेजी"
```

The lexicon argument is optional. A word is resolved in this order:

1. The built-in override table in `varnavinyas.tables` (confidence 1.0).
2. The lexicon's origin tag (confidence 0.95).
3. Heuristics based on spelling (confidence 0.65).

## Morphology

```python
from varnavinyas.morphology import decompose

m = decompose("प्रशासन", lex)
m.prefixes, m.root, m.suffixes, m.origin
```

By default `decompose` strips at most one prefix and one derivational suffix, and only when what remains is in the lexicon. With `iterative=True` it first strips stacked case markers and a plural marker. In that mode suffixes are listed from innermost to outermost.

## Grammar

```python
from varnavinyas.vyakaran import RuleBasedAnalyzer, transform_negative

analyzer = RuleBasedAnalyzer(lex)
for analysis in analyzer.analyze("केटाहरूको"):
    print(analysis.lemma, analysis.prefix, analysis.suffix, analysis.features)

transform_negative("गर्छ")  # "गर्दैन"
transform_negative("गयो")   # "गएन"
```

`analyze` returns nominal, verbal and derivational readings. If no rule matches, it returns the bare word as the only reading. For an empty word it returns an empty list.

## What it does not do

- The package ships no dictionary. Apart from the small override table used for classification, every lookup uses the `Lexicon` you supply. With an empty lexicon, splitting finds nothing and decomposition strips no prefixes or derivational suffixes.
- There is no command-line tool. The package is a library only.

## Tests

```
pip install .[test]
pytest
```
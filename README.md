# profanityout

A profanity detector and censor for text. It finds offensive words even when
they are disguised with leet speak (`a$$hol3`), separators (`f-u_c%k`),
spacing (`a s s`), repeated letters (`fuuuck`), accents (`fúck`), wildcards
(`sh**t`) or HTML markup (`&lt;ock`). Words can be registered as profane,
suspect or false positive (`badass`, `analytic`), so that harmless words are
not flagged.

It has no dependencies outside the standard library.

## Installation

```
pip install profanityout
```

## Usage

Build a detector from the bundled English word lists and character maps:

```python
from profanityout.detector import ProfanityDetector
from profanityout import wordlists_en as en

detector = (
    ProfanityDetector()
    .with_profane_words(en.DEFAULT_PROFANITIES)
    .with_false_positive_words(en.DEFAULT_FALSE_POSITIVES)
    .with_suspect_words(en.DEFAULT_SUSPECTS)
    .with_leet_speak_characters(en.LEET_SPEAK_CHARACTERS)
    .with_special_characters(en.SPECIAL_CHARACTERS)
    .with_wildcard_characters(en.WILDCARD_CHARACTERS)
    .with_match_whole_word(True)
)

detector.is_profane("x ass")       # True
detector.is_profane("glass")       # False

text, matches = detector.censor("fuck this $h!!t")
# text == "**** this *****"
```

A new `ProfanityDetector` starts with an empty dictionary and no character
tables; the `with_*` methods fill them in and return the detector, so calls
can be chained. Words added later keep the strongest word type given to them
(false positive over profanity over suspect).

### Scanning

- `is_profane(s)` tells whether `s` contains a profane match.
- `scan_profanity(s)` stops at the first profane match and returns the
  matches found so far (suspects and false positives included).
- `scan_all_profanities(s)` returns every match in the text.
- `censor(s)` replaces the characters of every profane match with the censor
  character, leaving spaces intact, and returns the new text together with
  the matches. Text with no match comes back unchanged.

The result is a `Matches` list (from `profanityout.match`) of `Match`
objects. Each match carries the dictionary `word`, its `word_type`
(a `WordType`: `SUSPECT`, `PROFANITY` or `FALSE_POSITIVE`), the `start` and
`end` character positions in the input, the matched `text` as written in the
input, and whether it had whitespace before it (`leading_space`) and after it
(`trailing_space`). `Matches` offers `has_profane_match()`,
`get_profane_matches()`, `get_first_profane_match()` and the suspect and
false-positive equivalents.

### Settings

Every sanitization step can be switched on or off on the detector:

| Method | Default |
|---|---|
| `with_sanitize_special_characters` | on |
| `with_sanitize_leet_speak` | on |
| `with_sanitize_spaces` | on |
| `with_sanitize_repeated_characters` | on |
| `with_sanitize_accents` | on |
| `with_sanitize_wildcard_characters` | off |
| `with_process_input_as_html` | off |
| `with_match_whole_word` | off |

`with_censor_character("#")` changes the censor character, and
`with_confidence_calculator(fn)` installs a function that receives each
candidate `Match` and returns whether to keep it. The default,
`default_confidence_calculator`, keeps every match.

Settings can also be overridden for a single call by passing options from
`profanityout.settings` (`with_sanitize_special_characters`,
`with_sanitize_leet_speak`, `with_sanitize_accents`,
`with_sanitize_repeated_characters`, `with_sanitize_wildcard_characters`,
`with_process_input_as_html`, `with_match_whole_word`,
`with_confidence_calculator`, `with_censor_character`):

```python
from profanityout.settings import with_match_whole_word

detector.is_profane("xass")                                # False
detector.is_profane("xass", with_match_whole_word(False))  # True
```

### Lower-level pieces

- `profanityout.scanner.Scanner` runs one scan with a given
  `DetectorSettings`, word `Tree` and character tables.
- `profanityout.radix_tree.Tree` and `Node` hold the dictionary words.
- `profanityout.html` has `skip_html_tag` and `decode_html_entity_at`, used
  when input is processed as HTML.
- `profanityout.util` has `remove_accents` and `normalize_as_nfc`.

## Limits

This is a library only: it has no command-line tool. The bundled word lists
and character tables are English only; other languages need their own lists
passed to the `with_*` methods.

## Running the tests

```
pip install -e ".[test]"
pytest
```
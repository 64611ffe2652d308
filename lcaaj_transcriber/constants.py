"""Constant values used by lcaaj_transcriber.

* Validation schemas for the annotation, diacritic and consonant class rules.
* Regex fragments for the phonetic symbol classes of the LCAAJ notation.
* Literal substitutions and cleanup pairs applied around the rule passes.
"""

from schema import Schema, Optional, And

# Vowels, with and without a previously attached combining mark
# (breve, tilde, down tack, up tack, minus sign and plus sign below)
VOWELS = "([aeiouəɪʌ])"
VOWELS_FULL = (
    "([aeiouəɪʌ]"
    "[̞̝̠̟̆̃]?)"
)

# Consonant classes, named after the alternation they take part in
# (the full class also takes an attached nasal release, palatal or velar mark)
CONSONANTS = (
    "([ʔbcdfghjklmnprstvwxzʃʒ(tʃ)"
    "ʂ̻ʐ̻(tʂ̻)]"
    "[ⁿʲˠ]?)"
)
HUSHED_CONSONANTS = "([csz])"
NASAL_RELEASE_CONSONANTS = "([bdfgkptv])"
UNVOICING_CONSONANTS = "([bdgjlmnrvwz])"
VOICING_CONSONANTS = "([cfhkpstx])"
VELARIZING_CONSONANTS = "([bdgjlmnrvwfhkptx])"
PALATALIZING_CONSONANTS = (
    "([bdgjlmnrvwfhkptxsczʃʒ(tʃ)"
    "ʂ̻ʐ̻(tʂ̻)])"
)

# Annotation code building blocks
STANDALONE_PREFIX = r"(?:^|[^A-Za-z0-9])"
"""A standalone code starts the string or follows a non-alphanumeric char."""

NOTE_PAYLOAD = r"[A-Za-z0-9\t\n\f\r ]"
"""Characters allowed in a free-text comment following an annotation code."""

WORD_PAYLOAD = r"[A-Za-z0-9]"

NOTE_TERMINATOR = "QP"
"""Closing marker of a free-text comment."""

# Filler characters skipped by the two-level lookback of the vowel rules
LOOKBACK_FILLERS = (",", "9")

# Single character codes with a direct IPA equivalent
BASIC_MAP = {
    "3": "ə",
    "1": "ɪ",
    "6": "ʌ",
    ".": "ː",
}

# Applied after every consonant rule
CONSONANT_POSTPROCESSING = (
    ("95", "ʔ"),
    ("c", "ts"),
)

# Escape-protected separators and their final punctuation
CLEANUP_MAP = (
    ("\\,", ","),
    ("\\:", "."),
)

# Define validation Schemas
annotation_schema = Schema({
    "code": And(str, len),
    "gloss": str,
    Optional("standalone"): bool,
    Optional("payload"): str,
    Optional("terminator"): str,
})

diacritic_schema = Schema({
    "target": And(str, len),
    "marker": And(str, len),
    "template": And(str, lambda s: "{}" in s),
    Optional("lookback"): And(int, lambda n: n >= 1),
})

consonant_class_schema = Schema({
    "target": And(str, len),
    "marker": And(str, len),
    "table": {str: str},
    Optional("template"): And(str, lambda s: "{}" in s),
})

# File name prefixes of the CLI outputs
TRANSCRIPTION_PREFIX = "transcribed"
CODES_FILENAME = "annotation_codes.csv"

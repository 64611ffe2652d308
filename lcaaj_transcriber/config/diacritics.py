#!/usr/bin/env python
# coding=utf-8

"""Diacritic rules for vowels and consonants.

Each rule consists of
    "target", a regex group with the base symbols the rule applies to,
    "marker", a regex for the code following the base symbol,
    "template", the output for the base symbol, where {} is the base,
    "lookback" (optional, default 1), how many characters the rule may look
    back from the marker to find the host of an earlier mark.
    Rules with a lookback of 2 skip one filler character (a comma or a 9).

Consonant class rules have a "table" instead of a template,
mapping each base consonant to the symbol that replaces it.
A base missing from the table falls back to the optional "template".

Note that the rules are applied in the order of the lists below.
"""

from ..constants import (
    VOWELS,
    VOWELS_FULL,
    CONSONANTS,
    HUSHED_CONSONANTS,
    NASAL_RELEASE_CONSONANTS,
    UNVOICING_CONSONANTS,
    VOICING_CONSONANTS,
    VELARIZING_CONSONANTS,
    PALATALIZING_CONSONANTS,
)

HUSHED = {
    "s": "ʃ",
    "z": "ʒ",
    "c": "tʃ",
}

SEMI_HUSHED = {
    "s": "ʂ\N{COMBINING SQUARE BELOW}",
    "c": "tʂ\N{COMBINING SQUARE BELOW}",
    "z": "ʐ\N{COMBINING SQUARE BELOW}",
}


def vowel_rule(marker, template, full=False):
    return {
        "target": VOWELS_FULL if full else VOWELS,
        "marker": marker,
        "template": template,
        "lookback": 2,
    }


VOWEL_RULES = [
    vowel_rule("(94)", "{}\N{COMBINING BREVE}"),
    vowel_rule(r"(\+)", "{}\N{COMBINING TILDE}"),
    vowel_rule("(4)", "{}\N{COMBINING DOWN TACK BELOW}"),
    vowel_rule("(5)", "{}\N{COMBINING UP TACK BELOW}"),
    vowel_rule("(7)", "{}\N{COMBINING MINUS SIGN BELOW}"),
    vowel_rule("(8)", "{}\N{COMBINING PLUS SIGN BELOW}"),
    vowel_rule("(95)", "{}.", full=True),
    vowel_rule("(,)(,)", "\N{MODIFIER LETTER VERTICAL LINE}{}", full=True),
    vowel_rule("(,)", "\N{MODIFIER LETTER LOW VERTICAL LINE}{}", full=True),
]
"""Length, nasalization, tongue position and stress marks on vowels."""

CONSONANT_RULES = [
    {"target": HUSHED_CONSONANTS, "marker": r"(\+)", "table": HUSHED},
    {"target": HUSHED_CONSONANTS, "marker": "(7)", "table": SEMI_HUSHED},
    {
        "target": UNVOICING_CONSONANTS,
        "marker": "(2)",
        "template": "{}\N{COMBINING RING BELOW}",
    },
    {
        "target": VOICING_CONSONANTS,
        "marker": "(2)",
        "template": "{}\N{COMBINING CARON BELOW}",
    },
    {
        "target": VELARIZING_CONSONANTS,
        "marker": "(7)",
        "template": "{}\N{MODIFIER LETTER SMALL GAMMA}",
    },
    {
        "target": PALATALIZING_CONSONANTS,
        "marker": "(8)",
        "template": "{}\N{MODIFIER LETTER SMALL J}",
    },
    {
        "target": NASAL_RELEASE_CONSONANTS,
        "marker": r"(\+)",
        "template": "{}\N{SUPERSCRIPT LATIN SMALL LETTER N}",
    },
    {
        "target": CONSONANTS,
        "marker": "(,)",
        "template": "{}\N{COMBINING VERTICAL LINE BELOW}",
    },
]
"""Hushing, voicing, secondary articulation and syllabicity of consonants."""

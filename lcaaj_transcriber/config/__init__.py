"""Rule tables and default settings of the LCAAJ transcriber."""

from .annotations import ANNOTATIONS
from .diacritics import VOWEL_RULES, CONSONANT_RULES, HUSHED, SEMI_HUSHED

"""Transcribe LCAAJ field notation to IPA with annotation glosses."""

import functools
import logging
from typing import Iterable, Mapping, Tuple

from .config import ANNOTATIONS, VOWEL_RULES, CONSONANT_RULES
from .constants import BASIC_MAP, CLEANUP_MAP
from .rule_parser import construct_rulesets


def replace_literals(text: str, pairs: Iterable[Tuple[str, str]]) -> str:
    """Replace every occurrence of each literal code, in the given order."""
    for old, new in pairs:
        text = text.replace(old, new)
    return text


class Transcriber:
    """Rewrite engine for the LCAAJ notation.

    The rule sets are built once, when the object is created,
    and are not modified by ``transcribe``.
    The object can therefore be shared between threads.

    Parameters
    ----------
    annotations: list
        Annotation rule dicts, see config/annotations.py
    vowel_rules: list
        Vowel diacritic rule dicts, see config/diacritics.py
    consonant_rules: list
        Consonant rule dicts, see config/diacritics.py
    basic_map: dict
        Literal codes with a direct IPA equivalent
    cleanup_map: Iterable[tuple]
        Escaped separators and their final punctuation
    """

    def __init__(
            self,
            annotations=None,
            vowel_rules=None,
            consonant_rules=None,
            basic_map: Mapping[str, str] = None,
            cleanup_map: Iterable[Tuple[str, str]] = None,
    ):
        self.annotations, self.vowels, self.consonants = construct_rulesets(
            ANNOTATIONS if annotations is None else annotations,
            VOWEL_RULES if vowel_rules is None else vowel_rules,
            CONSONANT_RULES if consonant_rules is None else consonant_rules,
        )
        self.basic_map = tuple(
            (BASIC_MAP if basic_map is None else basic_map).items())
        self.cleanup_map = tuple(
            CLEANUP_MAP if cleanup_map is None else cleanup_map)

    def __repr__(self):
        return "{}(annotations={}, vowels={}, consonants={})".format(
            self.__class__.__name__,
            len(self.annotations), len(self.vowels), len(self.consonants))

    def expand_annotations(self, text: str) -> str:
        return self.annotations.apply(text)

    def substitute_literals(self, text: str) -> str:
        """Lowercase the text and replace the single character codes."""
        return replace_literals(text.lower(), self.basic_map)

    def resolve_vowels(self, text: str) -> str:
        return self.vowels.apply(text)

    def resolve_consonants(self, text: str) -> str:
        return self.consonants.apply(text)

    def cleanup(self, text: str) -> str:
        return replace_literals(text, self.cleanup_map)

    def transcribe(self, text: str) -> str:
        """Run the notation through all the rewrite passes in order.

        Every input gives an output: text that matches no rule
        is only lowercased.
        """
        logging.debug("Transcribe %r", text)
        output = self.expand_annotations(text)
        logging.debug("After annotation expansion: %r", output)
        output = self.substitute_literals(output)
        output = self.resolve_vowels(output)
        logging.debug("After vowel diacritics: %r", output)
        output = self.resolve_consonants(output)
        logging.debug("After consonant modifiers: %r", output)
        output = self.cleanup(output)
        logging.debug("Transcription: %r", output)
        return output

    def transcribe_all(self, notations: Iterable[str]) -> list:
        """Transcribe a collection of notation strings."""
        return [self.transcribe(notation) for notation in notations]


@functools.lru_cache(maxsize=None)
def get_transcriber() -> Transcriber:
    """Return the process-wide transcriber with the built-in rule tables."""
    logging.info("Build the LCAAJ rule tables")
    return Transcriber()


def transcribe(text: str) -> str:
    """Transcribe LCAAJ notation with the built-in rule tables."""
    return get_transcriber().transcribe(text)

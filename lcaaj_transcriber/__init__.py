"""Transcribe LCAAJ field notation to IPA, with glosses for annotation codes."""

from .engine import Transcriber, get_transcriber, transcribe
from .rule_objects import (
    CapturedGloss,
    ConsonantClassRule,
    DiacriticRule,
    LiteralGloss,
    RuleSet,
    find_host,
)

__all__ = [
    "Transcriber", "get_transcriber", "transcribe",
    "LiteralGloss", "CapturedGloss", "DiacriticRule", "ConsonantClassRule",
    "RuleSet", "find_host",
]

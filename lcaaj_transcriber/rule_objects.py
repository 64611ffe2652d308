import logging
import re
from typing import Iterable, NamedTuple, Optional, Sequence, Tuple

from .constants import (
    LOOKBACK_FILLERS,
    NOTE_PAYLOAD,
    STANDALONE_PREFIX,
)


class Segment(NamedTuple):
    """The text matched by one rule invocation, and its captured comment."""
    text: str
    payload: Optional[str] = None

    @classmethod
    def from_match(cls, match: re.Match):
        payload = match.groupdict().get("text")
        return cls(match.group(0), payload)


def find_host(segment: str, depth: int = 1,
              fillers: Sequence[str] = LOOKBACK_FILLERS) -> Optional[str]:
    """Find the character an earlier mark was attached to in a matched segment.

    The search starts at the code point before the final marker character.
    With a depth above 1, up to ``depth - 1`` filler characters are skipped
    on the way back.

    Parameters
    ----------
    segment: str
        Matched text, starting with the base symbol and ending with the marker
    depth: int
        Number of levels the lookback may reach. Vowel rules use 2.
    fillers: Sequence[str]
        Characters that are skipped rather than taken as the host

    Returns
    -------
    str or None
        The host character, or None if the lookback ends on the base symbol
        or before the start of the segment.
    """
    chars = list(segment)
    base = chars[0]
    position = len(chars) - 2
    skipped = 0
    while (position >= 0 and skipped < depth - 1
           and chars[position] in fillers):
        position -= 1
        skipped += 1
    if position < 0:
        return None
    host = chars[position]
    return None if host == base else host


class Rule:
    """Replacement rule applied to every match of a regex pattern.

    Subclasses define how a single matched segment is replaced.
    """
    def __init__(self, pattern: str, replacement: str):
        self.pattern = pattern
        self.replacement = replacement
        self.regex = re.compile(pattern)

    def __repr__(self):
        instance_repr = "{}(pattern={!r}, replacement={!r})".format(
            self.__class__.__name__,
            self.pattern,
            self.replacement,
        )
        return instance_repr

    def __eq__(self, other):
        return (type(self) is type(other)
                and self.hash_ == other.hash_)

    @property
    def hash_(self):
        """Identifier to differ between rules in the RuleSet.rules collection."""
        return hash((self.pattern, self.replacement))

    def apply(self, text: str) -> str:
        """Replace every match of the pattern in the text."""
        return self.regex.sub(self.replace, text)

    def replace(self, match: re.Match) -> str:
        raise NotImplementedError


class LiteralGloss(Rule):
    """Annotation code that is replaced by a fixed gloss."""
    def __init__(self, code: str, gloss: str, standalone: bool = False):
        self.code = code
        self.gloss = gloss
        self.standalone = standalone
        prefix = STANDALONE_PREFIX if standalone else ""
        super().__init__(f"{prefix}({re.escape(code)})", gloss)

    @classmethod
    def from_dict(cls, rule_dict: dict):
        """Instantiate from a valid annotation dict.

        Parameters
        ----------
        rule_dict: dict
            Format is {"code": str, "gloss": str, "standalone": bool}
        """
        return cls(
            rule_dict["code"],
            rule_dict["gloss"],
            standalone=rule_dict.get("standalone", False),
        )

    def to_dict(self):
        return {"code": self.code, "gloss": self.gloss}

    def replace(self, match):
        return self.gloss


class CapturedGloss(LiteralGloss):
    """Annotation code followed by a comment that is kept in the gloss.

    The comment is the run of ``payload`` characters after the code,
    up to the ``terminator`` if there is one. An unterminated comment
    runs until the first character outside the payload class.
    """
    def __init__(self, code: str, gloss: str, standalone: bool = False,
                 payload: str = NOTE_PAYLOAD, terminator: str = None):
        self.payload = payload
        self.terminator = terminator
        super().__init__(code, gloss, standalone=standalone)
        if terminator:
            comment = (f"(?P<text>{payload}*?)"
                       f"(?:{re.escape(terminator)}|(?!{payload}))")
        else:
            comment = f"(?P<text>{payload}*)"
        self.pattern = self.pattern + comment
        self.regex = re.compile(self.pattern)

    @classmethod
    def from_dict(cls, rule_dict: dict):
        return cls(
            rule_dict["code"],
            rule_dict["gloss"],
            standalone=rule_dict.get("standalone", False),
            payload=rule_dict.get("payload", NOTE_PAYLOAD),
            terminator=rule_dict.get("terminator"),
        )

    def replace(self, match):
        segment = Segment.from_match(match)
        return self.gloss.format(text=segment.payload or "")


class DiacriticRule(Rule):
    """Base symbol followed by a marker code, rewritten with a template.

    The template is formatted with the base symbol, and a mark that was
    already attached to the base (the host found by ``find_host``)
    is written after it.
    """
    def __init__(self, target: str, marker: str, template: str,
                 lookback: int = 1):
        self.target = target
        self.marker = marker
        self.template = template
        self.lookback = lookback
        super().__init__(target + marker, template)

    @classmethod
    def from_dict(cls, rule_dict: dict):
        """Instantiate from a valid diacritic dict.

        Parameters
        ----------
        rule_dict: dict
            Format is {"target": str, "marker": str, "template": str,
            "lookback": int}
        """
        return cls(**rule_dict)

    def format(self, segment: str) -> str:
        base = segment[0]
        host = find_host(segment, self.lookback)
        if host is not None:
            return self.template.format(base) + host
        return self.template.format(base)

    def replace(self, match):
        return self.format(match.group(0))


class ConsonantClassRule(DiacriticRule):
    """Diacritic rule that swaps the base consonant for another symbol.

    Bases that are missing from the table fall back to the template.
    """
    def __init__(self, target: str, marker: str, table: dict,
                 template: str = "{}", lookback: int = 1):
        super().__init__(target, marker, template, lookback=lookback)
        self.table = dict(table)

    def __repr__(self):
        return "{}(pattern={!r}, table={!r})".format(
            self.__class__.__name__, self.pattern, self.table)

    @property
    def hash_(self):
        return hash((self.pattern, tuple(sorted(self.table.items()))))

    def replace(self, match):
        segment = match.group(0)
        symbol = self.table.get(segment[0])
        if symbol is not None:
            return symbol
        return self.format(segment)


class RuleSet:
    """A named, ordered collection of replacement rules.

    Every rule is applied to the whole text in turn,
    followed by the literal ``postprocessing`` substitutions.
    """
    def __init__(
            self,
            name: str,
            rules: Iterable = None,
            postprocessing: Iterable[Tuple[str, str]] = (),
    ):
        self.name = name
        self._rules: list = []
        self.postprocessing = tuple(postprocessing)
        if rules is not None:
            self.add_multiple_rules(rules)

    def __repr__(self):
        instance_repr = (
            "{}(name={!r}, rules={!r}, postprocessing={!r})"
        ).format(
            self.__class__.__name__,
            self.name, self.rules, self.postprocessing
        )
        return instance_repr

    def __len__(self):
        return len(self._rules)

    def __iter__(self):
        return iter(self._rules)

    @property
    def rules(self):
        """The rules in the order they are applied."""
        return tuple(self._rules)

    def add_rule(self, rule: Rule):
        """Append a rule, unless an identical rule is already in the set."""
        if not isinstance(rule, Rule):
            raise ValueError(f"Invalid rule: {rule!r}")
        if rule in self._rules:
            logging.debug("Skipping: %s already exists in %s", rule, self.name)
            return
        self._rules.append(rule)

    def add_multiple_rules(self, rule_list: Iterable):
        for rule in rule_list:
            try:
                self.add_rule(rule)
            except ValueError as error:
                logging.error("Skipping rule in %s: %s", self.name, error)

    def apply(self, text: str) -> str:
        """Apply the rules in order, each to the output of the previous one."""
        for rule in self._rules:
            text = rule.apply(text)
            for old, new in self.postprocessing:
                text = text.replace(old, new)
        return text

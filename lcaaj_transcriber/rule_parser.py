"""Parse the rule tables into rule objects.

Rule dicts are validated against the schemas in constants.py.
Invalid dicts are logged and skipped.
"""

import logging
from typing import Generator, Iterable

from schema import Schema, SchemaError

from .constants import (
    annotation_schema,
    diacritic_schema,
    consonant_class_schema,
    CONSONANT_POSTPROCESSING,
)
from .rule_objects import (
    CapturedGloss,
    ConsonantClassRule,
    DiacriticRule,
    LiteralGloss,
    RuleSet,
)


def validate_rule(rule_dict: dict, rule_schema: Schema) -> bool:
    """Check a rule dict against a schema, and log the error if it is invalid."""
    try:
        rule_schema.validate(rule_dict)
    except SchemaError as error:
        logging.error("SKIPPING RULE %s BECAUSE OF %s", rule_dict, type(error))
        logging.error("Error message: %s", error)
        return False
    return True


def parse_annotation(rule_dict: dict) -> LiteralGloss:
    """Create the annotation rule variant matching the dict."""
    if "payload" in rule_dict:
        return CapturedGloss.from_dict(rule_dict)
    return LiteralGloss.from_dict(rule_dict)


def parse_annotations(rule_dicts: Iterable) -> Generator:
    """Yield annotation rule objects in the given order.

    Yields
    ------
    LiteralGloss or CapturedGloss
    """
    for rule_dict in rule_dicts:
        if validate_rule(rule_dict, annotation_schema):
            yield parse_annotation(rule_dict)


def parse_diacritic(rule_dict: dict) -> DiacriticRule:
    """Create a consonant class rule if the dict has a table."""
    if "table" in rule_dict:
        return ConsonantClassRule.from_dict(rule_dict)
    return DiacriticRule.from_dict(rule_dict)


def parse_diacritics(rule_dicts: Iterable) -> Generator:
    """Yield diacritic rule objects in the given order.

    Yields
    ------
    DiacriticRule or ConsonantClassRule
    """
    for rule_dict in rule_dicts:
        rule_schema = (consonant_class_schema if "table" in rule_dict
                       else diacritic_schema)
        if validate_rule(rule_dict, rule_schema):
            yield parse_diacritic(rule_dict)


def construct_rulesets(annotations, vowel_rules, consonant_rules) -> tuple:
    """Create the annotation, vowel and consonant rule sets.

    Returns
    -------
    tuple[RuleSet, RuleSet, RuleSet]
    """
    logging.debug("Parse rule tables")
    annotation_set = RuleSet("annotations", parse_annotations(annotations))
    vowel_set = RuleSet("vowels", parse_diacritics(vowel_rules))
    consonant_set = RuleSet(
        "consonants",
        parse_diacritics(consonant_rules),
        postprocessing=CONSONANT_POSTPROCESSING,
    )
    logging.debug(
        "Parsed %s annotation, %s vowel and %s consonant rules",
        len(annotation_set), len(vowel_set), len(consonant_set))
    return annotation_set, vowel_set, consonant_set

#!/usr/bin/env python
# coding=utf-8

"""Annotation codes of the LCAAJ protocols and their English glosses.

Each annotation rule consists of
    "code", the literal code as written in the field notation,
    "gloss", the English text that replaces the code,
    "standalone" (optional), True if the code only counts at the start of
    the string or after a character that is neither a letter nor a digit.
    The preceding character is consumed together with the code,
    "payload" (optional), a regex character class for a comment that
    follows the code. The comment is inserted where the gloss has {text},
    "terminator" (optional), the marker closing the comment.
    Without a terminator the comment is the run of payload characters.

Commas and colons that must survive the phonetic passes are escaped
("\\," and "\\:") and restored by the cleanup pass.

Note that the rules are applied in the order of the ANNOTATIONS list,
and that a code must be listed before any shorter code it begins with.
"""

from ..constants import NOTE_PAYLOAD, NOTE_TERMINATOR, WORD_PAYLOAD


def note(code, gloss, standalone=False):
    """Annotation code followed by a free-text comment closed by QP."""
    rule = {
        "code": code,
        "gloss": gloss,
        "payload": NOTE_PAYLOAD,
        "terminator": NOTE_TERMINATOR,
    }
    if standalone:
        rule["standalone"] = True
    return rule


def mark(code, gloss, standalone=False):
    """Annotation code without a comment."""
    rule = {"code": code, "gloss": gloss}
    if standalone:
        rule["standalone"] = True
    return rule


responses = [
    mark("0", "question not asked"),
    note("+ BUT", " yes but: {text}", standalone=True),
    note("- BUT", " no but: {text}", standalone=True),
    mark("+$", " yes\\, but doubtful", standalone=True),
    mark("-$", " no\\, but doubtful", standalone=True),
    mark("+", " yes", standalone=True),
    mark("-", " no", standalone=True),
    mark("=", " self-corrected", standalone=True),
    mark("#", " self-corrected", standalone=True),
    mark("*", " QFQM", standalone=True),
    mark("$", " query"),
    mark("||", " is different from"),
    {"code": "//", "gloss": "({text})", "payload": WORD_PAYLOAD},
    mark(")+", " prompted and accepted"),
    mark(")-", " prompted and rejected"),
    mark(")=", " prompted and replaces preceding response"),
    mark("(/", " relevant to another question number"),
    mark("($", " relevant to another geographic location"),
    mark("((", " reference to dictionary"),
    mark("(", " relevant to problem number in dialectology"),
]
"""Response marks and references, written with punctuation."""

editorial = [
    mark("CLN", ":"),
    mark("CM", "\\,"),
    mark("DRWG", "drawing in protocol book"),
    mark("EQ", " is identical with (in respect to some significant point)"),
    mark("MISPMP", " misprompted (editor's comment)"),
    mark("MISTD", " misunderstanding\\, informant's response does not "
                  "apply to question (editor's comment)"),
    mark("OVRPMP", " overprompted (editor's comment)"),
    mark("SC", ";"),
    mark("XX", " (sic)"),
]
"""Punctuation words and editor's marks."""

qualifiers = [
    mark("QADJ", "adjective"),
    mark("QAMER", "american yiddish development"),
    mark("QANG", "anglicism"),
    mark("QAP", "applies to"),
    mark("Q-AP", "does not apply to"),
    mark("QBF", "yes, fragment in book"),
    mark("QB", "yes, text in protocol book"),
    mark("QCF", "interviewer's comment: compare"),
    mark("QDG", "disgust"),
    mark("QEDS", "editor's query"),
    mark("QEDN", "editor disagrees"),
    note("QED", "editor's comments follow: {text}"),
    mark("QELSW", "elsewhere"),
    mark("QEM", "emphatic"),
    note("QENG", "explanation in english: {text}"),
    mark("QETC", "etc\\:"),
    mark("QET", "etymology supplied by informant"),
    mark("QFR", "yes, fragment on tape"),
    mark("QF/Y", "response of wife or other female bystander"),
    mark("QGERM", "Informant’s statement that word is not Yiddish but German"),
    note("QGLE", "informant's explanation in English: "),
    mark("QGLY", "informant's explanation in Yiddish: "),
    mark("QGL", "gloss"),
    mark("QHUM", "amusing"),
    mark("QHUNG", "informant's statement that word is not Ydidish but "
                  "Hungarian"),
    mark("QH", "heard but not used"),
    mark("QINF", "infinitive"),
    note("QI GL", "Interviewer's Summary: {text}"),
    note("QI", "interviewer's comments follow: {text}"),
    mark("QK", "known"),
    mark("Q-K", "unknown"),
    mark("QLAT", "not on tape"),
    mark("QLIT", "literary"),
    mark("QMEMX", "informant's surpise at own recollection"),
    mark("QM/Y", "response by husband or other male bystander"),
    mark("QNEX", "did not exist"),
    mark("QNN", "notVeryNew"),
    mark("QNOUN", "noun"),
    mark("QNP", "unprompted answer to prompted question"),
    mark("QNT", "not on tape"),
    mark("QOF", "oldfashioned"),
    mark("QOOF", "Very Oldfashioned"),
    mark("QOTW", "Otherwise"),
    mark("QPOL", "Informant's statement that word is not Yiddish but Polish"),
    mark("QQ", "Check answer on tape"),
    mark("QRR", "very rare"),
    mark("QRUM", "Informant's statement that word is not Yiddish but "
                 "Rumanian"),
    mark("QRUS", "Informant's statement that word is not Yiddish but "
                 "Russian"),
    mark("QRTR", "rather"),
    mark("QR", "rare"),
    mark("QSMT", "notSometimes"),
    mark("QSYN", "synonym"),
    note("QS", "said by: {text}"),
    mark("QTA", "tape audited"),
    mark("QTF", "yes, fragment on tape"),
    mark("QT", "yes, text on tape"),
    mark("Q-T", "text not on tape"),
    mark("QUU", "VeryCommon"),
    mark("QU", "Usual"),
    mark("Q-U", "Unusual"),
    mark("QVB", "Verb"),
    mark("QVL", "Vulgar"),
    mark("QV", "Proverb"),
    note("QW", "used by: {text}"),
    note("Q-W", "not used by: {text}"),
    note("QYID", "Informant's explanation in Yiddish but not necessarily "
                 "verbatim or phoenetically accurate: {text}"),
    mark("QZZ", "interviewer's comment: not elicitable"),
]
"""Q-codes qualifying a response: usage, source, grammar and comments."""

ANNOTATIONS = responses + editorial + qualifiers

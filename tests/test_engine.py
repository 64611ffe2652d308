"""Test suite for the Transcriber and its rewrite passes."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from lcaaj_transcriber import engine
from lcaaj_transcriber.engine import Transcriber

BREVE = "\N{COMBINING BREVE}"
TILDE = "\N{COMBINING TILDE}"
PRIMARY_STRESS = "\N{MODIFIER LETTER VERTICAL LINE}"
SECONDARY_STRESS = "\N{MODIFIER LETTER LOW VERTICAL LINE}"
SQUARE_BELOW = "\N{COMBINING SQUARE BELOW}"


@pytest.mark.parametrize(
    "notation,expected",
    [
        ("a94", "a" + BREVE),
        ("s+", "ʃ"),
        ("d2", "d\N{COMBINING RING BELOW}"),
        ("0", "question not asked"),
        ("a,,", PRIMARY_STRESS + "a"),
        ("+ BUTdog", " yes but: dog"),
    ],
    ids=["short", "hushing", "devoicing", "not_asked", "stress", "yes_but"]
)
def test_transcribe(transcriber, notation, expected):
    # when
    result = transcriber.transcribe(notation)
    # then
    assert result == expected


def test_module_level_transcribe_uses_shared_transcriber():
    assert engine.get_transcriber() is engine.get_transcriber()
    assert engine.transcribe("s+") == "ʃ"


def test_transcribe_is_deterministic(transcriber, sample_notations):
    for notation in sample_notations:
        assert transcriber.transcribe(notation) == transcriber.transcribe(notation)


def test_shared_transcriber_is_safe_across_threads(sample_notations):
    # given
    transcriber = engine.get_transcriber()
    expected = [transcriber.transcribe(notation) for notation in sample_notations]
    # when
    with ThreadPoolExecutor(max_workers=8) as executor:
        results = [
            list(executor.map(transcriber.transcribe, sample_notations))
            for _ in range(20)
        ]
    # then
    assert all(result == expected for result in results)


def test_transcribers_agree(transcriber, sample_notations):
    other = Transcriber()
    assert other.transcribe_all(sample_notations) == transcriber.transcribe_all(
        sample_notations)


@pytest.mark.parametrize(
    "notation,expected",
    [
        ("Hello World", "hello world"),
        ("Sh3n1 6.", "shənɪ ʌː"),
        ("bim bam", "bim bam"),
        ("", ""),
    ]
)
def test_plain_text_is_lowercased_and_substituted(transcriber, notation, expected):
    assert transcriber.transcribe(notation) == expected


class TestAnnotations:

    @pytest.mark.parametrize(
        "notation,expected",
        [
            ("0", "question not asked"),
            ("QK", "known"),
            ("QNN", "notverynew"),
            ("QDG", "disgust"),
            ("QTA", "tape audited"),
        ]
    )
    def test_codes_are_not_read_as_phonetics(self, transcriber, notation, expected):
        assert transcriber.transcribe(notation) == expected

    @pytest.mark.parametrize(
        "longer,shorter,expected_longer,expected_shorter",
        [
            ("+$", "+", " yes, but doubtful", " yes"),
            ("QRR", "QR", "very rare", "rare"),
            ("QTA", "QT", "tape audited", None),
        ]
    )
    def test_longer_code_takes_precedence(
            self, transcriber, longer, shorter, expected_longer, expected_shorter):
        # when
        result_longer = transcriber.transcribe(longer)
        result_shorter = transcriber.transcribe(shorter)
        # then
        assert result_longer == expected_longer
        assert result_longer != result_shorter
        if expected_shorter is not None:
            assert result_shorter == expected_shorter

    @pytest.mark.parametrize(
        "notation,expected",
        [
            ("+ BUTdog", " yes but: dog"),
            ("+ BUTdogQP", " yes but: dog"),
            ("+ BUT", " yes but: "),
            ("- BUTdog", " no but: dog"),
        ],
        ids=["unterminated", "terminated", "empty", "no_but"]
    )
    def test_comment_codes(self, transcriber, notation, expected):
        assert transcriber.transcribe(notation) == expected

    def test_comment_is_dropped_without_placeholder(self, transcriber):
        result = transcriber.transcribe("QGLEfooQP")
        assert result == "informant's explanation in english: "

    def test_bare_comma_in_gloss_is_read_as_syllabic(self, transcriber):
        result = transcriber.transcribe("QBF")
        assert result == "yes\N{COMBINING VERTICAL LINE BELOW} fragment in book"

    def test_comment_keeps_whitespace_run(self, transcriber):
        assert transcriber.transcribe("+ BUT my dog") == " yes but:  my dog"

    def test_standalone_code_consumes_preceding_char(self, transcriber):
        assert transcriber.transcribe("bim +") == "bim yes"

    def test_standalone_code_after_non_ascii_digit(self, transcriber):
        assert transcriber.transcribe("\N{ARABIC-INDIC DIGIT THREE}+") == " yes"

    def test_standalone_code_after_letter_is_phonetic(self, transcriber):
        assert transcriber.transcribe("a+") == "a" + TILDE

    @pytest.mark.parametrize(
        "notation,expected",
        [
            ("aCMb", "a,b"),
            ("aCLNb", "a:b"),
            ("aSCb", "a;b"),
        ]
    )
    def test_punctuation_words(self, transcriber, notation, expected):
        assert transcriber.transcribe(notation) == expected


class TestVowels:

    @pytest.mark.parametrize(
        "notation,expected",
        [
            ("a+", "a\N{COMBINING TILDE}"),
            ("e4", "e\N{COMBINING DOWN TACK BELOW}"),
            ("o5", "o\N{COMBINING UP TACK BELOW}"),
            ("u7", "u\N{COMBINING MINUS SIGN BELOW}"),
            ("i8", "i\N{COMBINING PLUS SIGN BELOW}"),
            ("a95", "a."),
            ("a,", SECONDARY_STRESS + "a"),
            ("3+", "ə" + TILDE),
            ("b1,,n", "b" + PRIMARY_STRESS + "ɪn"),
        ]
    )
    def test_diacritics(self, transcriber, notation, expected):
        assert transcriber.transcribe(notation) == expected

    @pytest.mark.parametrize(
        "notation,expected",
        [
            ("a+,,", PRIMARY_STRESS + "a" + TILDE),
            ("a+,", SECONDARY_STRESS + "a" + TILDE),
            ("a94,", SECONDARY_STRESS + "a" + BREVE),
            ("a+95", "a." + TILDE),
        ],
        ids=["primary_stress", "secondary_stress", "stress_on_short", "length"]
    )
    def test_stacked_marks_keep_the_earlier_mark(self, transcriber, notation, expected):
        assert transcriber.transcribe(notation) == expected


class TestConsonants:

    @pytest.mark.parametrize(
        "notation,expected",
        [
            ("s+", "ʃ"),
            ("z+", "ʒ"),
            ("c+", "tʃ"),
            ("s7", "ʂ" + SQUARE_BELOW),
            ("z7", "ʐ" + SQUARE_BELOW),
            ("c7", "tʂ" + SQUARE_BELOW),
        ]
    )
    def test_hushing_classes(self, transcriber, notation, expected):
        assert transcriber.transcribe(notation) == expected

    @pytest.mark.parametrize(
        "notation,expected",
        [
            ("z2", "z\N{COMBINING RING BELOW}"),
            ("t2", "t\N{COMBINING CARON BELOW}"),
            ("t7", "t\N{MODIFIER LETTER SMALL GAMMA}"),
            ("k8", "k\N{MODIFIER LETTER SMALL J}"),
            ("b+", "b\N{SUPERSCRIPT LATIN SMALL LETTER N}"),
            ("n,", "n\N{COMBINING VERTICAL LINE BELOW}"),
            ("s+8", "ʃ\N{MODIFIER LETTER SMALL J}"),
        ]
    )
    def test_diacritics(self, transcriber, notation, expected):
        assert transcriber.transcribe(notation) == expected

    def test_syllabic_mark_keeps_the_earlier_mark(self, transcriber):
        # when
        result = transcriber.transcribe("d8,")
        # then
        assert result == (
            "d\N{COMBINING VERTICAL LINE BELOW}\N{MODIFIER LETTER SMALL J}")

    def test_glottal_stop(self, transcriber):
        assert transcriber.transcribe("b95") == "bʔ"

    def test_c_is_spelled_out(self, transcriber):
        assert transcriber.transcribe("ac") == "ats"

    def test_c_is_spelled_out_before_later_consonant_rules(self, transcriber):
        """The c -> ts substitution runs after each consonant rule,
        so the voicing rule only sees the s of a spelled out c."""
        assert transcriber.transcribe("c2") == "ts\N{COMBINING CARON BELOW}"

    def test_postprocessing_needs_consonant_rules(self, transcriber):
        # given
        no_rules = Transcriber(consonant_rules=[])
        # when
        result = no_rules.resolve_consonants("ac b95")
        # then
        assert result == "ac b95"
        assert transcriber.resolve_consonants("ac b95") == "ats bʔ"


class TestPasses:

    def test_substitute_literals(self, transcriber):
        assert transcriber.substitute_literals("A3.16") == "aəːɪʌ"

    def test_cleanup(self, transcriber):
        assert transcriber.cleanup("a\\, b\\:") == "a, b."

    def test_custom_tables(self, mark_dict):
        # given
        custom = Transcriber(
            annotations=[mark_dict],
            vowel_rules=[],
            consonant_rules=[],
            basic_map={},
            cleanup_map=[],
        )
        # when
        result = custom.transcribe("QTA 0 c3")
        # then
        assert result == "tape audited 0 c3"

    def test_repr(self, transcriber):
        assert repr(transcriber).startswith("Transcriber(annotations=")

"""Tests for descriptor parsing: modifiers and intervals."""

import pytest

from chord_symbol import parse_chord
from chord_symbol.config import DEFAULT_ALT_INTERVALS
from chord_symbol.dictionaries import modifiers as m
from chord_symbol.errors import InvalidIntervalsError, InvalidModifierError, NoSymbolFoundError
from chord_symbol.parser.descriptor import check_intervals_consistency, get_intervals, get_modifiers, parse_descriptor
from chord_symbol.parser.tokenizer import init_chord, parse_base


def _tokenized(symbol: str):
    return parse_base("english", init_chord(symbol))


class TestGetModifiers:
    def test_modifiers_in_order_of_appearance(self) -> None:
        assert get_modifiers(_tokenized("Cm7(b5)")) == (m.MI, m.SEVENTH, m.FIFTH_FLAT)

    def test_longest_spelling_wins(self) -> None:
        assert get_modifiers(_tokenized("Cmaj7")) == (m.ADD7,)

    def test_spelling_with_several_modifiers(self) -> None:
        assert get_modifiers(_tokenized("C^")) == (m.MA, m.ADD7)

    def test_no_modifier_raises_no_symbol_found(self) -> None:
        with pytest.raises(NoSymbolFoundError):
            get_modifiers(_tokenized("Cxyz"))

    def test_leftover_raises_invalid_modifier(self) -> None:
        with pytest.raises(InvalidModifierError) as excinfo:
            get_modifiers(_tokenized("Cm7x"))
        assert excinfo.value.remaining_chars == "x"

    def test_duplicate_raises_invalid_modifier(self) -> None:
        with pytest.raises(InvalidModifierError) as excinfo:
            get_modifiers(_tokenized("Cm7m"))
        assert excinfo.value.remaining_chars == "m"


class TestGetIntervals:
    @pytest.mark.parametrize(
        ("symbol", "intervals"),
        [
            ("C", ("1", "3", "5")),
            ("Cm", ("1", "b3", "5")),
            ("C7", ("1", "3", "5", "b7")),
            ("Cmaj7", ("1", "3", "5", "7")),
            ("Cm7b5", ("1", "b3", "b5", "b7")),
            ("Cø", ("1", "b3", "b5", "b7")),
            ("Cdim", ("1", "b3", "b5")),
            ("Cdim7", ("1", "b3", "b5", "bb7")),
            ("C+", ("1", "3", "#5")),
            ("Csus", ("1", "4", "5")),
            ("Csus2", ("1", "5", "9")),
            ("C7sus", ("1", "4", "5", "b7")),
            ("C9sus", ("1", "4", "5", "b7", "9")),
            ("C6", ("1", "3", "5", "6")),
            ("C69", ("1", "3", "5", "6", "9")),
            ("Cm6/9", ("1", "b3", "5", "6", "9")),
            ("C9", ("1", "3", "5", "b7", "9")),
            ("Cm9", ("1", "b3", "5", "b7", "9")),
            ("Cmaj9", ("1", "3", "5", "7", "9")),
            ("C11", ("1", "5", "b7", "9", "11")),
            ("Cm11", ("1", "b3", "5", "b7", "9", "11")),
            ("C13", ("1", "3", "5", "b7", "9", "13")),
            ("Cm13", ("1", "b3", "5", "b7", "9", "11", "13")),
            ("C7(b9)", ("1", "3", "5", "b7", "b9")),
            ("C7(#9)", ("1", "3", "5", "b7", "#9")),
            ("C9(#11)", ("1", "3", "5", "b7", "9", "#11")),
            ("C13(b9)", ("1", "3", "5", "b7", "b9", "13")),
            ("Cadd9", ("1", "3", "5", "9")),
            ("Cmadd9", ("1", "b3", "5", "9")),
            ("Cmi(ma7)", ("1", "b3", "5", "7")),
            ("C(omit5)", ("1", "3")),
            ("C5", ("1", "5")),
            ("Cbass", ("1",)),
        ],
    )
    def test_intervals(self, symbol: str, intervals: tuple[str, ...]) -> None:
        assert parse_chord(symbol).normalized.intervals == intervals

    def test_alt_ignores_other_modifiers(self) -> None:
        alt_intervals = {**DEFAULT_ALT_INTERVALS, "fifth_flat": False}
        expected = ("1", "3", "5", "b7", "b9", "#9", "b13")
        assert get_intervals((m.ALT,), alt_intervals) == expected
        assert get_intervals((m.MI, m.SEVENTH, m.NINTH, m.ALT), alt_intervals) == expected


class TestParseDescriptor:
    def test_semitones_are_aligned_with_intervals(self) -> None:
        chord = parse_chord("Cm7b5(b9)")
        assert chord.normalized.intervals == ("1", "b3", "b5", "b7", "b9")
        assert chord.normalized.semitones == (0, 3, 6, 10, 1)

    def test_minor_intent(self) -> None:
        assert parse_chord("Cm").normalized.intents.major is False
        assert parse_chord("Cdim").normalized.intents.major is False
        assert parse_chord("C7").normalized.intents.major is True

    def test_eleventh_intent(self) -> None:
        assert parse_chord("C11").normalized.intents.eleventh is True
        assert parse_chord("C7(#11)").normalized.intents.eleventh is False

    def test_suspension(self) -> None:
        assert parse_chord("C7sus").normalized.is_suspended is True
        assert parse_chord("Csus2").normalized.is_suspended is False
        assert parse_chord("Csusalt").normalized.is_suspended is False

    def test_modifiers_are_recorded(self) -> None:
        assert parse_chord("Cm7").input.modifiers == (m.MI, m.SEVENTH)

    def test_empty_descriptor(self) -> None:
        chord = parse_descriptor(DEFAULT_ALT_INTERVALS, _tokenized("C"))
        assert chord.input.modifiers == ()
        assert chord.normalized.intervals == ("1", "3", "5")


class TestIntervalsConsistency:
    @pytest.mark.parametrize(
        ("intervals", "combo"),
        [
            (("1", "b3", "3", "5"), ("b3", "3")),
            (("1", "4", "5", "b7", "9", "11"), ("4", "11")),
            (("1", "3", "5", "b7", "7"), ("b7", "7")),
            (("1", "3", "5", "b9", "9"), ("b9", "9")),
            (("1", "3", "5", "9", "#9"), ("#9", "9")),
            (("1", "3", "5", "11", "#11"), ("11", "#11")),
            (("1", "3", "5", "b13", "13"), ("b13", "13")),
        ],
    )
    def test_forbidden_combos(self, intervals: tuple[str, ...], combo: tuple[str, str]) -> None:
        with pytest.raises(InvalidIntervalsError) as excinfo:
            check_intervals_consistency(_tokenized("C"), intervals)
        assert excinfo.value.forbidden_combo == combo

    def test_consistent_intervals(self) -> None:
        check_intervals_consistency(_tokenized("C"), ("1", "b3", "b5", "b7", "b9", "#9", "#11", "b13"))

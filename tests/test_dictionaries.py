import pytest

from chord_symbol.dictionaries.intervals import INTERVAL_TO_SEMITONES, INTERVALS, get_semitones, sort_intervals
from chord_symbol.dictionaries.notes import (
    ALL_VARIANTS,
    NOTATION_SYSTEMS,
    NOTE_SPELLINGS,
    NOTE_TO_SEMITONE,
    VARIANTS_TO_NOTES,
    spell_note,
)
from chord_symbol.helpers import chain, has_all, has_exactly, has_none_of, has_one_of


class TestNotes:
    def test_every_system_spells_every_note(self) -> None:
        for system in NOTATION_SYSTEMS:
            assert set(NOTE_SPELLINGS[system]) == set(NOTE_TO_SEMITONE)

    @pytest.mark.parametrize(
        ("note", "notation_system", "expected"),
        [
            ("C", "english", "C"),
            ("Bb", "german", "Hes"),
            ("B", "german", "H"),
            ("F#", "german", "Fis"),
            ("A", "latin", "La"),
            ("Db", "latin", "Reb"),
        ],
    )
    def test_spell_note(self, note: str, notation_system: str, expected: str) -> None:
        assert spell_note(note, notation_system) == expected

    def test_spell_note_unknown_system(self) -> None:
        with pytest.raises(ValueError, match="Unknown notation system"):
            spell_note("C", "japanese")

    def test_spell_note_unknown_note(self) -> None:
        with pytest.raises(ValueError, match="Unknown note"):
            spell_note("H", "english")

    def test_variants(self) -> None:
        assert VARIANTS_TO_NOTES["english"]["B♭"] == "Bb"
        assert VARIANTS_TO_NOTES["german"]["B"] == "Bb"
        assert VARIANTS_TO_NOTES["latin"]["Ré"] == "D"

    def test_all_variants_are_unique(self) -> None:
        assert len(ALL_VARIANTS) == len(set(ALL_VARIANTS))
        assert "Sol#" in ALL_VARIANTS


class TestIntervals:
    def test_every_interval_has_semitones(self) -> None:
        assert set(INTERVALS) == set(INTERVAL_TO_SEMITONES)

    def test_sort_intervals(self) -> None:
        assert sort_intervals({"13", "b7", "1", "3", "5"}) == ("1", "3", "5", "b7", "13")
        assert sort_intervals(["5", "1", "1"]) == ("1", "5")

    def test_get_semitones(self) -> None:
        assert get_semitones(("1", "b3", "5", "bb7")) == (0, 3, 7, 9)
        assert get_semitones(()) == ()


class TestHelpers:
    def test_chain(self) -> None:
        assert chain([str.strip, str.upper], " c ") == "C"

    def test_chain_without_filters(self) -> None:
        assert chain([], "C") == "C"

    def test_chain_stops_on_falsy_value(self) -> None:
        calls = []

        def record(value: str) -> str:
            calls.append(value)
            return value

        assert chain([str.strip, record], "   ") is None
        assert calls == []

    def test_interval_checks(self) -> None:
        intervals = ("1", "3", "5", "b7")
        assert has_all(intervals, ["3", "b7"])
        assert not has_all(intervals, ["3", "7"])
        assert has_one_of(intervals, ["7", "b7"])
        assert has_none_of(intervals, ["b3", "7"])
        assert has_exactly(intervals, ["b7", "5", "3", "1"])
        assert not has_exactly(intervals, ["1", "3", "5"])

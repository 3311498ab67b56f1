"""Tests for the chord renderer factory."""

import copy
from dataclasses import replace

import pytest

from chord_symbol import Chord, RendererConfiguration, chord_parser_factory, chord_renderer_factory, render_chord
from chord_symbol.pitch_class import chord_to_pitch_classes

parse = chord_parser_factory()


class TestFactory:
    def test_returns_a_function(self) -> None:
        assert callable(chord_renderer_factory())

    def test_render_chord_shortcut(self) -> None:
        assert render_chord(parse("Cm7")) == "Cmi7"

    def test_configuration_object(self) -> None:
        render = chord_renderer_factory(RendererConfiguration(notation_system="latin"))
        assert render(parse("Cm7")) == "Domi7"


class TestImmutability:
    def test_input_chord_is_not_modified(self) -> None:
        render = chord_renderer_factory(transpose_value=5, use_short_namings=True, simplify="core")
        parsed = parse("Ch(#11,b13)")
        parsed_copy = copy.deepcopy(parsed)

        render(parsed)

        assert parsed == parsed_copy


class TestNoFilter:
    @pytest.mark.parametrize(
        ("symbol", "expected"),
        [
            ("Cm7", "Cmi7"),
            ("C7sus", "C7sus"),
            ("C#m11/G", "C#mi11/G"),
            ("Ch(#11,b13)", "Cmi7(b5,add #11,b13)"),
            ("C6/9", "C69"),
            ("C bass", "C bass"),
        ],
    )
    def test_rendered(self, symbol: str, expected: str) -> None:
        assert chord_renderer_factory()(parse(symbol)) == expected


class TestAllFilters:
    def test_rendered(self) -> None:
        render = chord_renderer_factory(
            use_short_namings=True,
            transpose_value=7,
            harmonize_accidentals=True,
            use_flats=True,
            simplify="max",
            notation_system="latin",
        )
        assert render(parse("C#m11/G")) == "Labm"


class TestShortNamings:
    @pytest.mark.parametrize(
        ("symbol", "expected"),
        [
            ("Cm7", "Cm7"),
            ("C(add9)", "C2"),
            ("Cdim", "C°"),
            ("Cma7", "CM7"),
            ("Cmi", "Cm"),
            ("Cmi7(omit3)", "Cm7(no3)"),
            ("Cdim7(add ma7)", "C°7(addM7)"),
            ("Cmi(ma7)", "Cm(M7)"),
            ("C7alt", "C7alt"),
        ],
    )
    def test_rendered(self, symbol: str, expected: str) -> None:
        assert chord_renderer_factory(use_short_namings=True)(parse(symbol)) == expected


class TestTranspose:
    @pytest.mark.parametrize(
        ("symbol", "transpose_value", "use_flats", "harmonize", "expected"),
        [
            ("C/E", 3, False, False, "D#/G"),
            ("C/E", 3, True, False, "Eb/G"),
            ("C/E", -4, False, False, "G#/C"),
            ("C/E", -4, True, False, "Ab/C"),
            ("G#", 0, False, False, "G#"),
            ("G#", 0, True, False, "G#"),
            ("G#", 0, True, True, "Ab"),
            ("G#", 0, False, True, "G#"),
            ("Ab", 0, False, False, "Ab"),
            ("Ab", 0, True, False, "Ab"),
            ("Ab", 0, True, True, "Ab"),
            ("Ab", 0, False, True, "G#"),
            ("Bb7", 2, False, False, "C7"),
            ("Bb7", 3, False, False, "Db7"),
            ("F#m", 1, True, False, "Gmi"),
            ("F#m", 4, True, False, "A#mi"),
            ("C", 12, False, False, "C"),
            ("C", -13, False, False, "B"),
        ],
    )
    def test_transposed(
        self, symbol: str, transpose_value: int, use_flats: bool, harmonize: bool, expected: str
    ) -> None:
        render = chord_renderer_factory(
            transpose_value=transpose_value,
            use_flats=use_flats,
            harmonize_accidentals=harmonize,
        )
        assert render(parse(symbol)) == expected

    def test_transposed_notes_are_spelled_again(self) -> None:
        render = chord_renderer_factory(transpose_value=2, printer="raw")
        assert render(parse("C7")).normalized.notes == ("D", "F#", "A", "C")

    @pytest.mark.parametrize("symbol", ["C#m11/G", "Bb7(b9)", "Ebmaj7", "F#dim7", "Ch(#11,b13)"])
    @pytest.mark.parametrize("transpose_value", [-7, -1, 1, 5, 11])
    def test_transpose_back_and_forth(self, symbol: str, transpose_value: int) -> None:
        up = chord_renderer_factory(transpose_value=transpose_value)
        down = chord_renderer_factory(transpose_value=-transpose_value)
        original = parse(symbol)

        round_trip = parse(down(parse(up(original))))

        assert chord_to_pitch_classes(round_trip) == chord_to_pitch_classes(original)


class TestNotationSystem:
    @pytest.mark.parametrize(
        ("notation_system", "symbol", "expected"),
        [
            ("english", "C", "C"),
            ("english", "H", "B"),
            ("english", "La", "A"),
            ("german", "B", "H"),
            ("german", "Bb", "Hes"),
            ("latin", "A", "La"),
            ("auto", "H", "H"),
            ("auto", "La", "La"),
            ("auto", "Es7", "Es7"),
        ],
    )
    def test_converted(self, notation_system: str, symbol: str, expected: str) -> None:
        render = chord_renderer_factory(notation_system=notation_system)
        assert render(parse(symbol)) == expected

    def test_default_is_english(self) -> None:
        assert chord_renderer_factory()(parse("Solm7/Re")) == "Gmi7/D"

    @pytest.mark.parametrize(
        ("notation_system", "use_flats", "expected"),
        [
            ("english", False, "A#/C#"),
            ("german", False, "Ais/Cis"),
            ("latin", False, "La#/Do#"),
            ("auto", False, "La#/Do#"),
            ("english", True, "Bb/Db"),
            ("german", True, "Hes/Des"),
            ("latin", True, "Sib/Reb"),
            ("auto", True, "Sib/Reb"),
        ],
    )
    def test_harmonized_accidentals(self, notation_system: str, use_flats: bool, expected: str) -> None:
        render = chord_renderer_factory(
            notation_system=notation_system,
            harmonize_accidentals=True,
            use_flats=use_flats,
        )
        assert render(parse("La#/Reb")) == expected

    def test_invalid_notation_system(self) -> None:
        render = chord_renderer_factory(notation_system="japanese")
        assert render(parse("C")) is None


class TestInvalidOptions:
    @pytest.mark.parametrize(("symbol", "expected"), [("Cm7", "Cmi7"), ("C7sus", "C7sus")])
    def test_invalid_simplify_value(self, symbol: str, expected: str) -> None:
        render = chord_renderer_factory(simplify=False)
        assert render(parse(symbol)) == expected

    def test_unknown_printer_defaults_to_text(self) -> None:
        assert chord_renderer_factory(printer="idontexist")(parse("C")) == "C"


class TestInvalidChord:
    @pytest.mark.parametrize(
        "chord",
        [None, "myChord", 0, {"test": "test"}, parse("Amis")],
        ids=["none", "string", "number", "dict", "invalid_chord"],
    )
    def test_returns_none(self, chord) -> None:
        assert chord_renderer_factory(printer="raw")(chord) is None

    def test_incomplete_chord(self) -> None:
        chord = Chord(input=parse("C").input)
        assert chord_renderer_factory()(chord) is None


def _lower_root(chord):
    return replace(chord, formatted=replace(chord.formatted, root_note=chord.formatted.root_note.lower()))


def _add_changes(chord):
    changes = (*chord.formatted.chord_changes, "custom")
    return replace(chord, formatted=replace(chord.formatted, chord_changes=changes))


def _short_minor(chord):
    return replace(chord, formatted=replace(chord.formatted, descriptor=chord.formatted.descriptor.replace("mi", "m")))


class TestCustomFilters:
    def test_filters_are_applied(self) -> None:
        render = chord_renderer_factory(custom_filters=[_lower_root, _add_changes])
        assert render(parse("Cm7")) == "cmi7(custom)"

    def test_filters_run_after_built_in_filters(self) -> None:
        render = chord_renderer_factory(custom_filters=[_lower_root], notation_system="latin", transpose_value=2)
        assert render(parse("Cm7")) == "remi7"

    def test_filters_apply_on_raw_chord(self) -> None:
        raw = chord_renderer_factory(printer="raw")(parse("Cm7"))
        filtered = chord_renderer_factory(custom_filters=[_short_minor], printer="raw")(parse("Cm7"))
        assert filtered.formatted.descriptor == "m7"
        assert filtered.input.symbol == "Cm7"
        assert filtered.normalized == raw.normalized

    def test_raw_printer_rejects_symbols_it_cannot_parse(self) -> None:
        render = chord_renderer_factory(custom_filters=[_add_changes], printer="raw")
        assert render(parse("Cm7")) is None

    def test_filter_returning_none(self) -> None:
        render = chord_renderer_factory(custom_filters=[_lower_root, lambda chord: None])
        assert render(parse("Cm7")) is None

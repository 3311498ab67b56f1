import sys

from chord_symbol import chord_parser_factory, chord_renderer_factory, to_harte

parse = chord_parser_factory(notation_systems=("english", "latin"))
render = chord_renderer_factory(transpose_value=-2, use_flats=True, notation_system="latin")

for symbol in ["Cmaj7", "Am7/G", "Dm9", "G7(b9)", "Loop"]:
    chord = parse(symbol)
    if not chord.is_valid:
        sys.stdout.write(f"{symbol}: {chord.error[0]}\n")
        continue

    # "Cmaj7 -> Sibma7 (C:maj7)"
    sys.stdout.write(f"{symbol} -> {render(chord)} ({to_harte(chord)})\n")

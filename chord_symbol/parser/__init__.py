"""Parsing pipeline: chord symbol -> normalized chord."""

from chord_symbol.parser.parse import chord_parser_factory, parse_chord

__all__ = ["chord_parser_factory", "parse_chord"]

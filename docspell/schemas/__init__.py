"""
Pydantic schemas for trees, options and diagnostics.
"""
from docspell.schemas.diagnostic import Diagnostic, SourceFile
from docspell.schemas.nlcst import Node, Point, Position
from docspell.schemas.options import SpellOptions
from docspell.schemas.spellcheck import DictionaryData, SpellingIssue

__all__ = [
    "Diagnostic",
    "DictionaryData",
    "Node",
    "Point",
    "Position",
    "SourceFile",
    "SpellOptions",
    "SpellingIssue",
]

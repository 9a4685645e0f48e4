"""
Pydantic schemas for natural-language concrete syntax trees.

Mirrors the JSON form produced by upstream parsers, so a parsed document can be
loaded with ``Node.model_validate(data)``.
"""
from typing import List, Optional

from pydantic import BaseModel, Field

ROOT_NODE = "RootNode"
PARAGRAPH_NODE = "ParagraphNode"
SENTENCE_NODE = "SentenceNode"
WORD_NODE = "WordNode"
TEXT_NODE = "TextNode"
PUNCTUATION_NODE = "PunctuationNode"
SYMBOL_NODE = "SymbolNode"
WHITESPACE_NODE = "WhiteSpaceNode"
SOURCE_NODE = "SourceNode"


class Point(BaseModel):
    """A place in a source document."""

    line: int = Field(ge=1, description="1-indexed line")
    column: int = Field(ge=1, description="1-indexed column")
    offset: Optional[int] = Field(default=None, ge=0, description="0-indexed character offset")


class Position(BaseModel):
    """Span of a node in the source document."""

    start: Point
    end: Point


class Node(BaseModel):
    """
    A node in the tree.

    Literal nodes (text, punctuation, symbols, whitespace) carry ``value``;
    parent nodes (root, paragraph, sentence, word) carry ``children``.
    """

    type: str
    value: Optional[str] = None
    children: List["Node"] = Field(default_factory=list)
    position: Optional[Position] = None


Node.model_rebuild()

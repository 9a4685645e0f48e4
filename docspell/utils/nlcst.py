"""
Helpers for natural-language syntax trees: stringify, traverse, and detect
literal (quoted or set-off) words.
"""
from typing import Callable, Dict, List, Optional, Sequence

from docspell.schemas.nlcst import SOURCE_NODE, WHITESPACE_NODE, WORD_NODE, Node

Visitor = Callable[[Node, Optional[int], Optional[Node]], None]

# Delimiters that set off a word at the start or end of its parent
SINGLE_DELIMITERS = ("-", "–", "—", ":", ";")

# Opening delimiter -> closing delimiters that wrap a literal word
PAIRED_DELIMITERS: Dict[str, Sequence[str]] = {
    ",": (",",),
    "-": ("-",),
    "–": ("–",),
    "—": ("—",),
    '"': ('"',),
    "'": ("'",),
    "‘": ("’",),
    "‚": ("’",),
    "’": ("’", "‚"),
    "“": ("”",),
    "”": ("”",),
    "„": ("”", "“"),
    "«": ("»",),
    "»": ("«",),
    "‹": ("›",),
    "›": ("‹",),
    "(": (")",),
    "[": ("]",),
    "{": ("}",),
    "⟨": ("⟩",),
    "「": ("」",),
}


def to_string(node: Node) -> str:
    """Text content of a node."""
    if node.value is not None:
        return node.value
    return "".join(to_string(child) for child in node.children)


def visit(tree: Node, node_type: str, visitor: Visitor) -> None:
    """
    Call ``visitor(node, index, parent)`` for every node of a type.

    Traversal is depth-first in document order. The root is reported with
    ``None`` for both index and parent.
    """
    if tree.type == node_type:
        visitor(tree, None, None)
    _visit_children(tree, node_type, visitor)


def _visit_children(parent: Node, node_type: str, visitor: Visitor) -> None:
    for index, child in enumerate(parent.children):
        if child.type == node_type:
            visitor(child, index, parent)
        _visit_children(child, node_type, visitor)


def is_literal(parent: Node, index: int) -> bool:
    """
    Check whether the word at ``parent.children[index]`` is used literally.

    A word is literal when it is wrapped in matching delimiters (quotes,
    brackets and the like), or when it opens or closes its parent and is set
    off by a dash, colon or semicolon, e.g. ``foo - is a word``.

    Args:
        parent: Parent node of the word
        index: Position of the word in the parent

    Returns:
        True if the word is literal
    """
    children = parent.children

    if not 0 <= index < len(children):
        raise IndexError(f"Index {index} is out of range for parent with {len(children)} children")

    return bool(
        (not _contains_word(children, 0, index) and _sibling_delimiter(children, index, 1, SINGLE_DELIMITERS))
        or (
            not _contains_word(children, index + 1, len(children))
            and _sibling_delimiter(children, index, -1, SINGLE_DELIMITERS)
        )
        or _is_wrapped(children, index)
    )


def _is_wrapped(children: List[Node], index: int) -> bool:
    previous = _sibling_delimiter(children, index, -1, tuple(PAIRED_DELIMITERS))
    if previous is None:
        return False
    closing = PAIRED_DELIMITERS[to_string(previous)]
    return _sibling_delimiter(children, index, 1, closing) is not None


def _sibling_delimiter(
    children: List[Node], index: int, step: int, delimiters: Sequence[str]
) -> Optional[Node]:
    """First non-whitespace sibling in a direction, if it is one of the delimiters."""
    position = index + step

    while 0 <= position < len(children):
        sibling = children[position]

        if sibling.type in (WORD_NODE, SOURCE_NODE):
            return None

        if sibling.type != WHITESPACE_NODE:
            return sibling if to_string(sibling) in delimiters else None

        position += step

    return None


def _contains_word(children: List[Node], start: int, end: int) -> bool:
    return any(child.type == WORD_NODE for child in children[start:end])

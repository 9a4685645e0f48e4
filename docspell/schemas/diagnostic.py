"""
Diagnostics and the source file they are reported on.
"""
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from docspell.schemas.nlcst import Position
from docspell.schemas.spellcheck import SpellingIssue

OVERFLOW_RULE_ID = "overflow"


class Diagnostic(BaseModel):
    """A message attached to a place in a source file."""

    reason: str = Field(description="Human-readable message")
    line: Optional[int] = Field(default=None, description="Start line of the place")
    column: Optional[int] = Field(default=None, description="Start column of the place")
    place: Optional[Position] = Field(default=None, description="Span the message applies to")
    rule_id: Optional[str] = Field(default=None, description="Machine-readable rule identifier")
    source: Optional[str] = Field(default=None, description="Producer of the message")
    fatal: bool = False
    actual: Optional[str] = Field(default=None, description="Flagged value")
    expected: List[str] = Field(default_factory=list, description="Suggested replacements")
    url: Optional[str] = Field(default=None, description="Documentation link")

    @property
    def name(self) -> str:
        """Stringified place, ``line:column-line:column``."""
        if self.place is None:
            return "1:1"
        start = self.place.start
        end = self.place.end
        return f"{start.line}:{start.column}-{end.line}:{end.column}"

    def __str__(self) -> str:
        return f"{self.name}: {self.reason}"


class SourceFile(BaseModel):
    """
    A document being checked.

    Collects diagnostics in the order they are reported.
    """

    path: Optional[str] = None
    messages: List[Diagnostic] = Field(default_factory=list)

    def message(
        self,
        reason: str,
        place: Optional[Position] = None,
        rule_id: Optional[str] = None,
        source: Optional[str] = None,
        actual: Optional[str] = None,
        expected: Optional[List[str]] = None,
        url: Optional[str] = None,
    ) -> Diagnostic:
        """
        Create a diagnostic, append it to this file and return it.

        Args:
            reason: Human-readable message
            place: Span the message applies to
            rule_id: Rule identifier
            source: Producer of the message
            actual: Flagged value
            expected: Suggested replacements
            url: Documentation link

        Returns:
            The appended Diagnostic
        """
        diagnostic = Diagnostic(
            reason=reason,
            line=place.start.line if place else None,
            column=place.start.column if place else None,
            place=place,
            rule_id=rule_id,
            source=source,
            actual=actual,
            expected=list(expected) if expected is not None else [],
            url=url,
        )
        self.messages.append(diagnostic)
        return diagnostic

    def spelling_issues(self) -> List[SpellingIssue]:
        """Misspelt words reported on this file, deduplicated by word."""
        issues: Dict[str, List[str]] = {}

        for diagnostic in self.messages:
            if diagnostic.rule_id == OVERFLOW_RULE_ID or diagnostic.actual is None:
                continue
            if diagnostic.actual not in issues:
                issues[diagnostic.actual] = list(diagnostic.expected)

        return [
            SpellingIssue(word=word, suggestions=suggestions)
            for word, suggestions in issues.items()
        ]

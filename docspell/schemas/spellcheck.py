"""
Pydantic schemas for spell-check functionality.
"""
from typing import List, Optional, Union

from pydantic import BaseModel, Field


class SpellingIssue(BaseModel):
    """A spelling issue with suggested corrections."""

    word: str = Field(description="Misspelled word, as flagged")
    suggestions: List[str] = Field(description="Suggested corrections ordered by relevance")


class DictionaryData(BaseModel):
    """
    Raw dictionary payload handed over by a dictionary loader.

    ``dic`` is a word list: one ``word``, ``word count`` or Hunspell-style
    ``word/FLAGS`` entry per line. ``aff`` is accepted so Hunspell dictionary
    packages can be passed through unchanged; affix rules are not expanded.
    """

    dic: Union[str, bytes] = Field(description="Word list")
    aff: Optional[Union[str, bytes]] = Field(default=None, description="Affix rules (unused)")
    language: Optional[str] = Field(default=None, description="Language code, e.g. 'en-GB'")

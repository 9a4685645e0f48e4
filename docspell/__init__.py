"""
Spell-checking pass over natural-language syntax trees.
"""
from docspell.services.spellcheck import SpellSession, create_spellcheck_session

__version__ = "1.0.0"

__all__ = ["SpellSession", "create_spellcheck_session", "__version__"]

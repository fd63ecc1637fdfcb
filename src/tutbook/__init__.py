"""
TutBook - roster management for tuition centres

TutBook interprets line-oriented commands such as
``add_child /p John Tan /c Emily Tan`` using a prefix-tagged argument tokenizer.
"""

from importlib.metadata import version

from tutbook.logic import LogicManager
from tutbook.parsing import ArgumentMap, Prefix, tokenize

__version__ = version("tutbook")

__all__ = [
    "__version__",
    "ArgumentMap",
    "LogicManager",
    "Prefix",
    "tokenize",
]

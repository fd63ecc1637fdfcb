"""
Prefixes recognized by TutBook commands.
"""

from tutbook.parsing.prefix import Prefix

PREFIX_PARENT = Prefix("/p")
PREFIX_CHILD = Prefix("/c")

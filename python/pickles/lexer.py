"""Syntax highlighting lexer for the pickles prompt."""
from pygments.lexer import RegexLexer, bygroups
from pygments.token import Keyword, Name, Number, Punctuation, String, Text

from .completer import COMMAND_DESCRIPTIONS

COMMANDS = tuple(COMMAND_DESCRIPTIONS)


class PicklesLexer(RegexLexer):
    name = "Pickles"
    aliases = ["pickles"]

    tokens = {
        "root": [
            # :command
            (r"^(:)(" + "|".join(COMMANDS) + r")(?![\w-])", bygroups(Punctuation, Keyword)),
            # Quoted strings
            (r'"[^"]*"', String),
            (r"'[^']*'", String),
            # Hex colours
            (r"#(?:[A-Fa-f0-9]{3}){1,2}\b", String.Other),
            (r"-?\d+(\.\d+)?", Number),
            # Path separators
            (r"\.", Punctuation),
            (r"[\w-]+", Name.Attribute),
            (r"\s+", Text),
            (r".", Text),
        ]
    }

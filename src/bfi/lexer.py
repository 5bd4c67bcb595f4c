from __future__ import annotations

from dataclasses import dataclass
from typing import List

INSTRUCTION_CHARS = '<>+-.,[]'


@dataclass(frozen=True)
class Token:
    op: str
    index: int  # position in the filtered stream
    line: int
    column: int


def is_code_char(ch: str) -> bool:
    return ch in INSTRUCTION_CHARS


def filter_source(text: str) -> str:
    """Drop every character that is not one of the eight instructions."""
    return ''.join(c for c in text if is_code_char(c))


def scan(text: str) -> List[Token]:
    """
    Filter source text, remembering where each instruction came from.

    Lines and columns are 1-based and count raw characters, so they can be
    used to point back into the original text in diagnostics.
    """
    tokens: List[Token] = []
    line = 1
    column = 0
    for ch in text:
        if ch == '\n':
            line += 1
            column = 0
            continue
        column += 1
        if is_code_char(ch):
            tokens.append(Token(op=ch, index=len(tokens), line=line, column=column))
    return tokens

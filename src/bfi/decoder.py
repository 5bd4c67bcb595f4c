from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Union

from .errors import make_unmatched_close_error, make_unmatched_open_error
from .instructions import Instruction, Program
from .lexer import Token, scan

logger = logging.getLogger(__name__)


def decode(tokens: Union[str, Sequence[Token]], *, source: Optional[str] = None) -> Program:
    """
    Turn filtered instructions into a Program.

    Brackets get two labels. ``loop_id`` is the nesting depth: an opening
    bracket takes the depth before it is entered and a closing bracket the
    depth after it is left, so a pair shares it. ``partner`` is the index of
    the matching bracket, found with a stack of open positions; that is what
    execution jumps by, since sibling loops can share a depth.

    Args:
        tokens: Filtered characters, or tokens from ``scan``
        source: Raw text the tokens came from, used for error context

    Returns:
        Program with its jump table

    Raises:
        UnmatchedCloseError: A "]" with nothing open, reported at its position
        UnmatchedOpenError: Brackets still open at end of input
    """
    depth = 0
    open_stack: List[int] = []
    pending: List[dict] = []
    jumps: Dict[int, int] = {}

    for pos, tok in enumerate(tokens):
        if isinstance(tok, Token):
            ch, line, column = tok.op, tok.line, tok.column
        else:
            ch, line, column = tok, None, None

        if ch == '[':
            loop_id = depth
            depth += 1
            open_stack.append(pos)
        elif ch == ']':
            if depth == 0:
                raise make_unmatched_close_error(position=pos, source=source, line=line, column=column)
            depth -= 1
            loop_id = depth
            start = open_stack.pop()
            jumps[start] = pos
            jumps[pos] = start
        else:
            loop_id = 0

        pending.append({'ch': ch, 'loop_id': loop_id, 'index': pos, 'line': line, 'column': column})

    if depth > 0:
        raise make_unmatched_open_error(position=len(pending), unclosed=open_stack)

    instructions = []
    for p in pending:
        instr = Instruction.decode(p['ch'], p['loop_id'], p['index'],
                                   partner=jumps.get(p['index']), line=p['line'], column=p['column'])
        logger.debug("decoded %s", instr)
        instructions.append(instr)

    return Program(instructions=tuple(instructions), jumps=jumps)


def parse(text: str) -> Program:
    """Filter and decode raw source text."""
    return decode(scan(text), source=text)

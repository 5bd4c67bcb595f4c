from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


def _build_context(lines: List[str], line_no_1: int, column_1: Optional[int] = None, *, context: int = 1) -> str:
    idx = max(1, min(line_no_1, len(lines)))
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
        if i == idx and column_1 is not None:
            out.append(f"       | {' ' * (column_1 - 1)}^")
    return "\n".join(out)


def _hint_for(kind: str) -> Optional[str]:
    if kind == 'unmatched_close':
        return 'Every "]" needs an earlier "[" at the same nesting level. Remove the extra "]" or add the missing "[".'
    if kind == 'unmatched_open':
        return 'Add the missing "]" or remove the extra "[".'
    if kind == 'input':
        return 'The program asked for more input than was supplied. Pipe or type more input.'
    if kind == 'bounds':
        return 'Check "<" and ">" balance; the pointer must stay within the tape.'
    return None


def _with_hint(message: str, kind: str) -> str:
    hint = _hint_for(kind)
    return f"{message}\nHint: {hint}" if hint else message


@dataclass
class BFIError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class DecodeError(BFIError):
    position: int
    context: str = ''


@dataclass
class UnmatchedCloseError(DecodeError):
    pass


@dataclass
class UnmatchedOpenError(DecodeError):
    unclosed: Tuple[int, ...] = field(default_factory=tuple)


@dataclass
class SourceUnreadableError(BFIError):
    path: str


@dataclass
class ExecutionError(BFIError):
    position: int


@dataclass
class InputExhaustedError(ExecutionError):
    pass


@dataclass
class TapeBoundsError(ExecutionError):
    pointer: int


def make_unmatched_close_error(*, position: int, source: Optional[str] = None,
                               line: Optional[int] = None, column: Optional[int] = None) -> UnmatchedCloseError:
    ctx = ''
    where = f"instruction {position}"
    if source is not None and line is not None:
        ctx = _build_context(source.split('\n'), line, column)
        where += f", line {line}, column {column}"
    body = f"DecodeError: unmatched closing bracket at {where}"
    if ctx:
        body += f"\n{ctx}"
    return UnmatchedCloseError(message=_with_hint(body, 'unmatched_close'), position=position, context=ctx)


def make_unmatched_open_error(*, position: int, unclosed: List[int]) -> UnmatchedOpenError:
    listed = ', '.join(str(p) for p in unclosed)
    body = (f"DecodeError: unmatched opening bracket at end of input (instruction {position}); "
            f"unclosed at {listed}")
    return UnmatchedOpenError(message=_with_hint(body, 'unmatched_open'), position=position, unclosed=tuple(unclosed))


def make_source_unreadable_error(*, path: str, reason: BaseException, action: str) -> SourceUnreadableError:
    detail = getattr(reason, 'strerror', None) or str(reason)
    return SourceUnreadableError(message=f"SourceError: could not {action} file {path}: {detail}", path=path)


def make_input_exhausted_error(*, position: int) -> InputExhaustedError:
    body = f"ExecutionError: input exhausted at instruction {position}"
    return InputExhaustedError(message=_with_hint(body, 'input'), position=position)


def make_tape_bounds_error(*, position: int, pointer: int, capacity: int) -> TapeBoundsError:
    body = (f"ExecutionError: data pointer moved to {pointer}, outside the tape [0, {capacity}) "
            f"at instruction {position}")
    return TapeBoundsError(message=_with_hint(body, 'bounds'), position=position, pointer=pointer)

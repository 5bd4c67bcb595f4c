
from .lexer import filter_source, scan
from .instructions import Instruction, Op, Program
from .decoder import decode, parse
from .tape import TAPE_CAPACITY, Tape
from .executor import Executor
from .errors import (
    BFIError,
    DecodeError,
    ExecutionError,
    InputExhaustedError,
    SourceUnreadableError,
    TapeBoundsError,
    UnmatchedCloseError,
    UnmatchedOpenError,
)
from .api import RunOptions, RunResult, parse_file, parse_string, run_file, run_string

__all__ = [
    'filter_source',
    'scan',
    'Instruction',
    'Op',
    'Program',
    'decode',
    'parse',
    'TAPE_CAPACITY',
    'Tape',
    'Executor',
    'BFIError',
    'DecodeError',
    'ExecutionError',
    'InputExhaustedError',
    'SourceUnreadableError',
    'TapeBoundsError',
    'UnmatchedCloseError',
    'UnmatchedOpenError',
    'RunOptions',
    'RunResult',
    'parse_file',
    'parse_string',
    'run_file',
    'run_string',
]

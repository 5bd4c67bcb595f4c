from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .decoder import parse
from .errors import make_source_unreadable_error
from .executor import Executor
from .instructions import Program
from .tape import Tape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunOptions:
    encoding: str = "utf-8"


@dataclass(frozen=True)
class RunResult:
    program: Program
    pointer: int
    steps: int
    tape: Tape


def parse_string(source: str) -> Program:
    return parse(source)


def read_source(path: str | Path, *, encoding: str = "utf-8") -> str:
    p = Path(path)
    try:
        f = p.open('r', encoding=encoding)
    except OSError as e:
        raise make_source_unreadable_error(path=str(p), reason=e, action='open') from e
    with f:
        try:
            return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise make_source_unreadable_error(path=str(p), reason=e, action='read') from e


def parse_file(path: str | Path, *, encoding: str = "utf-8") -> Program:
    return parse_string(read_source(path, encoding=encoding))


def run_program(program: Program, *, stdin=None, stdout=None) -> RunResult:
    executor = Executor(stdin=stdin, stdout=stdout)
    executor.run(program)
    return RunResult(program=program, pointer=executor.pointer, steps=executor.steps, tape=executor.tape)


def run_string(source: str, *, stdin=None, stdout=None) -> RunResult:
    return run_program(parse_string(source), stdin=stdin, stdout=stdout)


def run_file(path: str | Path, *, stdin=None, stdout=None, options: Optional[RunOptions] = None) -> RunResult:
    encoding = "utf-8" if options is None else options.encoding
    logger.debug("loading %s", path)
    return run_program(parse_file(path, encoding=encoding), stdin=stdin, stdout=stdout)

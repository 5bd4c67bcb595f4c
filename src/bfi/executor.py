from __future__ import annotations

import io
import logging
import sys
from typing import List, Optional

from .errors import make_input_exhausted_error
from .instructions import Instruction, Op, Program
from .tape import Tape

logger = logging.getLogger(__name__)


def _binary(stream):
    # Text streams backed by a byte buffer (sys.stdin, sys.stdout) are used through it.
    if isinstance(stream, io.TextIOBase) and hasattr(stream, 'buffer'):
        return stream.buffer
    return stream


class Executor:
    """
    Runs a decoded Program against its own tape.

    State is owned by the instance. Each ``run`` starts with an empty resume
    stack and a cleared bookmark and step count; the tape is kept until
    ``reset``. Loops use a
    resume stack: entering a loop body pushes the position just past its
    opening bracket, a closing bracket on a non-zero cell goes back there, and
    leaving the loop pops it. A loop whose guard is zero on entry is skipped
    through the bookmark, set from the program's jump table.

    Attributes:
        tape: Cells and data pointer
        resume_stack: Body start positions of the loops currently entered
        bookmark: Closing bracket of the last skipped loop
        steps: Instructions executed so far
    """

    def __init__(self, stdin=None, stdout=None):
        self.stdin = _binary(stdin if stdin is not None else sys.stdin)
        self.stdout = _binary(stdout if stdout is not None else sys.stdout)
        self.tape = Tape()
        self.resume_stack: List[int] = []
        self.bookmark = 0
        self.steps = 0
        self.program: Optional[Program] = None
        self._pending = bytearray()

    def reset(self):
        self.tape.reset()
        self.resume_stack.clear()
        self.bookmark = 0
        self.steps = 0
        self._pending.clear()

    @property
    def pointer(self) -> int:
        return self.tape.pointer

    def run(self, program: Program) -> int:
        """
        Execute ``program`` from its first instruction to the end.

        Returns:
            Number of instructions executed

        Raises:
            InputExhaustedError: An input instruction found no more input
            TapeBoundsError: The data pointer left the tape
        """
        # Tape contents carry over between runs; loop state and counters do not.
        self.resume_stack.clear()
        self.bookmark = 0
        self.steps = 0
        self.program = program
        instructions = program.instructions
        end = len(instructions)
        trace = logger.isEnabledFor(logging.DEBUG)

        pos = 0
        while pos < end:
            instruction = instructions[pos]
            if trace:
                logger.debug("step %d: %s ptr=%d cell=%d", self.steps, instruction,
                             self.tape.pointer, self.tape.read())
            pos = self.apply(instruction)
            self.steps += 1

        self._flush()
        logger.debug("finished after %d steps, ptr=%d", self.steps, self.tape.pointer)
        return self.steps

    def apply(self, instruction: Instruction) -> int:
        """Execute one instruction and return the position to continue from."""
        op = instruction.op
        pos = instruction.index
        tape = self.tape

        if op is Op.MOVE_RIGHT:
            tape.move(1, position=pos)
        elif op is Op.MOVE_LEFT:
            tape.move(-1, position=pos)
        elif op is Op.INCREMENT:
            tape.increment()
        elif op is Op.DECREMENT:
            tape.decrement()
        elif op is Op.OUTPUT:
            self._write_byte(tape.read())
        elif op is Op.INPUT:
            value = self._read_byte()
            if value is None:
                raise make_input_exhausted_error(position=pos)
            tape.write(value)
        elif op is Op.OPEN:
            if tape.read() != 0:
                self.resume_stack.append(pos + 1)
            else:
                self.bookmark = self._partner(instruction)
                return self.bookmark + 1
        elif op is Op.CLOSE:
            if tape.read() != 0:
                if self.resume_stack:
                    return self.resume_stack[-1]
                return self._partner(instruction) + 1
            if self.resume_stack:
                self.resume_stack.pop()

        return pos + 1

    def _partner(self, instruction: Instruction) -> int:
        if instruction.partner is not None:
            return instruction.partner
        if self.program is not None and instruction.index in self.program.jumps:
            return self.program.jumps[instruction.index]
        raise ValueError(f"No matching bracket recorded for instruction {instruction.index}")

    def _read_byte(self) -> Optional[int]:
        if not self._pending:
            data = self.stdin.read(1)
            if not data:
                return None
            self._pending.extend(data.encode('utf-8') if isinstance(data, str) else data)
        return self._pending.pop(0)

    def _write_byte(self, value: int) -> None:
        if isinstance(self.stdout, io.TextIOBase):
            self.stdout.write(chr(value))
        else:
            self.stdout.write(bytes((value,)))
        self._flush()

    def _flush(self) -> None:
        flush = getattr(self.stdout, 'flush', None)
        if flush is not None:
            flush()

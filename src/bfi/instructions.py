from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple


class Op(Enum):
    MOVE_LEFT = '<'
    MOVE_RIGHT = '>'
    INCREMENT = '+'
    DECREMENT = '-'
    OUTPUT = '.'
    INPUT = ','
    OPEN = '['
    CLOSE = ']'

    @classmethod
    def from_char(cls, ch: str) -> "Op":
        try:
            return cls(ch)
        except ValueError:
            raise ValueError(f"Not an instruction character: {ch!r}") from None

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def is_bracket(self) -> bool:
        return self is Op.OPEN or self is Op.CLOSE


@dataclass(frozen=True)
class Instruction:
    """
    One decoded instruction.

    Attributes:
        op: What to do
        index: Position in the filtered instruction stream
        loop_id: Nesting depth of a bracket pair (0 for non-brackets).
            Sibling loops at the same depth share it, so it is descriptive only.
        partner: Index of the matching bracket, None for non-brackets
        line, column: Where the instruction sits in the raw source, if known
    """
    op: Op
    index: int
    loop_id: int = 0
    partner: Optional[int] = None
    line: Optional[int] = None
    column: Optional[int] = None

    @classmethod
    def decode(cls, ch: str, loop_id: int, index: int, **kwargs) -> "Instruction":
        op = Op.from_char(ch)
        return cls(op=op, index=index, loop_id=loop_id if op.is_bracket else 0, **kwargs)

    def __str__(self) -> str:
        text = f"{self.index:5d}  {self.op.symbol}  {self.op.name}"
        if self.op.is_bracket:
            text += f"(loop={self.loop_id}, partner={self.partner})"
        return text


@dataclass(frozen=True)
class Program:
    instructions: Tuple[Instruction, ...] = ()
    # read-only; left out of eq/hash since it is derived from the instructions
    jumps: Mapping[int, int] = field(default_factory=lambda: MappingProxyType({}), compare=False)

    def __post_init__(self):
        if not isinstance(self.jumps, MappingProxyType):
            object.__setattr__(self, 'jumps', MappingProxyType(dict(self.jumps)))

    def __len__(self) -> int:
        return len(self.instructions)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self.instructions[index]

    @property
    def source(self) -> str:
        return ''.join(i.op.symbol for i in self.instructions)

    def dump(self) -> str:
        return '\n'.join(str(i) for i in self.instructions)

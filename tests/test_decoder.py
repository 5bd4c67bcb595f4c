#!/usr/bin/env python3
"""
Tests for decoding filtered source into instructions.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfi.decoder import decode, parse
from bfi.errors import UnmatchedCloseError, UnmatchedOpenError
from bfi.instructions import Instruction, Op


def test_no_brackets_one_instruction_per_char():
    text = "+-<>.,  some comment +++"
    program = parse(text)
    assert len(program) == 9
    assert [i.index for i in program] == list(range(9))
    assert all(i.loop_id == 0 and i.partner is None for i in program)
    assert program.jumps == {}


def test_instruction_kinds():
    program = decode("<>+-.,[]")
    assert [i.op for i in program] == [
        Op.MOVE_LEFT, Op.MOVE_RIGHT, Op.INCREMENT, Op.DECREMENT,
        Op.OUTPUT, Op.INPUT, Op.OPEN, Op.CLOSE,
    ]
    assert program.source == "<>+-.,[]"


def test_loop_ids_follow_depth():
    program = decode("[[]][]")
    assert [i.loop_id for i in program] == [0, 1, 1, 0, 0, 0]


def test_partners_and_jump_table():
    program = decode("+[>[-]<-]")
    assert program[1].partner == 8
    assert program[8].partner == 1
    assert program[3].partner == 5
    assert program[5].partner == 3
    assert program.jumps == {1: 8, 8: 1, 3: 5, 5: 3}


def test_sibling_loops_share_id_not_partner():
    program = decode("[-][-]")
    assert program[0].loop_id == program[3].loop_id == 0
    assert program[0].partner == 2
    assert program[3].partner == 5


def test_unmatched_close_position():
    with pytest.raises(UnmatchedCloseError) as exc:
        decode("+[]]+")
    assert exc.value.position == 3


def test_unmatched_close_first_char():
    with pytest.raises(UnmatchedCloseError) as exc:
        decode("]")
    assert exc.value.position == 0


def test_unmatched_close_reports_source_line():
    with pytest.raises(UnmatchedCloseError) as exc:
        parse("+++\nab ]")
    err = exc.value
    assert err.position == 3
    assert "line 2, column 4" in str(err)
    assert "^" in err.context


def test_unmatched_open():
    with pytest.raises(UnmatchedOpenError) as exc:
        decode("[[+]")
    assert exc.value.position == 4
    assert exc.value.unclosed == (0,)


def test_excess_close_reported_before_unclosed_open():
    with pytest.raises(UnmatchedCloseError):
        decode("][")


@pytest.mark.parametrize("text", ["", "[]", "[[][]]", "+[->[<]]-", "[[[[]]]]"])
def test_balanced_decodes(text):
    program = decode(text)
    assert len(program) == len(text)


def test_instruction_decode_factory():
    instr = Instruction.decode('+', 7, 3)
    assert instr.op is Op.INCREMENT
    assert instr.loop_id == 0
    assert instr.index == 3
    with pytest.raises(ValueError):
        Instruction.decode('x', 0, 0)


def test_instructions_are_immutable():
    program = decode("+")
    with pytest.raises(Exception):
        program[0].index = 5


def test_dump_lists_every_instruction():
    listing = decode("+[-]").dump().splitlines()
    assert len(listing) == 4
    assert "OPEN(loop=0, partner=3)" in listing[1]


def test_jump_table_is_read_only():
    program = decode("[]")
    with pytest.raises(TypeError):
        program.jumps[0] = 5
    assert program.jumps == {0: 1, 1: 0}


def test_program_is_hashable():
    assert hash(decode("+[-]")) == hash(decode("+[-]"))
    assert decode("+[-]") == decode("+[-]")

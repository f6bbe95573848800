"""Frontend — Brainfuck source to command-list lowering."""

from __future__ import annotations

import logging
from typing import Callable

from .ir import Command, Expr, Literal, Opcode, RoutineCall, RoutineName, Var
from . import constants

logger = logging.getLogger(__name__)


class BrainfuckFrontend:
    """Lowers Brainfuck source text into a flat list of commands.

    The list opens with the two lookup-table routines and the main-block
    variable setup, then carries one fixed command group per recognised
    source symbol. Every other character is a comment and is skipped.
    """

    def __init__(self):
        self._instructions: list[Command] = []
        self._SYMBOL_DISPATCH: dict[str, Callable[[], None]] = {
            constants.SYM_POINTER_RIGHT: self._lower_pointer_right,
            constants.SYM_POINTER_LEFT: self._lower_pointer_left,
            constants.SYM_INCREMENT: self._lower_increment,
            constants.SYM_DECREMENT: self._lower_decrement,
            constants.SYM_OUTPUT: self._lower_output,
            constants.SYM_INPUT: self._lower_input,
            constants.SYM_LOOP_OPEN: self._lower_loop_open,
            constants.SYM_LOOP_CLOSE: self._lower_loop_close,
        }

    # ── helpers ──────────────────────────────────────────────────

    def _emit(
        self,
        opcode: Opcode,
        *,
        var: Var | None = None,
        expr: Expr | None = None,
        routine: RoutineCall | None = None,
    ) -> Command:
        cmd = Command(opcode=opcode, var=var, expr=expr, routine=routine)
        self._instructions.append(cmd)
        return cmd

    def _assign(self, var: Var, expr: Expr) -> None:
        self._emit(Opcode.ASSIGN, var=var, expr=expr)

    def _call(self, result: Var, name: RoutineName, *args: Var) -> None:
        self._emit(Opcode.CALL, var=result, routine=RoutineCall.of(name, *args))

    def _return(self, literal: Literal) -> None:
        self._emit(Opcode.RETURN, expr=Expr.of(literal))

    def _load_cell(self) -> None:
        self._assign(Var.TEMP, Expr.array_access(Var.TAPE, Var.POINTER))

    def _store_cell(self) -> None:
        self._call(Var.TAPE, RoutineName.ARRAY_REPLACE, Var.TAPE, Var.POINTER, Var.TEMP)

    # ── entry point ──────────────────────────────────────────────

    def lower(self, source: str) -> list[Command]:
        self._instructions = []
        self._define_char_to_int()
        self._define_int_to_char()
        self._emit(Opcode.DECLARE_MAIN)
        self._init_vars()
        preamble_size = len(self._instructions)
        for symbol in source:
            handler = self._SYMBOL_DISPATCH.get(symbol)
            if handler is not None:
                handler()
        logger.debug(
            "Lowered %d source chars: %d preamble + %d body commands",
            len(source),
            preamble_size,
            len(self._instructions) - preamble_size,
        )
        return self._instructions

    # ── preamble ─────────────────────────────────────────────────

    def _define_char_to_int(self):
        """Table routine: each known character maps to its byte, else 0."""
        self._emit(
            Opcode.DECLARE_ROUTINE,
            routine=RoutineCall.of(RoutineName.CHAR_TO_INT, Var.TEMP),
        )
        for b in constants.LOOKUP_BYTES:
            self._emit(
                Opcode.START_COND, expr=Expr.eq_literal(Var.TEMP, Literal.char(chr(b)))
            )
            self._return(Literal.byte(b))
            self._emit(Opcode.END_IF)
        self._return(Literal.byte(constants.CHAR_TO_INT_FALLBACK))

    def _define_int_to_char(self):
        """Table routine: each known byte maps to its character, else '$'."""
        self._emit(
            Opcode.DECLARE_ROUTINE,
            routine=RoutineCall.of(RoutineName.INT_TO_CHAR, Var.TEMP),
        )
        for b in constants.LOOKUP_BYTES:
            self._emit(Opcode.START_COND, expr=Expr.eq_literal(Var.TEMP, Literal.byte(b)))
            self._return(Literal.char(chr(b)))
            self._emit(Opcode.END_IF)
        self._return(Literal.char(constants.INT_TO_CHAR_FALLBACK))

    def _init_vars(self):
        for var in (Var.ZERO, Var.TAPE, Var.TEMP, Var.BUFFER, Var.POINTER):
            self._emit(Opcode.DECLARE_VAR, var=var)
        self._assign(Var.ZERO, Expr.of(Literal.byte(0)))
        self._assign(Var.TAPE, Expr.of(Literal.empty_array()))
        # Tape starts as a single zero cell
        self._call(Var.TAPE, RoutineName.ARRAY_PUSH, Var.TAPE, Var.ZERO, Var.ZERO)
        self._assign(Var.TEMP, Expr.of(Literal.byte(0)))
        self._assign(Var.BUFFER, Expr.of(Literal.empty_array()))
        self._assign(Var.POINTER, Expr.of(Literal.byte(0)))

    # ── symbols ──────────────────────────────────────────────────

    def _lower_pointer_right(self):
        self._assign(Var.POINTER, Expr.inc(Var.POINTER))
        self._call(Var.TEMP, RoutineName.ARRAY_LENGTH, Var.TAPE)
        self._emit(Opcode.START_COND, expr=Expr.eq_var(Var.POINTER, Var.TEMP))
        self._call(Var.TAPE, RoutineName.ARRAY_PUSH, Var.TAPE, Var.TEMP, Var.ZERO)
        self._emit(Opcode.END_IF)

    def _lower_pointer_left(self):
        # No lower bound check: moving left of cell 0 is undefined in Brainfuck.
        self._assign(Var.POINTER, Expr.dec(Var.POINTER))

    def _lower_increment(self):
        self._load_cell()
        self._assign(Var.TEMP, Expr.inc(Var.TEMP))
        self._store_cell()

    def _lower_decrement(self):
        self._load_cell()
        self._assign(Var.TEMP, Expr.dec(Var.TEMP))
        self._store_cell()

    def _lower_output(self):
        self._load_cell()
        self._call(Var.TEMP, RoutineName.INT_TO_CHAR, Var.TEMP)
        self._emit(
            Opcode.CALL_NO_RESULT, routine=RoutineCall.of(RoutineName.PUT_CHAR, Var.TEMP)
        )

    def _lower_input(self):
        """Pull one character from the line buffer, refilling it when empty."""
        self._call(Var.TEMP, RoutineName.ARRAY_LENGTH, Var.BUFFER)
        self._emit(Opcode.START_COND, expr=Expr.eq_literal(Var.TEMP, Literal.byte(0)))
        self._call(Var.BUFFER, RoutineName.READ_LINE)
        self._emit(Opcode.END_IF)
        self._assign(Var.TEMP, Expr.array_access(Var.BUFFER, Var.ZERO))
        self._call(Var.BUFFER, RoutineName.ARRAY_POP, Var.BUFFER, Var.ZERO)
        self._call(Var.TEMP, RoutineName.CHAR_TO_INT, Var.TEMP)
        self._store_cell()

    def _lower_loop_open(self):
        self._load_cell()
        self._emit(
            Opcode.START_COND, expr=Expr.ne_literal(Var.TEMP, Literal.byte(0))
        )

    def _lower_loop_close(self):
        self._emit(Opcode.END_WHILE)


def lower(source: str) -> list[Command]:
    """Lower Brainfuck *source* into a fresh command list. Never fails."""
    return BrainfuckFrontend().lower(source)

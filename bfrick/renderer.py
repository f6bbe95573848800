"""Command list to indented Rickroll text."""

from __future__ import annotations

import logging
from typing import Callable

from .errors import UnbalancedBracketsError
from .ir import BLOCK_CLOSERS, Command, Opcode
from . import constants

logger = logging.getLogger(__name__)


def _declare_var(cmd: Command) -> list[str]:
    return [constants.DECLARE_VAR_TEMPLATE.format(var=cmd.var)]


def _declare_routine(cmd: Command) -> list[str]:
    return [
        constants.ROUTINE_NAME_TEMPLATE.format(name=cmd.routine.name),
        constants.ROUTINE_PARAMS_TEMPLATE.format(args=cmd.routine.args_text()),
    ]


def _return(cmd: Command) -> list[str]:
    return [constants.RETURN_TEMPLATE.format(expr=cmd.expr)]


def _declare_main(cmd: Command) -> list[str]:
    return [constants.DECLARE_MAIN_TEMPLATE]


def _assign(cmd: Command) -> list[str]:
    return [constants.ASSIGN_TEMPLATE.format(var=cmd.var, expr=cmd.expr)]


def _call(cmd: Command) -> list[str]:
    return [
        constants.CALL_TEMPLATE.format(
            var=cmd.var, name=cmd.routine.name, args=cmd.routine.args_text()
        )
    ]


def _call_no_result(cmd: Command) -> list[str]:
    return [
        constants.CALL_NO_RESULT_TEMPLATE.format(
            name=cmd.routine.name, args=cmd.routine.args_text()
        )
    ]


def _start_cond(cmd: Command) -> list[str]:
    return [constants.START_COND_TEMPLATE.format(expr=cmd.expr)]


def _end_if(cmd: Command) -> list[str]:
    return [constants.END_IF_TEMPLATE]


def _end_while(cmd: Command) -> list[str]:
    return [constants.END_WHILE_TEMPLATE]


TEMPLATE_DISPATCH: dict[Opcode, Callable[[Command], list[str]]] = {
    Opcode.DECLARE_VAR: _declare_var,
    Opcode.DECLARE_ROUTINE: _declare_routine,
    Opcode.RETURN: _return,
    Opcode.DECLARE_MAIN: _declare_main,
    Opcode.ASSIGN: _assign,
    Opcode.CALL: _call,
    Opcode.CALL_NO_RESULT: _call_no_result,
    Opcode.START_COND: _start_cond,
    Opcode.END_IF: _end_if,
    Opcode.END_WHILE: _end_while,
}


def render(
    instructions: list[Command],
    indent: int = constants.DEFAULT_INDENT,
    trace: bool = constants.DEFAULT_TRACE,
) -> str:
    """Render a command list as Rickroll source.

    Nesting is tracked with a plain depth counter: a block close at depth 0,
    or any block still open after the last command, is an error.

    Args:
        instructions: Commands produced by the frontend.
        indent: Spaces per nesting level.
        trace: Precede every main-block command with a comment line
            carrying its index in *instructions*.

    Returns:
        The rendered program, one line per template, newline-terminated.

    Raises:
        UnbalancedBracketsError: If block opens and closes do not pair.
        ValueError: If *indent* is negative.
    """
    if indent < 0:
        raise ValueError(f"indent must be non-negative, got {indent}")

    lines: list[str] = []
    depth = 0
    in_main = False
    for index, cmd in enumerate(instructions):
        if cmd.opcode in BLOCK_CLOSERS:
            if depth == 0:
                logger.debug("Unmatched %s at command %d", cmd.opcode.value, index)
                raise UnbalancedBracketsError(index=index)
            depth -= 1

        pad = " " * (depth * indent)
        if trace and in_main:
            lines.append(pad + constants.TRACE_TEMPLATE.format(index=index))
        lines.extend(pad + line for line in TEMPLATE_DISPATCH[cmd.opcode](cmd))

        if cmd.opcode == Opcode.START_COND:
            depth += 1
        elif cmd.opcode == Opcode.DECLARE_MAIN:
            in_main = True

    if depth != 0:
        raise UnbalancedBracketsError(depth=depth)

    logger.debug("Rendered %d commands into %d lines", len(instructions), len(lines))
    return "".join(line + "\n" for line in lines)

"""Pure functions for computing statistics over command lists."""

from __future__ import annotations

from collections import Counter

from bfrick.ir import Command, Opcode


def count_opcodes(instructions: list[Command]) -> dict[str, int]:
    """Tally how often each opcode occurs in a lowered program.

    The preamble tables dominate small programs, so counts are only
    comparable between sources lowered the same way.

    Args:
        instructions: Commands from the frontend, preamble included.

    Returns:
        Opcode value (e.g. ``"START_COND"``) to count; opcodes that never
        occur are absent.
    """
    return dict(Counter(cmd.opcode.value for cmd in instructions))


def max_depth(instructions: list[Command]) -> int:
    """Deepest block nesting reached, ignoring unmatched closes."""
    depth = 0
    deepest = 0
    for cmd in instructions:
        if cmd.opcode == Opcode.START_COND:
            depth += 1
            deepest = max(deepest, depth)
        elif cmd.opcode in (Opcode.END_IF, Opcode.END_WHILE):
            depth = max(depth - 1, 0)
    return deepest

"""Composable API functions for the transpiler pipeline.

Each function backs a CLI workflow (default, --ir-only, --stats) and is
callable programmatically without argparse.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .frontend import lower
from .errors import SourceReadError
from .ir_stats import count_opcodes, max_depth
from .render_types import RenderOptions
from .renderer import render

logger = logging.getLogger(__name__)


def transpile(source: str, options: RenderOptions = RenderOptions()) -> str:
    """Lower Brainfuck source and render it as Rickroll text.

    Args:
        source: The Brainfuck program text.
        options: Indent width and trace flag.

    Returns:
        The rendered Rickroll program.

    Raises:
        UnbalancedBracketsError: If ``[`` and ``]`` in *source* do not pair.
    """
    logger.info(
        "Transpiling %d chars (indent=%d, trace=%s)",
        len(source),
        options.indent,
        options.trace,
    )
    instructions = lower(source)
    return render(instructions, options.indent, options.trace)


def dump_ir(source: str) -> str:
    """Lower source to commands and return a human-readable text dump.

    Args:
        source: The Brainfuck program text.

    Returns:
        A multi-line string with one indexed command per line.
    """
    instructions = lower(source)
    return "\n".join(f"  {i}: {cmd}" for i, cmd in enumerate(instructions))


def ir_stats(source: str) -> dict[str, int]:
    """Lower source and return opcode frequency counts.

    Args:
        source: The Brainfuck program text.

    Returns:
        A dict mapping opcode name strings to their occurrence counts.
    """
    return count_opcodes(lower(source))


def nesting_depth(source: str) -> int:
    """Lower source and return the deepest block nesting it reaches."""
    return max_depth(lower(source))


def read_source(input_path: str | Path) -> str:
    """Read a Brainfuck file as UTF-8 text.

    Raises:
        SourceReadError: If the file cannot be opened or is not valid UTF-8.
    """
    try:
        return Path(input_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Read failed: %s", exc)
        raise SourceReadError(str(input_path)) from exc


def transpile_file(
    input_path: str | Path,
    output_path: str | Path,
    options: RenderOptions = RenderOptions(),
) -> None:
    """Read a Brainfuck file, transpile it, and write the Rickroll file.

    Nothing is written when reading or transpilation fails.

    Raises:
        SourceReadError: If the input cannot be read or decoded.
        UnbalancedBracketsError: If the program's brackets do not pair.
        OSError: If the output cannot be written.
    """
    source = read_source(input_path)
    output = transpile(source, options)
    Path(output_path).write_text(output)
    logger.info("Wrote %s", output_path)

"""Brainfuck to Rickroll-Lang transpiler package."""

from .frontend import lower  # noqa: F401
from .renderer import render  # noqa: F401
from .errors import SourceReadError, TranspileError, UnbalancedBracketsError  # noqa: F401
from .render_types import RenderOptions  # noqa: F401
from .api import (  # noqa: F401
    transpile,
    transpile_file,
    read_source,
    nesting_depth,
    dump_ir,
    ir_stats,
)

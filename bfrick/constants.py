"""Named constants: the fixed Rickroll vocabulary and lowering tables."""

from __future__ import annotations

# ── source language ──────────────────────────────────────────────

SYM_POINTER_RIGHT = ">"
SYM_POINTER_LEFT = "<"
SYM_INCREMENT = "+"
SYM_DECREMENT = "-"
SYM_OUTPUT = "."
SYM_INPUT = ","
SYM_LOOP_OPEN = "["
SYM_LOOP_CLOSE = "]"

# ── lookup tables ────────────────────────────────────────────────

# Newline, then printable ASCII from space through tilde.
LOOKUP_BYTES: tuple[int, ...] = (0x0A, *range(0x20, 0x7F))

CHAR_TO_INT_FALLBACK = 0
INT_TO_CHAR_FALLBACK = "$"

MAX_BYTE = 255

# ── target language ──────────────────────────────────────────────

EMPTY_ARRAY_TOKEN = "ARRAY"
NO_ARGS_TOKEN = "you"

DECLARE_VAR_TEMPLATE = "Never gonna let {var} down"
ROUTINE_NAME_TEMPLATE = "[Verse {name}]"
ROUTINE_PARAMS_TEMPLATE = "(Ooh give you {args})"
RETURN_TEMPLATE = "(Ooh) Never gonna give, never gonna give (give you {expr})"
DECLARE_MAIN_TEMPLATE = "[Chorus]"
ASSIGN_TEMPLATE = "Never gonna give {var} {expr}"
CALL_TEMPLATE = "(Ooh give you {var}) Never gonna run {name} and desert {args}"
CALL_NO_RESULT_TEMPLATE = "Never gonna run {name} and desert {args}"
START_COND_TEMPLATE = "Inside we both know {expr}"
END_IF_TEMPLATE = "Your heart's been aching but you're too shy to say it"
END_WHILE_TEMPLATE = "We know the game and we're gonna play it"
TRACE_TEMPLATE = "Never gonna say {index}"

CHAR_ESCAPES: dict[str, str] = {
    "\n": "\\n",
    "'": "\\'",
    "\\": "\\\\",
}

# ── rendering defaults ───────────────────────────────────────────

DEFAULT_INDENT = 2
DEFAULT_TRACE = False

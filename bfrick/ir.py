"""IR Design — a flat list of Rickroll-shaped commands over five named variables."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from pydantic import BaseModel, ConfigDict, model_validator

from . import constants


class Var(str, Enum):
    ZERO = "Zero"
    POINTER = "Pointer"
    TAPE = "Tape"
    TEMP = "Temp"
    BUFFER = "Buffer"

    def __str__(self) -> str:
        return self.value


# ── literals ─────────────────────────────────────────────────────


class LiteralKind(str, Enum):
    CHAR = "CHAR"
    INT = "INT"
    EMPTY_ARRAY = "EMPTY_ARRAY"


class Literal(BaseModel):
    """A character, an unsigned byte, or the empty array."""

    model_config = ConfigDict(frozen=True)

    kind: LiteralKind
    value: int | str | None = None

    @model_validator(mode="after")
    def _check_value(self) -> Literal:
        if self.kind == LiteralKind.CHAR:
            if not isinstance(self.value, str) or len(self.value) != 1:
                raise ValueError(f"char literal needs one character, got {self.value!r}")
        elif self.kind == LiteralKind.INT:
            if (
                not isinstance(self.value, int)
                or isinstance(self.value, bool)
                or not 0 <= self.value <= constants.MAX_BYTE
            ):
                raise ValueError(f"int literal must be a byte, got {self.value!r}")
        elif self.value is not None:
            raise ValueError("empty array literal carries no value")
        return self

    @classmethod
    def char(cls, c: str) -> Literal:
        return cls(kind=LiteralKind.CHAR, value=c)

    @classmethod
    def byte(cls, b: int) -> Literal:
        return cls(kind=LiteralKind.INT, value=b)

    @classmethod
    def empty_array(cls) -> Literal:
        return cls(kind=LiteralKind.EMPTY_ARRAY)

    def __str__(self) -> str:
        if self.kind == LiteralKind.INT:
            return str(self.value)
        if self.kind == LiteralKind.EMPTY_ARRAY:
            return constants.EMPTY_ARRAY_TOKEN
        return "'" + constants.CHAR_ESCAPES.get(self.value, self.value) + "'"


# ── expressions ──────────────────────────────────────────────────


class ExprKind(str, Enum):
    INC = "INC"
    DEC = "DEC"
    ARRAY_ACCESS = "ARRAY_ACCESS"
    IS_EQUAL_LITERAL = "IS_EQUAL_LITERAL"
    IS_EQUAL_VAR = "IS_EQUAL_VAR"
    IS_NOT_EQUAL_LITERAL = "IS_NOT_EQUAL_LITERAL"
    LITERAL = "LITERAL"


# Fields each expression kind must populate; the rest stay None.
EXPR_FIELDS: dict[ExprKind, frozenset[str]] = {
    ExprKind.INC: frozenset({"var"}),
    ExprKind.DEC: frozenset({"var"}),
    ExprKind.ARRAY_ACCESS: frozenset({"var", "other"}),
    ExprKind.IS_EQUAL_LITERAL: frozenset({"var", "literal"}),
    ExprKind.IS_EQUAL_VAR: frozenset({"var", "other"}),
    ExprKind.IS_NOT_EQUAL_LITERAL: frozenset({"var", "literal"}),
    ExprKind.LITERAL: frozenset({"literal"}),
}


class Expr(BaseModel):
    """Side-effect free right-hand side, condition or return value."""

    model_config = ConfigDict(frozen=True)

    kind: ExprKind
    var: Var | None = None
    other: Var | None = None
    literal: Literal | None = None

    @model_validator(mode="after")
    def _check_fields(self) -> Expr:
        present = {
            name for name in ("var", "other", "literal") if getattr(self, name) is not None
        }
        expected = EXPR_FIELDS[self.kind]
        if present != expected:
            raise ValueError(
                f"{self.kind.value} expects fields {sorted(expected)}, got {sorted(present)}"
            )
        return self

    @classmethod
    def inc(cls, var: Var) -> Expr:
        return cls(kind=ExprKind.INC, var=var)

    @classmethod
    def dec(cls, var: Var) -> Expr:
        return cls(kind=ExprKind.DEC, var=var)

    @classmethod
    def array_access(cls, array: Var, index: Var) -> Expr:
        return cls(kind=ExprKind.ARRAY_ACCESS, var=array, other=index)

    @classmethod
    def eq_literal(cls, var: Var, literal: Literal) -> Expr:
        return cls(kind=ExprKind.IS_EQUAL_LITERAL, var=var, literal=literal)

    @classmethod
    def eq_var(cls, var: Var, other: Var) -> Expr:
        return cls(kind=ExprKind.IS_EQUAL_VAR, var=var, other=other)

    @classmethod
    def ne_literal(cls, var: Var, literal: Literal) -> Expr:
        return cls(kind=ExprKind.IS_NOT_EQUAL_LITERAL, var=var, literal=literal)

    @classmethod
    def of(cls, literal: Literal) -> Expr:
        return cls(kind=ExprKind.LITERAL, literal=literal)

    def __str__(self) -> str:
        return EXPR_FORMATS[self.kind](self)


EXPR_FORMATS: dict[ExprKind, Callable[[Expr], str]] = {
    ExprKind.INC: lambda e: f"{e.var} + 1",
    ExprKind.DEC: lambda e: f"{e.var} - 1",
    ExprKind.ARRAY_ACCESS: lambda e: f"{e.var} : {e.other}",
    ExprKind.IS_EQUAL_LITERAL: lambda e: f"{e.var} == {e.literal}",
    ExprKind.IS_EQUAL_VAR: lambda e: f"{e.var} == {e.other}",
    ExprKind.IS_NOT_EQUAL_LITERAL: lambda e: f"{e.var} != {e.literal}",
    ExprKind.LITERAL: lambda e: str(e.literal),
}


# ── routines ─────────────────────────────────────────────────────


class RoutineName(str, Enum):
    ARRAY_REPLACE = "ArrayReplace"
    ARRAY_PUSH = "ArrayPush"
    ARRAY_POP = "ArrayPop"
    ARRAY_LENGTH = "ArrayLength"
    CHAR_TO_INT = "CharToInt"
    INT_TO_CHAR = "IntToChar"
    PUT_CHAR = "PutChar"
    READ_LINE = "ReadLine"

    def __str__(self) -> str:
        return self.value


ROUTINE_ARITY: dict[RoutineName, int] = {
    RoutineName.ARRAY_REPLACE: 3,
    RoutineName.ARRAY_PUSH: 3,
    RoutineName.ARRAY_POP: 2,
    RoutineName.ARRAY_LENGTH: 1,
    RoutineName.CHAR_TO_INT: 1,
    RoutineName.INT_TO_CHAR: 1,
    RoutineName.PUT_CHAR: 1,
    RoutineName.READ_LINE: 0,
}


class RoutineCall(BaseModel):
    """A library routine applied to variables, or a routine header's parameters."""

    model_config = ConfigDict(frozen=True)

    name: RoutineName
    args: tuple[Var, ...] = ()

    @model_validator(mode="after")
    def _check_arity(self) -> RoutineCall:
        arity = ROUTINE_ARITY[self.name]
        if len(self.args) != arity:
            raise ValueError(
                f"{self.name.value} takes {arity} argument(s), got {len(self.args)}"
            )
        return self

    @classmethod
    def of(cls, name: RoutineName, *args: Var) -> RoutineCall:
        return cls(name=name, args=args)

    def args_text(self) -> str:
        if not self.args:
            return constants.NO_ARGS_TOKEN
        return ", ".join(str(a) for a in self.args)

    def __str__(self) -> str:
        return f"{self.name}({', '.join(str(a) for a in self.args)})"


# ── commands ─────────────────────────────────────────────────────


class Opcode(str, Enum):
    # Declarations
    DECLARE_VAR = "DECLARE_VAR"
    DECLARE_ROUTINE = "DECLARE_ROUTINE"
    DECLARE_MAIN = "DECLARE_MAIN"
    RETURN = "RETURN"
    # Data movement
    ASSIGN = "ASSIGN"
    CALL = "CALL"
    CALL_NO_RESULT = "CALL_NO_RESULT"
    # Blocks
    START_COND = "START_COND"
    END_IF = "END_IF"
    END_WHILE = "END_WHILE"


COMMAND_FIELDS: dict[Opcode, frozenset[str]] = {
    Opcode.DECLARE_VAR: frozenset({"var"}),
    Opcode.DECLARE_ROUTINE: frozenset({"routine"}),
    Opcode.DECLARE_MAIN: frozenset(),
    Opcode.RETURN: frozenset({"expr"}),
    Opcode.ASSIGN: frozenset({"var", "expr"}),
    Opcode.CALL: frozenset({"var", "routine"}),
    Opcode.CALL_NO_RESULT: frozenset({"routine"}),
    Opcode.START_COND: frozenset({"expr"}),
    Opcode.END_IF: frozenset(),
    Opcode.END_WHILE: frozenset(),
}

BLOCK_CLOSERS: frozenset[Opcode] = frozenset({Opcode.END_IF, Opcode.END_WHILE})


class Command(BaseModel):
    """One line-template unit of the lowered program, tagged by opcode."""

    model_config = ConfigDict(frozen=True)

    opcode: Opcode
    var: Var | None = None  # declared, assigned, or receiving a call result
    expr: Expr | None = None
    routine: RoutineCall | None = None

    @model_validator(mode="after")
    def _check_fields(self) -> Command:
        present = {
            name for name in ("var", "expr", "routine") if getattr(self, name) is not None
        }
        expected = COMMAND_FIELDS[self.opcode]
        if present != expected:
            raise ValueError(
                f"{self.opcode.value} expects fields {sorted(expected)}, got {sorted(present)}"
            )
        return self

    def __str__(self) -> str:
        parts: list[str] = []
        if self.opcode in (Opcode.ASSIGN, Opcode.CALL):
            parts.append(f"{self.var} =")
        parts.append(self.opcode.value.lower())
        if self.opcode == Opcode.DECLARE_VAR:
            parts.append(str(self.var))
        if self.routine is not None:
            parts.append(str(self.routine))
        if self.expr is not None:
            parts.append(str(self.expr))
        return " ".join(parts)

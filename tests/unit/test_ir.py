"""Tests for the command-list vocabulary: literals, expressions, routines, commands."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from bfrick.ir import (
    EXPR_FORMATS,
    ROUTINE_ARITY,
    Command,
    Expr,
    ExprKind,
    Literal,
    Opcode,
    RoutineCall,
    RoutineName,
    Var,
)
from bfrick.renderer import TEMPLATE_DISPATCH


class TestVar:
    def test_renders_as_name(self):
        assert str(Var.ZERO) == "Zero"
        assert str(Var.POINTER) == "Pointer"
        assert str(Var.TAPE) == "Tape"
        assert str(Var.TEMP) == "Temp"
        assert str(Var.BUFFER) == "Buffer"

    def test_closed_set(self):
        assert len(Var) == 5


class TestLiteral:
    def test_byte_renders_decimal(self):
        assert str(Literal.byte(0)) == "0"
        assert str(Literal.byte(126)) == "126"
        assert str(Literal.byte(255)) == "255"

    def test_empty_array_renders_keyword(self):
        assert str(Literal.empty_array()) == "ARRAY"

    def test_plain_char_is_quoted(self):
        assert str(Literal.char("a")) == "'a'"
        assert str(Literal.char(" ")) == "' '"
        assert str(Literal.char("$")) == "'$'"

    def test_newline_escape(self):
        assert str(Literal.char("\n")) == "'\\n'"

    def test_quote_escape(self):
        assert str(Literal.char("'")) == "'\\''"

    def test_backslash_escape(self):
        assert str(Literal.char("\\")) == "'\\\\'"

    def test_escapes_are_two_characters_and_distinct(self):
        bodies = {str(Literal.char(c))[1:-1] for c in ("\n", "'", "\\")}
        assert len(bodies) == 3
        assert all(len(body) == 2 and body[0] == "\\" for body in bodies)

    def test_byte_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            Literal.byte(256)
        with pytest.raises(ValidationError):
            Literal.byte(-1)

    def test_multi_char_rejected(self):
        with pytest.raises(ValidationError):
            Literal.char("ab")

    def test_empty_char_rejected(self):
        with pytest.raises(ValidationError):
            Literal.char("")

    def test_literals_are_immutable(self):
        lit = Literal.byte(1)
        with pytest.raises(ValidationError):
            lit.value = 2

    def test_equal_literals_compare_equal(self):
        assert Literal.char("x") == Literal.char("x")
        assert Literal.byte(3) != Literal.byte(4)


class TestExpr:
    def test_inc(self):
        assert str(Expr.inc(Var.POINTER)) == "Pointer + 1"

    def test_dec(self):
        assert str(Expr.dec(Var.TEMP)) == "Temp - 1"

    def test_array_access(self):
        assert str(Expr.array_access(Var.TAPE, Var.POINTER)) == "Tape : Pointer"

    def test_eq_literal(self):
        assert str(Expr.eq_literal(Var.TEMP, Literal.char("'"))) == "Temp == '\\''"

    def test_eq_var(self):
        assert str(Expr.eq_var(Var.POINTER, Var.TEMP)) == "Pointer == Temp"

    def test_ne_literal(self):
        assert str(Expr.ne_literal(Var.TEMP, Literal.byte(0))) == "Temp != 0"

    def test_bare_literal(self):
        assert str(Expr.of(Literal.empty_array())) == "ARRAY"

    def test_every_kind_has_a_format(self):
        assert set(EXPR_FORMATS) == set(ExprKind)

    def test_missing_field_rejected(self):
        with pytest.raises(ValidationError):
            Expr(kind=ExprKind.ARRAY_ACCESS, var=Var.TAPE)

    def test_extra_field_rejected(self):
        with pytest.raises(ValidationError):
            Expr(kind=ExprKind.INC, var=Var.TEMP, other=Var.ZERO)


class TestRoutineCall:
    def test_args_joined_with_commas(self):
        call = RoutineCall.of(
            RoutineName.ARRAY_REPLACE, Var.TAPE, Var.POINTER, Var.TEMP
        )
        assert call.args_text() == "Tape, Pointer, Temp"

    def test_read_line_renders_placeholder_argument(self):
        assert RoutineCall.of(RoutineName.READ_LINE).args_text() == "you"

    def test_every_routine_has_an_arity(self):
        assert set(ROUTINE_ARITY) == set(RoutineName)

    @pytest.mark.parametrize(
        "name,args",
        [
            (RoutineName.ARRAY_PUSH, (Var.TAPE, Var.ZERO)),
            (RoutineName.ARRAY_POP, (Var.BUFFER,)),
            (RoutineName.ARRAY_LENGTH, ()),
            (RoutineName.PUT_CHAR, (Var.TEMP, Var.TEMP)),
            (RoutineName.READ_LINE, (Var.BUFFER,)),
        ],
    )
    def test_wrong_arity_rejected(self, name, args):
        with pytest.raises(ValidationError, match="argument"):
            RoutineCall.of(name, *args)

    def test_debug_form(self):
        call = RoutineCall.of(RoutineName.ARRAY_POP, Var.BUFFER, Var.ZERO)
        assert str(call) == "ArrayPop(Buffer, Zero)"


class TestCommand:
    def test_every_opcode_has_a_template(self):
        assert set(TEMPLATE_DISPATCH) == set(Opcode)

    def test_assign_debug_form(self):
        cmd = Command(
            opcode=Opcode.ASSIGN,
            var=Var.TEMP,
            expr=Expr.array_access(Var.TAPE, Var.POINTER),
        )
        assert str(cmd) == "Temp = assign Tape : Pointer"

    def test_call_debug_form(self):
        cmd = Command(
            opcode=Opcode.CALL,
            var=Var.TEMP,
            routine=RoutineCall.of(RoutineName.ARRAY_LENGTH, Var.TAPE),
        )
        assert str(cmd) == "Temp = call ArrayLength(Tape)"

    def test_declare_var_debug_form(self):
        assert str(Command(opcode=Opcode.DECLARE_VAR, var=Var.ZERO)) == "declare_var Zero"

    def test_end_while_debug_form(self):
        assert str(Command(opcode=Opcode.END_WHILE)) == "end_while"

    def test_assign_without_expression_rejected(self):
        with pytest.raises(ValidationError):
            Command(opcode=Opcode.ASSIGN, var=Var.TEMP)

    def test_block_close_with_payload_rejected(self):
        with pytest.raises(ValidationError):
            Command(opcode=Opcode.END_IF, var=Var.TEMP)

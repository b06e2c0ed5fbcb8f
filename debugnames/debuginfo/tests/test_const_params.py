# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import re

import pytest

from debugnames.core.errors import DebugInfoBug
from debugnames.core.stable_hash import stable_hash
from debugnames.core.types_core import (
	Bool,
	Char,
	Const,
	ConstParamRef,
	Int,
	IntTy,
	ScalarValue,
	UnevaluatedValue,
	Uint,
	UintTy,
)
from debugnames.debuginfo import Dialect
from debugnames.debuginfo.const_params import push_const_param
from debugnames.debuginfo.output import NameBuffer
from debugnames.test_support import World


def render(ctx, ct: Const) -> str:
	out = NameBuffer()
	push_const_param(ctx, ct, out)
	return out.getvalue()


@pytest.mark.parametrize(
	"ty, bits, expected",
	[
		(Int(IntTy.I8), 0xFF, "-1"),
		(Int(IntTy.I8), 0x7F, "127"),
		(Int(IntTy.I32), 0xFFFFFFFE, "-2"),
		(Int(IntTy.I128), (1 << 128) - 1, "-1"),
		(Uint(UintTy.U8), 200, "200"),
		(Uint(UintTy.U128), (1 << 128) - 1, str((1 << 128) - 1)),
		(Bool(), 1, "true"),
		(Bool(), 0, "false"),
	],
)
def test_scalars_print_as_literals(native, ty, bits: int, expected: str) -> None:
	assert render(native, Const(ty, ScalarValue(bits))) == expected


def test_pointer_sized_ints_follow_target_width() -> None:
	ct = Const(Int(IntTy.ISIZE), ScalarValue(0xFFFFFFFF))
	assert render(World(word_bits=32).ctx(Dialect.NATIVE), ct) == "-1"
	assert render(World(word_bits=64).ctx(Dialect.NATIVE), ct) == "4294967295"


def test_invalid_bool_bits_are_a_bug(native) -> None:
	with pytest.raises(DebugInfoBug):
		render(native, Const(Bool(), ScalarValue(2)))


def test_param_refs_print_their_name(native, cpp) -> None:
	ct = Const(Uint(UintTy.USIZE), ConstParamRef(0, "N"))
	assert render(native, ct) == "N"
	assert render(cpp, ct) == "N"


def test_unevaluated_constants_are_hashed(native, cpp) -> None:
	value = UnevaluatedValue("app::SIZE")
	ct = Const(Uint(UintTy.USIZE), value)
	native_name = render(native, ct)
	cpp_name = render(cpp, ct)
	assert re.fullmatch(r"\{CONST#[0-9a-f]+\}", native_name)
	assert re.fullmatch(r"CONST\$[0-9a-f]+", cpp_name)
	digest = f"{stable_hash(value):x}"
	assert native_name == "{CONST#" + digest + "}"
	assert cpp_name == "CONST$" + digest


def test_hash_is_deterministic_and_distinct(native) -> None:
	first = render(native, Const(Uint(UintTy.USIZE), UnevaluatedValue("app::SIZE")))
	again = render(native, Const(Uint(UintTy.USIZE), UnevaluatedValue("app::SIZE")))
	other = render(native, Const(Uint(UintTy.USIZE), UnevaluatedValue("app::LEN")))
	assert first == again
	assert first != other


def test_registered_values_are_evaluated(world: World, native) -> None:
	value = UnevaluatedValue("app::SIZE")
	world.consts.set_value(value, 16)
	assert render(native, Const(Uint(UintTy.USIZE), value)) == "16"


def test_non_integer_constants_are_hashed(native) -> None:
	assert render(native, Const(Char(), ScalarValue(97))).startswith("{CONST#")

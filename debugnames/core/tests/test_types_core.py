# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from debugnames.core.item_id import ClosureKind, ItemId
from debugnames.core.layout import sign_extend, tag_bits_for, truncate
from debugnames.core.types_core import (
	UNIT,
	Adt,
	AdtDef,
	AdtKind,
	Array,
	Bool,
	Char,
	FnPtr,
	FnSig,
	IntTy,
	Mutability,
	ScalarValue,
	Tuple,
	Uint,
	UintTy,
	is_unit,
	usize_const,
)


def test_descriptors_compare_structurally() -> None:
	adt = AdtDef(item=ItemId(0, 3), kind=AdtKind.ENUM, variants=["A", "B"])
	assert adt.variants == ("A", "B")
	assert adt.is_enum
	left = Adt(adt, [Bool()])
	right = Adt(adt, (Bool(),))
	assert left == right
	assert hash(left) == hash(right)
	assert Bool() != Char()


def test_fn_types_are_hashable() -> None:
	fp = FnPtr(FnSig(inputs=[Bool()], output=Char()))
	assert fp in {FnPtr(FnSig(inputs=(Bool(),), output=Char()))}
	assert is_unit(FnSig().output)


def test_array_accepts_plain_length() -> None:
	arr = Array(Uint(UintTy.U8), 3)
	assert arr.length == usize_const(3)
	assert arr.length.value == ScalarValue(3)


def test_unit_helpers() -> None:
	assert is_unit(UNIT)
	assert is_unit(Tuple())
	assert not is_unit(Tuple((Bool(),)))
	assert not is_unit(Bool())


def test_int_widths_follow_target_word_size() -> None:
	assert IntTy.I16.bit_width(64) == 16
	assert IntTy.ISIZE.bit_width(32) == 32
	assert UintTy.USIZE.bit_width(64) == 64
	assert UintTy.U128.bit_width(16) == 128


def test_labels_and_prefixes() -> None:
	assert Mutability.MUT.prefix_str() == "mut "
	assert Mutability.NOT.prefix_str() == ""
	assert ClosureKind.ASYNC_CLOSURE.label == "async_closure"


def test_truncate_and_sign_extend() -> None:
	assert truncate(0x1FF, 8) == 0xFF
	assert truncate(-1, 16) == 0xFFFF
	assert sign_extend(0xFF, 8) == -1
	assert sign_extend(0x7F, 8) == 127
	assert sign_extend((1 << 128) - 1, 128) == -1
	assert sign_extend(0x80, 16) == 0x80


def test_tag_width_grows_in_bytes() -> None:
	assert tag_bits_for(2) == 8
	assert tag_bits_for(256) == 8
	assert tag_bits_for(257) == 16

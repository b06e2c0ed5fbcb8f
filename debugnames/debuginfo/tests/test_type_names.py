# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from debugnames.core.errors import DebugInfoBug, UnrepresentableTypeError
from debugnames.core.types_core import (
	UNIT,
	Array,
	Bool,
	Bound,
	Char,
	Const,
	ConstParamRef,
	ErrorType,
	Float,
	FloatTy,
	Foreign,
	Infer,
	Int,
	IntTy,
	Lifetime,
	Mutability,
	Never,
	Opaque,
	Param,
	Placeholder,
	Projection,
	RawPtr,
	Ref,
	Slice,
	Str,
	Tuple,
	UnevaluatedValue,
	Uint,
	UintTy,
)
from debugnames.debuginfo import compute_type_name
from debugnames.test_support import World

U8 = Uint(UintTy.U8)


def test_tuple(world: World) -> None:
	assert world.names(Tuple((Int(IntTy.I32), U8))) == ("(i32, u8)", "tuple$<i32,u8>")
	assert world.names(UNIT) == ("()", "tuple$<>")
	assert world.names(Tuple((Bool(),))) == ("(bool)", "tuple$<bool>")


@pytest.mark.parametrize(
	"ty, native, cpp",
	[
		(Bool(), "bool", "bool"),
		(Char(), "char", "char"),
		(Str(), "str", "str"),
		(Never(), "!", "never$"),
		(Int(IntTy.ISIZE), "isize", "isize"),
		(Int(IntTy.I128), "i128", "i128"),
		(Uint(UintTy.USIZE), "usize", "usize"),
		(Uint(UintTy.U16), "u16", "u16"),
		(Float(FloatTy.F32), "f32", "f32"),
		(Float(FloatTy.F64), "f64", "f64"),
		(Param(0, "T"), "T", "T"),
	],
)
def test_primitives(world: World, ty, native: str, cpp: str) -> None:
	assert world.names(ty) == (native, cpp)


def test_references(world: World) -> None:
	assert world.names(Ref(U8)) == ("&u8", "ref$<u8>")
	assert world.names(Ref(U8, Mutability.MUT)) == ("&mut u8", "ref_mut$<u8>")


def test_references_to_slices_and_str_are_unwrapped_in_cpp(world: World) -> None:
	assert world.names(Ref(Slice(Str()))) == ("&[str]", "slice$<str>")
	assert world.names(Ref(Str())) == ("&str", "str")
	assert world.names(Ref(Slice(U8), Mutability.MUT)) == ("&mut [u8]", "slice$<u8>")


def test_reference_to_generic_type_closes_without_shift(world: World) -> None:
	vec = world.struct("alloc::vec::Vec", U8)
	assert world.names(Ref(vec)) == ("&alloc::vec::Vec<u8>", "ref$<alloc::vec::Vec<u8> >")


def test_raw_pointers(world: World) -> None:
	assert world.names(RawPtr(U8)) == ("*const u8", "ptr_const$<u8>")
	assert world.names(RawPtr(U8, Mutability.MUT)) == ("*mut u8", "ptr_mut$<u8>")


def test_arrays_and_slices(world: World) -> None:
	assert world.names(Array(U8, 3)) == ("[u8; 3]", "array$<u8,3>")
	assert world.names(Slice(Char())) == ("[char]", "slice$<char>")
	vec = world.struct("alloc::vec::Vec", U8)
	assert world.names(Array(vec, 4)) == ("[alloc::vec::Vec<u8>; 4]", "array$<alloc::vec::Vec<u8>,4>")


def test_array_length_may_be_a_const_param(world: World) -> None:
	arr = Array(Param(0, "T"), Const(Uint(UintTy.USIZE), ConstParamRef(0, "N")))
	assert world.names(arr) == ("[T; N]", "array$<T,N>")


def test_unevaluable_array_length_is_a_bug(world: World, native) -> None:
	arr = Array(U8, Const(Uint(UintTy.USIZE), UnevaluatedValue("app::LEN")))
	with pytest.raises(DebugInfoBug):
		compute_type_name(native, arr)
	world.consts.set_value(UnevaluatedValue("app::LEN"), 8)
	assert compute_type_name(native, arr) == "[u8; 8]"


def test_foreign_types(world: World) -> None:
	file = Foreign(world.items.ensure_path("libc::FILE"))
	assert world.names(file) == ("libc::FILE", "libc::FILE")
	assert world.names(file, qualified=False) == ("FILE", "FILE")


def test_adts(world: World) -> None:
	string = world.struct("alloc::string::String")
	vec = world.struct("alloc::vec::Vec", string)
	assert world.names(vec) == (
		"alloc::vec::Vec<alloc::string::String>",
		"alloc::vec::Vec<alloc::string::String>",
	)


def test_unqualified_only_affects_outermost_item(world: World) -> None:
	string = world.struct("alloc::string::String")
	vec = world.struct("alloc::vec::Vec", string)
	assert world.names(vec, qualified=False) == (
		"Vec<alloc::string::String>",
		"Vec<alloc::string::String>",
	)
	assert world.names(Ref(vec), qualified=False) == (
		"&Vec<alloc::string::String>",
		"ref$<Vec<alloc::string::String> >",
	)


def test_lifetimes_never_appear(world: World) -> None:
	vec = world.struct("alloc::vec::Vec", Lifetime("'a"), U8)
	assert world.names(vec) == ("alloc::vec::Vec<u8>", "alloc::vec::Vec<u8>")


def test_nested_generic_types_close_with_spaces_in_cpp(world: World) -> None:
	inner = world.struct("alloc::vec::Vec", U8)
	outer = world.struct("alloc::boxed::Box", inner)
	native, cpp = world.names(outer)
	assert native == "alloc::boxed::Box<alloc::vec::Vec<u8>>"
	assert cpp == "alloc::boxed::Box<alloc::vec::Vec<u8> >"


@pytest.mark.parametrize(
	"make",
	[
		lambda item: Infer(0),
		lambda item: Bound(0, 1),
		lambda item: Placeholder("T"),
		lambda item: Projection(item),
		lambda item: Opaque(item),
		lambda item: ErrorType(),
	],
)
def test_unrepresentable_types_raise(world: World, native, cpp, make) -> None:
	ty = make(world.items.ensure_path("app::Assoc"))
	for ctx in (native, cpp):
		with pytest.raises(UnrepresentableTypeError) as info:
			compute_type_name(ctx, ty)
		assert info.value.ty == ty
		assert repr(ty) in str(info.value)
		with pytest.raises(UnrepresentableTypeError):
			compute_type_name(ctx, Tuple((U8, ty)))


def test_non_descriptors_raise(native) -> None:
	with pytest.raises(UnrepresentableTypeError):
		compute_type_name(native, "u8")
	with pytest.raises(UnrepresentableTypeError):
		compute_type_name(native, Tuple((Lifetime(),)))

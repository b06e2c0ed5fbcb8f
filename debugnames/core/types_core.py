# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Type descriptors consumed by the debug-info name encoder.

Descriptors are frozen dataclasses so that equal types compare and hash equal;
the encoder relies on that for its recursion guard. The union is closed: the
kinds listed in `REPRESENTABLE_TYPES` are legal input, the kinds listed in
`UNREPRESENTABLE_TYPES` exist only so callers that leak unresolved types get a
precise diagnostic instead of a guess.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union

from debugnames.core.item_id import ClosureKind, ItemId


class Mutability(Enum):
	NOT = auto()
	MUT = auto()

	def prefix_str(self) -> str:
		"""Return the keyword prefix used after `&` (empty for shared refs)."""
		return "mut " if self is Mutability.MUT else ""


class IntTy(Enum):
	ISIZE = "isize"
	I8 = "i8"
	I16 = "i16"
	I32 = "i32"
	I64 = "i64"
	I128 = "i128"

	def name_str(self) -> str:
		return self.value

	def bit_width(self, word_bits: int) -> int:
		"""Return the storage width in bits (`isize` follows the target word size)."""
		if self is IntTy.ISIZE:
			return word_bits
		return int(self.value[1:])


class UintTy(Enum):
	USIZE = "usize"
	U8 = "u8"
	U16 = "u16"
	U32 = "u32"
	U64 = "u64"
	U128 = "u128"

	def name_str(self) -> str:
		return self.value

	def bit_width(self, word_bits: int) -> int:
		if self is UintTy.USIZE:
			return word_bits
		return int(self.value[1:])


class FloatTy(Enum):
	F32 = "f32"
	F64 = "f64"

	def name_str(self) -> str:
		return self.value


class AdtKind(Enum):
	STRUCT = auto()
	UNION = auto()
	ENUM = auto()


@dataclass(frozen=True)
class AdtDef:
	"""Definition of a struct/union/enum: identity, kind and variant names."""

	item: ItemId
	kind: AdtKind = AdtKind.STRUCT
	variants: tuple[str, ...] = ()

	def __post_init__(self) -> None:
		object.__setattr__(self, "variants", tuple(self.variants))

	@property
	def is_enum(self) -> bool:
		return self.kind is AdtKind.ENUM


def _freeze(obj: object, *names: str) -> None:
	# Callers may hand in lists; store tuples so descriptors stay hashable.
	for name in names:
		object.__setattr__(obj, name, tuple(getattr(obj, name)))


@dataclass(frozen=True)
class Ty:
	"""Base class of every type descriptor."""


@dataclass(frozen=True)
class Bool(Ty):
	pass


@dataclass(frozen=True)
class Char(Ty):
	pass


@dataclass(frozen=True)
class Str(Ty):
	pass


@dataclass(frozen=True)
class Never(Ty):
	pass


@dataclass(frozen=True)
class Int(Ty):
	int_ty: IntTy


@dataclass(frozen=True)
class Uint(Ty):
	uint_ty: UintTy


@dataclass(frozen=True)
class Float(Ty):
	float_ty: FloatTy


@dataclass(frozen=True)
class Foreign(Ty):
	item: ItemId


@dataclass(frozen=True)
class Adt(Ty):
	adt: AdtDef
	args: tuple["GenericArg", ...] = ()

	def __post_init__(self) -> None:
		_freeze(self, "args")


@dataclass(frozen=True)
class Tuple(Ty):
	elems: tuple[Ty, ...] = ()

	def __post_init__(self) -> None:
		_freeze(self, "elems")


@dataclass(frozen=True)
class RawPtr(Ty):
	inner: Ty
	mutbl: Mutability = Mutability.NOT


@dataclass(frozen=True)
class Ref(Ty):
	inner: Ty
	mutbl: Mutability = Mutability.NOT


@dataclass(frozen=True)
class Array(Ty):
	inner: Ty
	length: "Const"

	def __post_init__(self) -> None:
		if isinstance(self.length, int):
			object.__setattr__(self, "length", usize_const(self.length))


@dataclass(frozen=True)
class Slice(Ty):
	inner: Ty


@dataclass(frozen=True)
class ExistentialTraitRef:
	"""Principal trait of a trait object (`Self` already erased)."""

	item: ItemId
	args: tuple["GenericArg", ...] = ()

	def __post_init__(self) -> None:
		_freeze(self, "args")


@dataclass(frozen=True)
class ExistentialProjection:
	"""An associated-type equality bound, e.g. `Item=u8` in `dyn Iterator<Item=u8>`."""

	item: ItemId
	term: Ty


@dataclass(frozen=True)
class Dynamic(Ty):
	principal: ExistentialTraitRef | None = None
	projections: tuple[ExistentialProjection, ...] = ()
	auto_traits: tuple[ItemId, ...] = ()

	def __post_init__(self) -> None:
		_freeze(self, "projections", "auto_traits")


@dataclass(frozen=True)
class FnSig:
	inputs: tuple[Ty, ...] = ()
	output: Ty = field(default_factory=lambda: Tuple())
	c_variadic: bool = False
	unsafe: bool = False
	abi: str = "Rust"

	def __post_init__(self) -> None:
		_freeze(self, "inputs")


@dataclass(frozen=True)
class FnDef(Ty):
	"""A function item type; its signature comes from the signature service."""

	item: ItemId
	args: tuple["GenericArg", ...] = ()

	def __post_init__(self) -> None:
		_freeze(self, "args")


@dataclass(frozen=True)
class FnPtr(Ty):
	sig: FnSig


@dataclass(frozen=True)
class Closure(Ty):
	"""Closure, generator or async body; `args` include the enclosing fn's generics first."""

	item: ItemId
	args: tuple["GenericArg", ...] = ()
	kind: ClosureKind | None = None  # defaults to the kind recorded on the item's path segment

	def __post_init__(self) -> None:
		_freeze(self, "args")


@dataclass(frozen=True)
class Param(Ty):
	index: int
	name: str


# Kinds that must be resolved before debug info is generated.


@dataclass(frozen=True)
class Infer(Ty):
	var: int


@dataclass(frozen=True)
class Bound(Ty):
	debruijn: int
	var: int


@dataclass(frozen=True)
class Placeholder(Ty):
	name: str


@dataclass(frozen=True)
class Projection(Ty):
	item: ItemId
	args: tuple["GenericArg", ...] = ()

	def __post_init__(self) -> None:
		_freeze(self, "args")


@dataclass(frozen=True)
class Opaque(Ty):
	item: ItemId
	args: tuple["GenericArg", ...] = ()

	def __post_init__(self) -> None:
		_freeze(self, "args")


@dataclass(frozen=True)
class ErrorType(Ty):
	pass


REPRESENTABLE_TYPES = (
	Bool,
	Char,
	Str,
	Never,
	Int,
	Uint,
	Float,
	Foreign,
	Adt,
	Tuple,
	RawPtr,
	Ref,
	Array,
	Slice,
	Dynamic,
	FnDef,
	FnPtr,
	Closure,
	Param,
)
UNREPRESENTABLE_TYPES = (Infer, Bound, Placeholder, Projection, Opaque, ErrorType)


# Constant values.


@dataclass(frozen=True)
class ScalarValue:
	"""Raw bits of an evaluated scalar (unsigned two's-complement view)."""

	bits: int


@dataclass(frozen=True)
class ConstParamRef:
	index: int
	name: str


@dataclass(frozen=True)
class UnevaluatedValue:
	"""A constant that has not been reduced; `def_path` names its definition."""

	def_path: str
	args: tuple["GenericArg", ...] = ()

	def __post_init__(self) -> None:
		_freeze(self, "args")


ConstValue = Union[ScalarValue, ConstParamRef, UnevaluatedValue]


@dataclass(frozen=True)
class Const:
	ty: Ty
	value: ConstValue


@dataclass(frozen=True)
class Lifetime:
	"""A region argument. Regions are erased and never appear in debug names."""

	name: str = "'_"


GenericArg = Union[Ty, Const, Lifetime]


UNIT = Tuple()


def is_unit(ty: Ty) -> bool:
	return isinstance(ty, Tuple) and not ty.elems


def usize_const(value: int) -> Const:
	"""Build an evaluated `usize` constant (array lengths, const generics)."""
	return Const(ty=Uint(UintTy.USIZE), value=ScalarValue(value))


__all__ = [
	"Mutability",
	"IntTy",
	"UintTy",
	"FloatTy",
	"AdtKind",
	"AdtDef",
	"Ty",
	"Bool",
	"Char",
	"Str",
	"Never",
	"Int",
	"Uint",
	"Float",
	"Foreign",
	"Adt",
	"Tuple",
	"RawPtr",
	"Ref",
	"Array",
	"Slice",
	"ExistentialTraitRef",
	"ExistentialProjection",
	"Dynamic",
	"FnSig",
	"FnDef",
	"FnPtr",
	"Closure",
	"Param",
	"Infer",
	"Bound",
	"Placeholder",
	"Projection",
	"Opaque",
	"ErrorType",
	"REPRESENTABLE_TYPES",
	"UNREPRESENTABLE_TYPES",
	"ScalarValue",
	"ConstParamRef",
	"UnevaluatedValue",
	"ConstValue",
	"Const",
	"Lifetime",
	"GenericArg",
	"UNIT",
	"is_unit",
	"usize_const",
]

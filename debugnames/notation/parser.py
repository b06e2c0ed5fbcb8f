# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Parser for the compact type notation (see `grammar.lark`).

The notation is a convenience for tests and the CLI: it builds the same type
descriptors a compiler would hand to the encoder. Item paths must start with a
crate name (`alloc::vec::Vec`); unknown items are registered in the supplied
`SimpleItemTable` as structs, so enums have to be declared up front with
`SimpleItemTable.declare_enum`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedInput

from debugnames.core.layout import truncate
from debugnames.core.types_core import (
	UNIT,
	Adt,
	Array,
	Bool,
	Char,
	Const,
	ConstParamRef,
	Dynamic,
	ExistentialProjection,
	ExistentialTraitRef,
	Float,
	FloatTy,
	FnSig,
	FnPtr,
	GenericArg,
	Int,
	IntTy,
	Lifetime,
	Mutability,
	Never,
	Param,
	RawPtr,
	Ref,
	ScalarValue,
	Slice,
	Str,
	Tuple,
	Ty,
	Uint,
	UintTy,
	usize_const,
)
from debugnames.debuginfo.services_impl import SimpleItemTable

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	lexer="basic",
	start=["start", "trait_bound"],
	propagate_positions=True,
	maybe_placeholders=False,
)

DEFAULT_AUTO_TRAITS = frozenset({"Send", "Sync", "Unpin", "UnwindSafe", "RefUnwindSafe"})

_PRIMITIVES: Dict[str, Ty] = {
	"bool": Bool(),
	"char": Char(),
	"str": Str(),
	**{int_ty.value: Int(int_ty) for int_ty in IntTy},
	**{uint_ty.value: Uint(uint_ty) for uint_ty in UintTy},
	**{float_ty.value: Float(float_ty) for float_ty in FloatTy},
}

_CONST_INT_RE = re.compile(r"^(-?[0-9]+)([iu](?:8|16|32|64|128|size))?$")


class NotationParseError(ValueError):
	"""User-facing error for malformed or unresolvable type notation."""

	def __init__(self, message: str, *, line: int | None = None, column: int | None = None) -> None:
		if line is not None:
			message = f"{message} (line {line}, column {column})"
		super().__init__(message)
		self.line = line
		self.column = column


@dataclass
class _Scope:
	table: SimpleItemTable
	type_params: Dict[str, int] = field(default_factory=dict)
	const_params: Dict[str, int] = field(default_factory=dict)
	auto_traits: frozenset[str] = DEFAULT_AUTO_TRAITS
	word_bits: int = 64


def _name(node: Tree | Token) -> str:
	if isinstance(node, Tree):
		data = node.data
		if isinstance(data, Token):
			return data.value
		return data
	if isinstance(node, Token):
		return node.type
	return str(node)


def _subtrees(node: Tree) -> List[Tree]:
	return [child for child in node.children if isinstance(child, Tree)]


def _has_token(node: Tree, token_type: str) -> bool:
	return any(isinstance(child, Token) and child.type == token_type for child in node.children)


def _error(message: str, node: Tree | Token) -> NotationParseError:
	if isinstance(node, Token):
		return NotationParseError(message, line=node.line, column=node.column)
	meta = getattr(node, "meta", None)
	return NotationParseError(message, line=getattr(meta, "line", None), column=getattr(meta, "column", None))


def _parse(text: str, start: str) -> Tree:
	try:
		return _PARSER.parse(text, start=start)
	except UnexpectedInput as err:
		raise NotationParseError(
			f"invalid type notation {text!r}: unexpected input",
			line=getattr(err, "line", None),
			column=getattr(err, "column", None),
		) from err


def _make_scope(
	table: SimpleItemTable,
	type_params: Iterable[str],
	const_params: Iterable[str],
	auto_traits: Iterable[str],
	word_bits: int,
) -> _Scope:
	return _Scope(
		table=table,
		type_params={name: idx for idx, name in enumerate(type_params)},
		const_params={name: idx for idx, name in enumerate(const_params)},
		auto_traits=frozenset(auto_traits),
		word_bits=word_bits,
	)


def parse_type(
	text: str,
	table: SimpleItemTable,
	*,
	type_params: Iterable[str] = (),
	const_params: Iterable[str] = (),
	auto_traits: Iterable[str] = DEFAULT_AUTO_TRAITS,
	word_bits: int = 64,
) -> Ty:
	"""
	Parse `text` into a type descriptor.

	Bare names listed in `type_params` become `Param` types; names listed in
	`const_params` become const parameter references when used as generic
	arguments or array lengths. `auto_traits` lists trait names (last path
	segment) treated as auto traits in `dyn` bounds. `word_bits` sizes
	`isize`/`usize` when range-checking integer literals.
	"""
	scope = _make_scope(table, type_params, const_params, auto_traits, word_bits)
	return _build_type(_parse(text, "start"), scope)


def parse_trait_ref(
	text: str,
	table: SimpleItemTable,
	*,
	type_params: Iterable[str] = (),
	const_params: Iterable[str] = (),
	word_bits: int = 64,
) -> ExistentialTraitRef:
	"""Parse `path::Trait<Args>` into a trait reference (used for vtable names)."""
	scope = _make_scope(table, type_params, const_params, DEFAULT_AUTO_TRAITS, word_bits)
	tree = _parse(text, "trait_bound")
	trait_ref, projections = _build_trait_bound(tree, scope)
	if projections:
		raise _error("associated type bindings are not allowed in a trait reference", tree)
	return trait_ref


def _build_type(node: Tree, scope: _Scope) -> Ty:
	kind = _name(node)
	if kind == "never":
		return Never()
	if kind == "unit":
		return UNIT
	if kind == "tuple":
		return Tuple(tuple(_build_type(child, scope) for child in _subtrees(node)))
	if kind in {"raw_ptr", "ref"}:
		inner = _build_type(_subtrees(node)[0], scope)
		mutbl = Mutability.MUT if _has_token(node, "MUT") else Mutability.NOT
		return RawPtr(inner, mutbl) if kind == "raw_ptr" else Ref(inner, mutbl)
	if kind == "array":
		inner = _build_type(_subtrees(node)[0], scope)
		length_tok = node.children[-1]
		return Array(inner, _build_array_length(length_tok, scope))
	if kind == "slice":
		return Slice(_build_type(_subtrees(node)[0], scope))
	if kind == "dyn":
		return _build_dyn(node, scope)
	if kind == "fn_ptr":
		return _build_fn_ptr(node, scope)
	if kind == "path_type":
		return _build_path_type(node, scope)
	raise _error(f"unsupported type syntax: {kind}", node)


def _path_of(node: Tree) -> str:
	return "::".join(tok.value for tok in node.children if isinstance(tok, Token))


def _build_path_type(node: Tree, scope: _Scope) -> Ty:
	children = _subtrees(node)
	path_node = children[0]
	path = _path_of(path_node)
	args_node = children[1] if len(children) > 1 else None
	args = [_build_generic_arg(arg, scope) for arg in _subtrees(args_node)] if args_node is not None else []

	if "::" not in path:
		if args:
			raise _error(f"item path {path!r} must start with a crate name", path_node)
		if path in scope.type_params:
			return Param(index=scope.type_params[path], name=path)
		if path in _PRIMITIVES:
			return _PRIMITIVES[path]
		if path in scope.const_params:
			raise _error(f"const parameter {path!r} used as a type", path_node)
		raise _error(f"unknown type {path!r} (item paths must start with a crate name)", path_node)

	item = scope.table.lookup(path)
	adt = scope.table.adt_def(item) if item is not None else None
	if adt is None:
		adt = scope.table.declare_struct(path)
	return Adt(adt, tuple(args))


def _build_generic_arg(node: Tree, scope: _Scope) -> GenericArg:
	kind = _name(node)
	if kind == "const_arg":
		return _build_const_arg(node, scope)
	if kind == "lifetime":
		return Lifetime(node.children[0].value)
	if kind == "path_type" and len(node.children) == 1:
		name = _path_of(node.children[0])
		if name in scope.const_params:
			return _const_param(name, scope)
	return _build_type(node, scope)


def _const_param(name: str, scope: _Scope) -> Const:
	return Const(ty=Uint(UintTy.USIZE), value=ConstParamRef(index=scope.const_params[name], name=name))


def _build_const_arg(node: Tree, scope: _Scope) -> Const:
	tok = node.children[0]
	if tok.type == "TRUE":
		return Const(ty=Bool(), value=ScalarValue(1))
	if tok.type == "FALSE":
		return Const(ty=Bool(), value=ScalarValue(0))
	if tok.type == "NAME":
		if tok.value not in scope.const_params:
			raise _error(f"unknown const parameter {tok.value!r}", tok)
		return _const_param(tok.value, scope)
	return _build_int_const(tok, scope.word_bits)


def _build_int_const(tok: Token, word_bits: int) -> Const:
	match = _CONST_INT_RE.match(tok.value)
	if match is None:
		raise _error(f"invalid integer constant {tok.value!r}", tok)
	value = int(match.group(1))
	suffix = match.group(2) or "usize"
	if suffix.startswith("i"):
		ty: Ty = Int(IntTy(suffix))
	else:
		if value < 0:
			raise _error(f"negative constant {tok.value!r} needs a signed suffix", tok)
		ty = Uint(UintTy(suffix))
	low, high = _int_range(ty, word_bits)
	if not low <= value <= high:
		raise _error(f"constant {tok.value!r} does not fit in {suffix} ({low}..={high})", tok)
	# Raw two's-complement bits; the encoder sign-extends from the real width.
	return Const(ty=ty, value=ScalarValue(truncate(value, 128)))


def _int_range(ty: Int | Uint, word_bits: int) -> tuple[int, int]:
	if isinstance(ty, Int):
		bits = ty.int_ty.bit_width(word_bits)
		return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
	return 0, (1 << ty.uint_ty.bit_width(word_bits)) - 1


def _build_array_length(tok: Token, scope: _Scope) -> Const:
	if tok.type == "NAME":
		if tok.value not in scope.const_params:
			raise _error(f"unknown const parameter {tok.value!r} in array length", tok)
		return _const_param(tok.value, scope)
	length = _build_int_const(tok, scope.word_bits)
	if not isinstance(length.ty, Uint) or length.ty.uint_ty is not UintTy.USIZE:
		raise _error(f"array length {tok.value!r} must be a usize", tok)
	return usize_const(length.value.bits)


def _build_trait_bound(node: Tree, scope: _Scope) -> tuple[ExistentialTraitRef, List[ExistentialProjection]]:
	children = _subtrees(node)
	path = _path_of(children[0])
	if "::" not in path:
		raise _error(f"trait path {path!r} must start with a crate name", children[0])
	trait_item = scope.table.ensure_path(path)
	args: List[GenericArg] = []
	projections: List[ExistentialProjection] = []
	if len(children) > 1:
		for arg in _subtrees(children[1]):
			if _name(arg) == "assoc_binding":
				assoc_name = arg.children[0].value
				assoc_item = scope.table.add_item(trait_item, assoc_name)
				projections.append(ExistentialProjection(item=assoc_item, term=_build_type(_subtrees(arg)[0], scope)))
			else:
				args.append(_build_generic_arg(arg, scope))
	return ExistentialTraitRef(item=trait_item, args=tuple(args)), projections


def _build_dyn(node: Tree, scope: _Scope) -> Dynamic:
	principal: Optional[ExistentialTraitRef] = None
	projections: List[ExistentialProjection] = []
	auto_traits = []
	for idx, bound in enumerate(_subtrees(node)):
		trait_ref, bound_projections = _build_trait_bound(bound, scope)
		is_auto = _path_of(_subtrees(bound)[0]).rsplit("::", 1)[-1] in scope.auto_traits
		if is_auto and not trait_ref.args and not bound_projections:
			auto_traits.append(trait_ref.item)
			continue
		if idx != 0:
			raise _error("only auto traits can be used as additional trait-object bounds", bound)
		principal = trait_ref
		projections = bound_projections
	return Dynamic(principal=principal, projections=tuple(projections), auto_traits=tuple(auto_traits))


def _build_fn_ptr(node: Tree, scope: _Scope) -> FnPtr:
	abi = "Rust"
	inputs: List[Ty] = []
	output: Ty = UNIT
	c_variadic = False
	for child in _subtrees(node):
		kind = _name(child)
		if kind == "abi":
			abi = child.children[0].value[1:-1]
		elif kind == "fn_params":
			inputs = [_build_type(param, scope) for param in _subtrees(child)]
			c_variadic = _has_token(child, "VARIADIC")
		elif kind == "fn_ret":
			output = _build_type(_subtrees(child)[0], scope)
	sig = FnSig(inputs=tuple(inputs), output=output, c_variadic=c_variadic, unsafe=_has_token(node, "UNSAFE"), abi=abi)
	return FnPtr(sig)


__all__ = ["NotationParseError", "DEFAULT_AUTO_TRAITS", "parse_type", "parse_trait_ref"]

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Type names for debug info.

`compute_type_name` renders a type descriptor into the name stored in the
debug-info type record. Two dialects exist (see `context.Dialect`):

  native     (u8, &mut [i32])         dyn Iterator<Item=u8> + Send
  cpp-like   tuple$<u8,ref_mut$<...>>  dyn$<Iterator<assoc$<Item,u8> >,Send>

Things the C++-like dialect has to avoid because the MSVC debugger parses
names as C++ expressions:
  * `#` is a macro character.
  * `{` or `<` at the start of a name reads as an operator.
  * `>>` is always a right shift.
  * `[` in a name reads as a regex bracket expression.
  * `"` starts a string.

No caching: computing the same name twice does the work twice. The
`qualified` flag only applies to the outermost item; every nested type
argument is always fully qualified.
"""

from __future__ import annotations

import logging
from typing import List, Set

from debugnames.core.errors import DebugInfoBug, UnrepresentableTypeError
from debugnames.core.item_id import ClosureKind, DefKey
from debugnames.core.types_core import (
	UNREPRESENTABLE_TYPES,
	Adt,
	Array,
	Bool,
	Char,
	Closure,
	ConstParamRef,
	Dynamic,
	ExistentialProjection,
	Float,
	FnDef,
	FnPtr,
	Foreign,
	Int,
	Mutability,
	Never,
	Param,
	RawPtr,
	Ref,
	Slice,
	Str,
	Tuple,
	Ty,
	Uint,
	is_unit,
)
from debugnames.debuginfo import generic_params
from debugnames.debuginfo.context import DebugInfoContext
from debugnames.debuginfo.enum_fallback import push_enum_fallback
from debugnames.debuginfo.item_names import push_disambiguated_special_name, push_item_name, qualified_item_name
from debugnames.debuginfo.output import (
	NameBuffer,
	pop_arg_separator,
	pop_auto_trait_separator,
	push_arg_list,
	push_arg_separator,
	push_auto_trait_separator,
	push_close_angle_bracket,
)

logger = logging.getLogger(__name__)


def compute_type_name(ctx: DebugInfoContext, ty: Ty, qualified: bool = True) -> str:
	"""Compute the debug-info name of `ty` in the context's dialect."""
	logger.debug("debuginfo type name (%s) for %r", ctx.dialect.value, ty)
	output = NameBuffer()
	visited: Set[Ty] = set()
	push_type_name(ctx, ty, qualified, output, visited)
	name = output.getvalue()
	logger.debug("debuginfo type name: %s", name)
	return name


def push_type_name(ctx: DebugInfoContext, ty: Ty, qualified: bool, output: NameBuffer, visited: Set[Ty]) -> None:
	"""Append the name of `ty` to `output`. `visited` guards function-type recursion."""
	cpp_like = ctx.cpp_like

	if isinstance(ty, UNREPRESENTABLE_TYPES):
		raise UnrepresentableTypeError(ty)
	if isinstance(ty, Bool):
		output.push("bool")
	elif isinstance(ty, Char):
		output.push("char")
	elif isinstance(ty, Str):
		output.push("str")
	elif isinstance(ty, Never):
		output.push("never$" if cpp_like else "!")
	elif isinstance(ty, Int):
		output.push(ty.int_ty.name_str())
	elif isinstance(ty, Uint):
		output.push(ty.uint_ty.name_str())
	elif isinstance(ty, Float):
		output.push(ty.float_ty.name_str())
	elif isinstance(ty, Foreign):
		push_item_name(ctx, ty.item, qualified, output)
	elif isinstance(ty, Adt):
		if ty.adt.is_enum and cpp_like:
			push_enum_fallback(ctx, ty, output, visited)
		else:
			push_item_name(ctx, ty.adt.item, qualified, output)
			generic_params.push_generic_params_internal(ctx, ty.args, output, visited)
	elif isinstance(ty, Tuple):
		_push_tuple(ctx, ty, output, visited)
	elif isinstance(ty, RawPtr):
		_push_raw_ptr(ctx, ty, qualified, output, visited)
	elif isinstance(ty, Ref):
		_push_ref(ctx, ty, qualified, output, visited)
	elif isinstance(ty, Array):
		_push_array(ctx, ty, output, visited)
	elif isinstance(ty, Slice):
		output.push("slice$<" if cpp_like else "[")
		push_type_name(ctx, ty.inner, True, output, visited)
		if cpp_like:
			push_close_angle_bracket(cpp_like, output)
		else:
			output.push("]")
	elif isinstance(ty, Dynamic):
		_push_dynamic(ctx, ty, qualified, output, visited)
	elif isinstance(ty, (FnDef, FnPtr)):
		_push_fn(ctx, ty, output, visited)
	elif isinstance(ty, Closure):
		_push_closure(ctx, ty, qualified, output, visited)
	elif isinstance(ty, Param):
		# Type parameters surviving from polymorphic code.
		output.push(ty.name)
	else:
		raise UnrepresentableTypeError(ty)


def _push_tuple(ctx: DebugInfoContext, ty: Tuple, output: NameBuffer, visited: Set[Ty]) -> None:
	cpp_like = ctx.cpp_like
	output.push("tuple$<" if cpp_like else "(")
	for elem in ty.elems:
		push_type_name(ctx, elem, True, output, visited)
		push_arg_separator(cpp_like, output)
	if ty.elems:
		pop_arg_separator(output)
	if cpp_like:
		push_close_angle_bracket(cpp_like, output)
	else:
		output.push(")")


def _push_raw_ptr(ctx: DebugInfoContext, ty: RawPtr, qualified: bool, output: NameBuffer, visited: Set[Ty]) -> None:
	cpp_like = ctx.cpp_like
	if cpp_like:
		output.push("ptr_mut$<" if ty.mutbl is Mutability.MUT else "ptr_const$<")
	else:
		output.push("*mut " if ty.mutbl is Mutability.MUT else "*const ")
	push_type_name(ctx, ty.inner, qualified, output, visited)
	if cpp_like:
		push_close_angle_bracket(cpp_like, output)


def _push_ref(ctx: DebugInfoContext, ty: Ref, qualified: bool, output: NameBuffer, visited: Set[Ty]) -> None:
	cpp_like = ctx.cpp_like
	# Slices and `&str` are pointer-like to the MSVC visualizers already;
	# wrapping them in `ref$<>` stops WinDbg's natvis engine from showing them.
	is_slice_or_str = isinstance(ty.inner, (Slice, Str))
	wrapped = cpp_like and not is_slice_or_str
	if not cpp_like:
		output.push("&" + ty.mutbl.prefix_str())
	elif wrapped:
		output.push("ref_mut$<" if ty.mutbl is Mutability.MUT else "ref$<")
	push_type_name(ctx, ty.inner, qualified, output, visited)
	if wrapped:
		push_close_angle_bracket(cpp_like, output)


def _array_length(ctx: DebugInfoContext, ty: Array) -> str:
	length = ty.length
	if isinstance(length.value, ConstParamRef):
		return length.value.name
	bits = ctx.consts.try_eval_bits(length)
	if bits is None:
		raise DebugInfoBug(f"array length could not be evaluated: {length!r}")
	return str(bits)


def _push_array(ctx: DebugInfoContext, ty: Array, output: NameBuffer, visited: Set[Ty]) -> None:
	if ctx.cpp_like:
		output.push("array$<")
		push_type_name(ctx, ty.inner, True, output, visited)
		output.push(f",{_array_length(ctx, ty)}>")
	else:
		output.push("[")
		push_type_name(ctx, ty.inner, True, output, visited)
		output.push(f"; {_array_length(ctx, ty)}]")


def _projection_piece(ctx: DebugInfoContext, bound: ExistentialProjection, visited: Set[Ty]) -> str:
	cpp_like = ctx.cpp_like
	piece = NameBuffer()
	if cpp_like:
		piece.push("assoc$<")
		push_item_name(ctx, bound.item, False, piece)
		push_arg_separator(cpp_like, piece)
		push_type_name(ctx, bound.term, True, piece, visited)
		push_close_angle_bracket(cpp_like, piece)
	else:
		push_item_name(ctx, bound.item, False, piece)
		piece.push("=")
		push_type_name(ctx, bound.term, True, piece, visited)
	return piece.getvalue()


def _push_dynamic(ctx: DebugInfoContext, ty: Dynamic, qualified: bool, output: NameBuffer, visited: Set[Ty]) -> None:
	cpp_like = ctx.cpp_like
	auto_traits = ty.auto_traits
	trait_count = (1 if ty.principal is not None else 0) + len(auto_traits)

	# More than one trait needs parens to stay unambiguous, e.g. `&(dyn A + Send)`.
	has_enclosing_parens = not cpp_like and bool(auto_traits) and trait_count > 1
	if cpp_like:
		output.push("dyn$<")
	elif has_enclosing_parens:
		output.push("(dyn ")
	else:
		output.push("dyn ")

	if ty.principal is not None:
		push_item_name(ctx, ty.principal.item, qualified, output)
		# Principal generics and projection bounds share one argument list.
		pieces: List[str] = generic_params.generic_arg_pieces(ctx, ty.principal.args, visited)
		pieces.extend(_projection_piece(ctx, bound, visited) for bound in ty.projections)
		push_arg_list(cpp_like, pieces, output)
		if auto_traits:
			push_auto_trait_separator(cpp_like, output)
	elif ty.projections:
		raise DebugInfoBug(f"projection bounds without a principal trait: {ty!r}")

	if auto_traits:
		for name in sorted(qualified_item_name(ctx, item, True) for item in auto_traits):
			output.push(name)
			push_auto_trait_separator(cpp_like, output)
		pop_auto_trait_separator(output)

	if cpp_like:
		push_close_angle_bracket(cpp_like, output)
	elif has_enclosing_parens:
		output.push(")")


def _push_fn(ctx: DebugInfoContext, ty: FnDef | FnPtr, output: NameBuffer, visited: Set[Ty]) -> None:
	cpp_like = ctx.cpp_like
	# A function type can name itself through its own signature, e.g. a fn
	# returning an opaque type that resolves to the fn itself. There is no
	# sensible name for that, so emit a marker that makes the oddity obvious.
	if ty in visited:
		output.push("recursive_type$" if cpp_like else "<recursive_type>")
		return
	visited.add(ty)

	sig = ty.sig if isinstance(ty, FnPtr) else ctx.fn_sigs.fn_sig(ty)

	if cpp_like:
		# C++ function pointer: `ret (*)(params...)`
		if is_unit(sig.output):
			output.push("void")
		else:
			push_type_name(ctx, sig.output, True, output, visited)
		output.push(" (*)(")
	else:
		if sig.unsafe:
			output.push("unsafe ")
		if sig.abi != "Rust":
			output.push(f'extern "{sig.abi}" ')
		output.push("fn(")

	if sig.inputs:
		for param in sig.inputs:
			push_type_name(ctx, param, True, output, visited)
			push_arg_separator(cpp_like, output)
		pop_arg_separator(output)

	if sig.c_variadic:
		output.push(", ..." if sig.inputs else "...")

	output.push(")")

	if not cpp_like and not is_unit(sig.output):
		output.push(" -> ")
		push_type_name(ctx, sig.output, True, output, visited)

	# Only the active call stack is guarded: the same fn type may appear
	# several times in one name, e.g. `Pair<fn() -> u8, fn() -> u8>`.
	visited.remove(ty)


def _closure_kind(ty: Closure, key: DefKey) -> ClosureKind:
	declared = key.segment.closure_kind
	if ty.kind is not None and declared is not None and ty.kind is not declared:
		raise DebugInfoBug(f"closure kind {ty.kind.label} disagrees with its item ({declared.label}): {ty!r}")
	return ty.kind or declared or ClosureKind.CLOSURE


def _push_closure(ctx: DebugInfoContext, ty: Closure, qualified: bool, output: NameBuffer, visited: Set[Ty]) -> None:
	# `{closure_env#0}<T1, T2>`, `{async_fn_env#0}<T>`, ...
	key = ctx.items.def_key(ty.item)
	if qualified:
		if key.parent is None:
			raise DebugInfoBug(f"closure-like item without a parent: {ty!r}")
		push_item_name(ctx, key.parent, True, output)
		output.push("::")

	kind = _closure_kind(ty, key)
	push_disambiguated_special_name(f"{kind.label}_env", key.segment.disambiguator, ctx.cpp_like, output)

	# Only the enclosing fn's own generics make the name unique per
	# instantiation; drop closure-specific trailing arguments.
	root = ctx.items.typeck_root(ty.item)
	args = ty.args[: ctx.items.generics_count(root)]
	generic_params.push_generic_params_internal(ctx, args, output, visited)


__all__ = ["compute_type_name", "push_type_name"]

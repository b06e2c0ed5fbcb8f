# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Generic argument lists: `<T, U, 3>` (native) or `<T,U,3>` (C++-like)."""

from __future__ import annotations

import logging
from typing import Iterable, List, Set

from debugnames.core.errors import UnrepresentableTypeError
from debugnames.core.types_core import Const, GenericArg, Lifetime, Ty
from debugnames.debuginfo import type_names
from debugnames.debuginfo.const_params import push_const_param
from debugnames.debuginfo.context import DebugInfoContext
from debugnames.debuginfo.output import NameBuffer, push_arg_list

logger = logging.getLogger(__name__)


def non_erasable_generics(args: Iterable[GenericArg]) -> List[Ty | Const]:
	"""Drop lifetimes: they never show up in debug-info names."""
	return [arg for arg in args if not isinstance(arg, Lifetime)]


def generic_arg_pieces(ctx: DebugInfoContext, args: Iterable[GenericArg], visited: Set[Ty]) -> List[str]:
	"""Render every non-erased argument on its own, fully qualified."""
	pieces: List[str] = []
	for arg in non_erasable_generics(args):
		piece = NameBuffer()
		if isinstance(arg, Const):
			push_const_param(ctx, arg, piece)
		elif isinstance(arg, Ty):
			type_names.push_type_name(ctx, arg, True, piece, visited)
		else:
			raise UnrepresentableTypeError(arg, what="generic argument")
		pieces.append(piece.getvalue())
	return pieces


def push_generic_params_internal(
	ctx: DebugInfoContext,
	args: Iterable[GenericArg],
	output: NameBuffer,
	visited: Set[Ty],
) -> bool:
	"""Append the argument list; return False (emitting nothing) if it is empty."""
	return push_arg_list(ctx.cpp_like, generic_arg_pieces(ctx, args, visited), output)


def push_generic_params(ctx: DebugInfoContext, args: Iterable[GenericArg], output: NameBuffer) -> None:
	"""Append-only entry point for callers composing larger names."""
	visited: Set[Ty] = set()
	push_generic_params_internal(ctx, args, output, visited)


def compute_generic_params(ctx: DebugInfoContext, args: Iterable[GenericArg]) -> str:
	output = NameBuffer()
	push_generic_params(ctx, args, output)
	name = output.getvalue()
	logger.debug("debuginfo generic params (%s): %s", ctx.dialect.value, name)
	return name


__all__ = [
	"non_erasable_generics",
	"generic_arg_pieces",
	"push_generic_params_internal",
	"push_generic_params",
	"compute_generic_params",
]

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
debugnames.debuginfo: dialect-aware debug-info names for types and vtables.

Public entry points:
  - compute_type_name(ctx, ty, qualified=True)
  - compute_generic_params(ctx, args) / push_generic_params(ctx, args, output)
  - compute_vtable_name(ctx, ty, trait_ref, kind)
  - qualified_item_name(ctx, item, qualified=True)
  - cpp_like_debuginfo(ctx)

`DebugInfoContext` carries the dialect and the compiler services
(`services.ItemResolver`, `LayoutProvider`, `ConstEvaluator`, `FnSigProvider`).
"""

from debugnames.debuginfo.type_names import compute_type_name, push_type_name
from debugnames.debuginfo.generic_params import compute_generic_params, push_generic_params
from debugnames.debuginfo.vtable_names import VTableNameKind, compute_vtable_name
from debugnames.debuginfo.item_names import qualified_item_name
from debugnames.debuginfo.context import (
	DebugInfoContext,
	DebugInfoTarget,
	Dialect,
	cpp_like_debuginfo,
	host_word_bits,
)
from debugnames.debuginfo.output import NameBuffer

__all__ = [
	"compute_type_name",
	"push_type_name",
	"compute_generic_params",
	"push_generic_params",
	"VTableNameKind",
	"compute_vtable_name",
	"qualified_item_name",
	"DebugInfoContext",
	"DebugInfoTarget",
	"Dialect",
	"cpp_like_debuginfo",
	"host_word_bits",
	"NameBuffer",
]

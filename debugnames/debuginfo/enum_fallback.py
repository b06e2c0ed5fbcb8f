# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
C++-like names for enums.

MSVC debuggers cannot read Rust enum debug info directly; the .natvis
visualizers recover the active variant from the raw bytes instead. To do that
they need the layout facts encoded in the type name itself:

  enum$<path::Enum<Args>, Variant>                   single-variant layout
  enum$<path::Enum<Args>, min, max, DatafulVariant>  niche layout

`min`/`max` bound the dataful variant's valid niche values, truncated to the
tag's storage width. Any value outside that range selects another variant.
Directly tagged enums carry no extra information.
"""

from __future__ import annotations

from typing import Set

from debugnames.core.errors import DebugInfoBug
from debugnames.core.layout import NicheTag, SingleVariant, truncate
from debugnames.core.types_core import Adt, Ty
from debugnames.debuginfo import generic_params
from debugnames.debuginfo.context import DebugInfoContext
from debugnames.debuginfo.item_names import push_item_name
from debugnames.debuginfo.output import NameBuffer, push_close_angle_bracket


def _variant_name(ty: Adt, index: int) -> str:
	variants = ty.adt.variants
	if not 0 <= index < len(variants):
		raise DebugInfoBug(f"variant index {index} out of range for {ty!r}")
	return variants[index]


def push_enum_fallback(ctx: DebugInfoContext, ty: Adt, output: NameBuffer, visited: Set[Ty]) -> None:
	layout = ctx.layouts.enum_layout(ty)

	output.push("enum$<")
	push_item_name(ctx, ty.adt.item, True, output)
	generic_params.push_generic_params_internal(ctx, ty.args, output, visited)

	if isinstance(layout, NicheTag):
		low = truncate(layout.valid_range.start, layout.tag_bits)
		high = truncate(layout.valid_range.end, layout.tag_bits)
		dataful = _variant_name(ty, layout.dataful_variant)
		output.push(f", {low}, {high}, {dataful}")
	elif isinstance(layout, SingleVariant):
		# Uninhabited enums are never inspected; no variant to name.
		if ty.adt.variants:
			output.push(f", {_variant_name(ty, layout.index)}")

	push_close_angle_bracket(True, output)


__all__ = ["push_enum_fallback"]

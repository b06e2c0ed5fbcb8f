# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Qualified item names built from the item resolver's def-path data."""

from __future__ import annotations

from debugnames.core.item_id import ClosureKind, ItemId, PathSegment, SegmentKind
from debugnames.debuginfo.context import DebugInfoContext
from debugnames.debuginfo.output import NameBuffer


def push_disambiguated_special_name(label: str, disambiguator: int, cpp_like: bool, output: NameBuffer) -> None:
	"""Render a compiler-synthesized segment: `{label#N}` or, C++-like, `label$N`."""
	if cpp_like:
		output.push(f"{label}${disambiguator}")
	else:
		output.push(f"{{{label}#{disambiguator}}}")


def push_item_name(ctx: DebugInfoContext, item: ItemId, qualified: bool, output: NameBuffer) -> None:
	key = ctx.items.def_key(item)
	if qualified and key.parent is not None:
		push_item_name(ctx, key.parent, True, output)
		output.push("::")
	push_unqualified_item_name(ctx, item, key.segment, output)


def push_unqualified_item_name(ctx: DebugInfoContext, item: ItemId, segment: PathSegment, output: NameBuffer) -> None:
	if segment.kind is SegmentKind.CRATE_ROOT:
		output.push(ctx.items.crate_name(item))
	elif segment.kind is SegmentKind.CLOSURE:
		kind = segment.closure_kind or ClosureKind.CLOSURE
		push_disambiguated_special_name(kind.label, segment.disambiguator, ctx.cpp_like, output)
	elif segment.kind is SegmentKind.ANON:
		push_disambiguated_special_name(segment.name, segment.disambiguator, ctx.cpp_like, output)
	else:
		output.push(segment.name)


def qualified_item_name(ctx: DebugInfoContext, item: ItemId, qualified: bool = True) -> str:
	output = NameBuffer()
	push_item_name(ctx, item, qualified, output)
	return output.getvalue()


__all__ = [
	"push_disambiguated_special_name",
	"push_item_name",
	"push_unqualified_item_name",
	"qualified_item_name",
]

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Names for vtable globals and vtable types.

  <path::to::SomeType as path::to::SomeTrait>::{vtable}
  impl$<path::to::SomeType, path::to::SomeTrait>::vtable$     (C++-like)

The type of the global gets `{vtable_type}` / `vtable_type$` instead so that
the type and the variable never share a name. Vtables without a principal
trait use `_` in the trait slot.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Set

from debugnames.core.types_core import ExistentialTraitRef, Ty
from debugnames.debuginfo.context import DebugInfoContext
from debugnames.debuginfo.generic_params import push_generic_params_internal
from debugnames.debuginfo.item_names import push_item_name
from debugnames.debuginfo.output import NameBuffer, push_close_angle_bracket
from debugnames.debuginfo.type_names import push_type_name

logger = logging.getLogger(__name__)


class VTableNameKind(Enum):
	GLOBAL_VARIABLE = auto()  # the const/static holding the vtable
	TYPE = auto()  # the type of that const/static


_SUFFIXES = {
	(True, VTableNameKind.GLOBAL_VARIABLE): "::vtable$",
	(False, VTableNameKind.GLOBAL_VARIABLE): "::{vtable}",
	(True, VTableNameKind.TYPE): "::vtable_type$",
	(False, VTableNameKind.TYPE): "::{vtable_type}",
}


def compute_vtable_name(
	ctx: DebugInfoContext,
	ty: Ty,
	trait_ref: ExistentialTraitRef | None,
	kind: VTableNameKind,
) -> str:
	cpp_like = ctx.cpp_like
	output = NameBuffer()
	output.push("impl$<" if cpp_like else "<")

	visited: Set[Ty] = set()
	push_type_name(ctx, ty, True, output, visited)

	output.push(", " if cpp_like else " as ")

	if trait_ref is not None:
		push_item_name(ctx, trait_ref.item, True, output)
		visited.clear()
		push_generic_params_internal(ctx, trait_ref.args, output, visited)
	else:
		output.push("_")

	push_close_angle_bracket(cpp_like, output)
	output.push(_SUFFIXES[(cpp_like, kind)])

	name = output.getvalue()
	logger.debug("debuginfo vtable name (%s, %s): %s", ctx.dialect.value, kind.name, name)
	return name


__all__ = ["VTableNameKind", "compute_vtable_name"]

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Service protocols the debug-info name encoder consumes.

The encoder never owns type, layout or path data: the compiler provides it
through these narrow, read-only interfaces. `services_impl` holds simple
in-memory implementations used by tests and the CLI.
"""

from __future__ import annotations

from typing import Protocol

from debugnames.core.item_id import DefKey, ItemId
from debugnames.core.layout import EnumLayout
from debugnames.core.types_core import Adt, Const, FnDef, FnSig


class ItemResolver(Protocol):
	"""Def-path metadata for item identities."""

	def def_key(self, item: ItemId) -> DefKey:
		"""Return the parent link and own segment of `item`."""
		...

	def crate_name(self, item: ItemId) -> str:
		"""Return the name of the crate `item` belongs to."""
		...

	def generics_count(self, item: ItemId) -> int:
		"""
		Return the number of generic parameters declared by `item`, including
		the ones inherited from its parents (impl/trait generics).
		"""
		...

	def typeck_root(self, item: ItemId) -> ItemId:
		"""Return the enclosing function for closures; `item` itself otherwise."""
		...


class LayoutProvider(Protocol):
	def enum_layout(self, ty: Adt) -> EnumLayout:
		"""Return the variant layout of a fully substituted enum type."""
		...


class ConstEvaluator(Protocol):
	def try_eval_bits(self, ct: Const) -> int | None:
		"""Return the raw bits of `ct`, or None when it cannot be reduced to a scalar."""
		...

	def stable_hash(self, ct: Const) -> int:
		"""Return a deterministic 64-bit hash of the constant's defining data."""
		...


class FnSigProvider(Protocol):
	def fn_sig(self, ty: FnDef) -> FnSig:
		"""Return the normalized signature of a function item type."""
		...


__all__ = ["ItemResolver", "LayoutProvider", "ConstEvaluator", "FnSigProvider"]

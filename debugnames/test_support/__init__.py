# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Shared helpers for tests that need an encoder context.

`World` bundles the in-memory services so a test can declare crates, items,
layouts and signatures, then ask for a context in either dialect without
re-spelling the service wiring each time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from debugnames.core.types_core import Adt, AdtDef, GenericArg, Ty
from debugnames.debuginfo import DebugInfoContext, DebugInfoTarget, Dialect, compute_type_name
from debugnames.debuginfo.services_impl import (
	SimpleConstEvaluator,
	SimpleFnSigTable,
	SimpleItemTable,
	SimpleLayoutTable,
)
from debugnames.notation import parse_type


@dataclass
class World:
	items: SimpleItemTable = field(default_factory=SimpleItemTable)
	layouts: SimpleLayoutTable = field(default_factory=SimpleLayoutTable)
	consts: SimpleConstEvaluator = field(default_factory=SimpleConstEvaluator)
	fn_sigs: SimpleFnSigTable = field(default_factory=SimpleFnSigTable)
	word_bits: int = 64

	def ctx(self, dialect: Dialect) -> DebugInfoContext:
		"""Build a context for `dialect` over this world's services."""
		return DebugInfoContext(
			items=self.items,
			layouts=self.layouts,
			consts=self.consts,
			fn_sigs=self.fn_sigs,
			target=DebugInfoTarget(word_bits=self.word_bits),
			dialect=dialect,
		)

	def struct(self, path: str, *args: GenericArg, generics: int = 0) -> Adt:
		"""Declare (or reuse) a struct at `path` and instantiate it with `args`."""
		item = self.items.lookup(path)
		adt = self.items.adt_def(item) if item is not None else None
		if adt is None:
			adt = self.items.declare_struct(path, generics=generics)
		return Adt(adt, tuple(args))

	def enum(self, path: str, variants: Iterable[str], *, generics: int = 0) -> AdtDef:
		return self.items.declare_enum(path, variants, generics=generics)

	def parse(self, text: str, **kwargs) -> Ty:
		kwargs.setdefault("word_bits", self.word_bits)
		return parse_type(text, self.items, **kwargs)

	def names(self, ty: Ty, *, qualified: bool = True) -> tuple[str, str]:
		"""Return `(native, cpp_like)` names of `ty`."""
		return (
			compute_type_name(self.ctx(Dialect.NATIVE), ty, qualified),
			compute_type_name(self.ctx(Dialect.CPP_LIKE), ty, qualified),
		)


def bracket_depths_balanced(name: str) -> bool:
	"""
	Check `<>`/`()`/`[]` balance of a rendered name.

	`->` is a return arrow, not a closing bracket, and is skipped.
	"""
	pairs = {")": "(", ">": "<", "]": "["}
	stack: list[str] = []
	prev = ""
	for ch in name:
		if ch in "(<[":
			stack.append(ch)
		elif ch in pairs and not (ch == ">" and prev == "-"):
			if not stack or stack.pop() != pairs[ch]:
				return False
		prev = ch
	return not stack


__all__ = ["World", "bracket_depths_balanced"]

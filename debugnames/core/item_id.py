# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


@dataclass(frozen=True)
class ItemId:
	"""
Stable identity for a definition (type, trait, function, closure, module...).

`krate` selects the compilation unit; `index` is opaque within it. The item
resolver service owns the mapping from ids to def-path data.
"""

	krate: int
	index: int


class ClosureKind(Enum):
	"""Flavour of a closure-like definition; the value is its debug-name label."""

	CLOSURE = "closure"
	GENERATOR = "generator"
	ASYNC_BLOCK = "async_block"
	ASYNC_CLOSURE = "async_closure"
	ASYNC_FN = "async_fn"

	@property
	def label(self) -> str:
		return self.value


class SegmentKind(Enum):
	NAMED = auto()
	CRATE_ROOT = auto()
	ANON = auto()  # `name` holds the namespace label (impl, use, constant, ...)
	CLOSURE = auto()


@dataclass(frozen=True)
class PathSegment:
	"""One def-path segment: what a single item contributes to a qualified name."""

	kind: SegmentKind
	name: str = ""
	disambiguator: int = 0
	closure_kind: ClosureKind | None = None  # only meaningful for SegmentKind.CLOSURE


@dataclass(frozen=True)
class DefKey:
	"""Parent link plus the item's own segment (`parent` is None for crate roots)."""

	parent: ItemId | None
	segment: PathSegment


__all__ = ["ItemId", "ClosureKind", "SegmentKind", "PathSegment", "DefKey"]

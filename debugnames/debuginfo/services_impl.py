# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Simple in-memory implementations of the encoder service protocols.

These are **not** a compiler. They let tests, the notation parser and the CLI
describe a small world of crates/items/layouts by hand and hand it to the
encoder through the same interfaces a real compiler session would provide.
"""

from __future__ import annotations

from typing import Dict, Iterable, Tuple

from debugnames.core.item_id import ClosureKind, DefKey, ItemId, PathSegment, SegmentKind
from debugnames.core.layout import DirectTag, EnumLayout, SingleVariant, tag_bits_for
from debugnames.core.stable_hash import stable_hash
from debugnames.core.types_core import Adt, AdtDef, AdtKind, Const, FnDef, FnSig, ScalarValue
from debugnames.debuginfo.services import ConstEvaluator, FnSigProvider, ItemResolver, LayoutProvider


class SimpleItemTable(ItemResolver):
	"""
	Registry of crates and items with parent links.

	Items are created through `add_*` helpers; `ensure_path` builds a whole
	`crate::module::Item` chain of named segments at once. Disambiguators for
	anonymous scopes and closures are assigned per parent in creation order.
	"""

	def __init__(self) -> None:
		self._keys: Dict[ItemId, DefKey] = {}
		self._crate_names: Dict[int, str] = {}
		self._crates_by_name: Dict[str, int] = {}
		self._generics: Dict[ItemId, int] = {}
		self._children: Dict[Tuple[ItemId, str], ItemId] = {}
		self._next_index: Dict[int, int] = {}
		self._disambiguators: Dict[Tuple[ItemId, SegmentKind, str], int] = {}
		self._adts: Dict[ItemId, AdtDef] = {}

	def _add(self, krate: int, parent: ItemId | None, segment: PathSegment) -> ItemId:
		index = self._next_index.get(krate, 0)
		self._next_index[krate] = index + 1
		item = ItemId(krate=krate, index=index)
		self._keys[item] = DefKey(parent=parent, segment=segment)
		return item

	def _next_disambiguator(self, parent: ItemId, kind: SegmentKind, label: str) -> int:
		key = (parent, kind, label)
		value = self._disambiguators.get(key, 0)
		self._disambiguators[key] = value + 1
		return value

	def add_crate(self, name: str) -> ItemId:
		"""Register a crate and return its root item (returns the existing root on repeat)."""
		if name in self._crates_by_name:
			return ItemId(krate=self._crates_by_name[name], index=0)
		krate = len(self._crate_names)
		self._crate_names[krate] = name
		self._crates_by_name[name] = krate
		return self._add(krate, None, PathSegment(kind=SegmentKind.CRATE_ROOT))

	def add_item(self, parent: ItemId, name: str, *, generics: int = 0) -> ItemId:
		"""Register (or fetch) the named child `name` of `parent`."""
		existing = self._children.get((parent, name))
		if existing is not None:
			if generics:
				self._generics[existing] = generics
			return existing
		item = self._add(parent.krate, parent, PathSegment(kind=SegmentKind.NAMED, name=name))
		self._children[(parent, name)] = item
		if generics:
			self._generics[item] = generics
		return item

	def add_anon(self, parent: ItemId, namespace: str) -> ItemId:
		"""Register an anonymous scope such as an `impl` block under `parent`."""
		disambiguator = self._next_disambiguator(parent, SegmentKind.ANON, namespace)
		segment = PathSegment(kind=SegmentKind.ANON, name=namespace, disambiguator=disambiguator)
		return self._add(parent.krate, parent, segment)

	def add_closure(self, parent: ItemId, kind: ClosureKind = ClosureKind.CLOSURE) -> ItemId:
		"""Register a closure-like body defined inside `parent`."""
		disambiguator = self._next_disambiguator(parent, SegmentKind.CLOSURE, "")
		segment = PathSegment(kind=SegmentKind.CLOSURE, disambiguator=disambiguator, closure_kind=kind)
		return self._add(parent.krate, parent, segment)

	def ensure_path(self, path: str, *, generics: int = 0) -> ItemId:
		"""
		Return the item for a `crate::a::b` path, creating missing segments.

		The first segment always names a crate. `generics` applies to the last
		segment only.
		"""
		parts = path.split("::")
		if not parts or any(not part for part in parts):
			raise ValueError(f"invalid item path: {path!r}")
		item = self.add_crate(parts[0])
		for part in parts[1:]:
			item = self.add_item(item, part)
		if generics:
			self._generics[item] = generics
		return item

	def lookup(self, path: str) -> ItemId | None:
		parts = path.split("::")
		krate = self._crates_by_name.get(parts[0])
		if krate is None:
			return None
		item = ItemId(krate=krate, index=0)
		for part in parts[1:]:
			child = self._children.get((item, part))
			if child is None:
				return None
			item = child
		return item

	def set_generics_count(self, item: ItemId, count: int) -> None:
		self._generics[item] = count

	def declare_struct(self, path: str, *, generics: int = 0) -> AdtDef:
		item = self.ensure_path(path, generics=generics)
		adt = AdtDef(item=item, kind=AdtKind.STRUCT)
		self._adts[item] = adt
		return adt

	def declare_enum(self, path: str, variants: Iterable[str], *, generics: int = 0) -> AdtDef:
		item = self.ensure_path(path, generics=generics)
		adt = AdtDef(item=item, kind=AdtKind.ENUM, variants=tuple(variants))
		self._adts[item] = adt
		return adt

	def adt_def(self, item: ItemId) -> AdtDef | None:
		"""Return the ADT declared for `item`, if any."""
		return self._adts.get(item)

	# ItemResolver

	def def_key(self, item: ItemId) -> DefKey:
		try:
			return self._keys[item]
		except KeyError:
			raise KeyError(f"unknown item {item!r}") from None

	def crate_name(self, item: ItemId) -> str:
		return self._crate_names[item.krate]

	def generics_count(self, item: ItemId) -> int:
		return self._generics.get(item, 0)

	def typeck_root(self, item: ItemId) -> ItemId:
		key = self.def_key(item)
		while key.segment.kind is SegmentKind.CLOSURE and key.parent is not None:
			item = key.parent
			key = self.def_key(item)
		return item


class SimpleLayoutTable(LayoutProvider):
	"""
	Explicit enum layouts keyed by type (or by ADT for all instantiations).

	Enums without an explicit entry get the layout a compiler would pick
	without niche optimisation: single variant for zero/one variants, a
	directly stored tag otherwise.
	"""

	def __init__(self) -> None:
		self._by_type: Dict[Adt, EnumLayout] = {}
		self._by_adt: Dict[AdtDef, EnumLayout] = {}

	def set_layout(self, key: Adt | AdtDef, layout: EnumLayout) -> None:
		if isinstance(key, Adt):
			self._by_type[key] = layout
		else:
			self._by_adt[key] = layout

	def enum_layout(self, ty: Adt) -> EnumLayout:
		if ty in self._by_type:
			return self._by_type[ty]
		if ty.adt in self._by_adt:
			return self._by_adt[ty.adt]
		if len(ty.adt.variants) <= 1:
			return SingleVariant(index=0)
		return DirectTag(tag_bits=tag_bits_for(len(ty.adt.variants)))


class SimpleFnSigTable(FnSigProvider):
	"""Signatures for function item types, keyed by exact type or by item."""

	def __init__(self) -> None:
		self._by_type: Dict[FnDef, FnSig] = {}
		self._by_item: Dict[ItemId, FnSig] = {}

	def set_sig(self, key: FnDef | ItemId, sig: FnSig) -> None:
		if isinstance(key, FnDef):
			self._by_type[key] = sig
		else:
			self._by_item[key] = sig

	def fn_sig(self, ty: FnDef) -> FnSig:
		if ty in self._by_type:
			return self._by_type[ty]
		if ty.item in self._by_item:
			return self._by_item[ty.item]
		raise KeyError(f"no signature registered for {ty!r}")


class SimpleConstEvaluator(ConstEvaluator):
	"""
	Reads `ScalarValue` bits directly; unevaluated constants resolve only if a
	value was registered for them with `set_value`.
	"""

	def __init__(self) -> None:
		self._values: Dict[object, int] = {}

	def set_value(self, value: object, bits: int) -> None:
		self._values[value] = bits

	def try_eval_bits(self, ct: Const) -> int | None:
		if isinstance(ct.value, ScalarValue):
			return ct.value.bits
		return self._values.get(ct.value)

	def stable_hash(self, ct: Const) -> int:
		# Only the value's defining data participates, like a def-path hash.
		return stable_hash(ct.value)


__all__ = [
	"SimpleItemTable",
	"SimpleLayoutTable",
	"SimpleFnSigTable",
	"SimpleConstEvaluator",
]

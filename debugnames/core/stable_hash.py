# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Structural hashing of descriptor values.

`StableHasher` serializes values into a canonical, self-delimiting byte stream
(type tag + length-prefixed payload) and hashes it with xxHash64. Frozen
dataclasses are walked field by field in declaration order, enums by their
class and member name, so the result only depends on the value itself.
"""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import List

from debugnames.core.xxhash64 import hash64


class StableHasher:
	def __init__(self) -> None:
		self._chunks: List[bytes] = []

	def _write_tagged(self, tag: bytes, payload: bytes) -> None:
		self._chunks.append(tag + len(payload).to_bytes(4, "little") + payload)

	def write_str(self, value: str) -> None:
		self._write_tagged(b"s", value.encode("utf-8"))

	def write_int(self, value: int) -> None:
		# Signed, minimal-width, so arbitrary precision ints stay distinct.
		width = max(1, (value.bit_length() + 8) // 8)
		self._write_tagged(b"i", value.to_bytes(width, "little", signed=True))

	def write(self, value: object) -> None:
		"""Feed an arbitrary descriptor value (dataclass, enum, tuple, scalar)."""
		if value is None:
			self._write_tagged(b"n", b"")
		elif isinstance(value, bool):
			self._write_tagged(b"b", b"\x01" if value else b"\x00")
		elif isinstance(value, int):
			self.write_int(value)
		elif isinstance(value, str):
			self.write_str(value)
		elif isinstance(value, Enum):
			self.write_str(f"{type(value).__name__}.{value.name}")
		elif isinstance(value, (tuple, list)):
			self._write_tagged(b"t", len(value).to_bytes(4, "little"))
			for item in value:
				self.write(item)
		elif dataclasses.is_dataclass(value) and not isinstance(value, type):
			self.write_str(type(value).__name__)
			for f in dataclasses.fields(value):
				self.write(getattr(value, f.name))
		else:
			raise TypeError(f"StableHasher cannot hash values of type {type(value).__name__}")

	def finish(self) -> int:
		return hash64(b"".join(self._chunks))


def stable_hash(value: object) -> int:
	"""Return the 64-bit stable hash of a single value."""
	hasher = StableHasher()
	hasher.write(value)
	return hasher.finish()


__all__ = ["StableHasher", "stable_hash"]

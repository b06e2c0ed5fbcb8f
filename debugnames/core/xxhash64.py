# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Pure-Python xxHash64.

Used to derive the stable 64-bit hashes that stand in for constants the
encoder cannot reduce to a scalar. The values end up in debug-info names, so
they must not depend on the interpreter (no `hash()`), the platform, or the
process.
"""

from __future__ import annotations

PRIME1 = 11400714785074694791
PRIME2 = 14029467366897019727
PRIME3 = 1609587929392839161
PRIME4 = 9650029242287828579
PRIME5 = 2870177450012600261
MASK64 = 0xFFFFFFFFFFFFFFFF


def _rotl(x: int, r: int) -> int:
	return ((x << r) | (x >> (64 - r))) & MASK64


def _lane64(data: bytes, idx: int) -> int:
	return int.from_bytes(data[idx:idx + 8], "little")


def _round(acc: int, lane: int) -> int:
	acc = (acc + lane * PRIME2) & MASK64
	return (_rotl(acc, 31) * PRIME1) & MASK64


def _merge_round(acc: int, val: int) -> int:
	acc ^= _round(0, val)
	return (acc * PRIME1 + PRIME4) & MASK64


def _avalanche(acc: int) -> int:
	acc ^= acc >> 33
	acc = (acc * PRIME2) & MASK64
	acc ^= acc >> 29
	acc = (acc * PRIME3) & MASK64
	acc ^= acc >> 32
	return acc


def hash64(data: bytes, seed: int = 0) -> int:
	"""Compute xxHash64 of `data` with the given seed."""
	length = len(data)
	idx = 0
	if length >= 32:
		v1 = (seed + PRIME1 + PRIME2) & MASK64
		v2 = (seed + PRIME2) & MASK64
		v3 = seed & MASK64
		v4 = (seed - PRIME1) & MASK64
		while idx <= length - 32:
			v1 = _round(v1, _lane64(data, idx))
			v2 = _round(v2, _lane64(data, idx + 8))
			v3 = _round(v3, _lane64(data, idx + 16))
			v4 = _round(v4, _lane64(data, idx + 24))
			idx += 32
		acc = (_rotl(v1, 1) + _rotl(v2, 7) + _rotl(v3, 12) + _rotl(v4, 18)) & MASK64
		for v in (v1, v2, v3, v4):
			acc = _merge_round(acc, v)
	else:
		acc = (seed + PRIME5) & MASK64

	acc = (acc + length) & MASK64

	while idx + 8 <= length:
		acc ^= _round(0, _lane64(data, idx))
		acc = (_rotl(acc, 27) * PRIME1 + PRIME4) & MASK64
		idx += 8

	if idx + 4 <= length:
		acc ^= (int.from_bytes(data[idx:idx + 4], "little") * PRIME1) & MASK64
		acc = (_rotl(acc, 23) * PRIME2 + PRIME3) & MASK64
		idx += 4

	while idx < length:
		acc ^= (data[idx] * PRIME5) & MASK64
		acc = (_rotl(acc, 11) * PRIME1) & MASK64
		idx += 1

	return _avalanche(acc)


__all__ = ["hash64"]

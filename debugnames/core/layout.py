# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Enum layout shapes as reported by the layout service.

Only the facts the debug-info enum fallback needs are modelled: whether the
enum is laid out as a single variant, with a direct tag, or with a niche
(one dataful variant whose invalid bit patterns encode the other variants).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class WrappingRange:
	"""Inclusive range of valid values; `end < start` means the range wraps."""

	start: int
	end: int


@dataclass(frozen=True)
class SingleVariant:
	index: int = 0


@dataclass(frozen=True)
class DirectTag:
	tag_bits: int


@dataclass(frozen=True)
class NicheTag:
	"""
	Niche-encoded multi-variant layout.

	`valid_range` is the valid range of the dataful variant's largest niche;
	`tag_bits` is the storage width of the niche that doubles as the tag.
	"""

	tag_bits: int
	dataful_variant: int
	valid_range: WrappingRange


EnumLayout = Union[SingleVariant, DirectTag, NicheTag]


def truncate(value: int, bits: int) -> int:
	"""Keep the low `bits` bits of `value` (two's-complement view for negatives)."""
	if bits == 0:
		return 0
	return value & ((1 << bits) - 1)


def sign_extend(value: int, bits: int) -> int:
	"""Interpret the low `bits` bits of `value` as a signed integer."""
	if bits == 0:
		return 0
	value = truncate(value, bits)
	if value >> (bits - 1):
		value -= 1 << bits
	return value


def tag_bits_for(variant_count: int) -> int:
	"""Smallest byte-multiple width able to hold `variant_count` discriminants."""
	bits = 8
	while variant_count > (1 << bits):
		bits *= 2
	return bits


__all__ = [
	"WrappingRange",
	"SingleVariant",
	"DirectTag",
	"NicheTag",
	"EnumLayout",
	"truncate",
	"sign_extend",
	"tag_bits_for",
]

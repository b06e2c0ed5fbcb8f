# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Per-target configuration and the context object threaded through the encoder.

The dialect is a property of the compilation target: MSVC-like targets get
C++-template-like names that the Windows debuggers and their .natvis
visualizers can parse; every other target gets Rust-like names. A context
fixes the dialect for every name computed with it.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import Enum

from debugnames.core.types_core import IntTy, UintTy
from debugnames.debuginfo.services import ConstEvaluator, FnSigProvider, ItemResolver, LayoutProvider


class Dialect(Enum):
	NATIVE = "native"
	CPP_LIKE = "cpp-like"


def host_word_bits() -> int:
	"""Return the host pointer width, the default when no target width is given."""
	return struct.calcsize("P") * 8


@dataclass(frozen=True)
class DebugInfoTarget:
	"""Target facts the encoder depends on: MSVC-likeness and pointer width."""

	triple: str = "x86_64-unknown-linux-gnu"
	word_bits: int = field(default_factory=host_word_bits)

	def __post_init__(self) -> None:
		if self.word_bits not in (16, 32, 64):
			raise ValueError(f"unsupported target word size: {self.word_bits} bits")

	@property
	def is_like_msvc(self) -> bool:
		# `x86_64-pc-windows-msvc`, `aarch64-uwp-windows-msvc`, `i686-pc-windows-msvc`...
		return any(part == "msvc" or part.endswith("msvc") for part in self.triple.split("-")[1:])

	def default_dialect(self) -> Dialect:
		return Dialect.CPP_LIKE if self.is_like_msvc else Dialect.NATIVE


@dataclass(frozen=True)
class DebugInfoContext:
	"""
	Everything one name computation needs: target, dialect and the read-only
	compiler services. `dialect` defaults to the target's dialect.
	"""

	items: ItemResolver
	layouts: LayoutProvider
	consts: ConstEvaluator
	fn_sigs: FnSigProvider
	target: DebugInfoTarget = field(default_factory=DebugInfoTarget)
	dialect: Dialect | None = None

	def __post_init__(self) -> None:
		if self.dialect is None:
			object.__setattr__(self, "dialect", self.target.default_dialect())

	@property
	def cpp_like(self) -> bool:
		return self.dialect is Dialect.CPP_LIKE

	def int_bits(self, int_ty: IntTy | UintTy) -> int:
		return int_ty.bit_width(self.target.word_bits)


def cpp_like_debuginfo(ctx: DebugInfoContext) -> bool:
	"""Return True if names (and debug info) should use the C++-like dialect."""
	return ctx.cpp_like


__all__ = ["Dialect", "host_word_bits", "DebugInfoTarget", "DebugInfoContext", "cpp_like_debuginfo"]

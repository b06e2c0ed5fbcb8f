# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Fatal errors raised by the debug-info name encoder.

Both classes derive from AssertionError: they signal a compiler defect (a
caller leaking unresolved types, or broken bookkeeping inside the encoder),
never a condition a caller is expected to recover from.
"""

from __future__ import annotations


class DebugInfoBug(AssertionError):
	"""Internal consistency failure while computing a debug-info name."""


class UnrepresentableTypeError(DebugInfoBug):
	"""
	A type that cannot appear in debug info reached the encoder.

	Inference variables, bound/placeholder types, unnormalized projections,
	opaque aliases and error types must be resolved before this stage.
	"""

	def __init__(self, ty: object, *, what: str = "type") -> None:
		super().__init__(f"debuginfo: trying to create type name for unexpected {what}: {ty!r}")
		self.ty = ty


__all__ = ["DebugInfoBug", "UnrepresentableTypeError"]

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Rendering of const generic arguments.

Scalars print as decimal literals. Anything the const evaluator cannot reduce
to bits (or that is not an integer/bool) falls back to a stable 64-bit hash of
the constant's defining data: not pretty, but deterministic and virtually
unique, and short because only 64 bits are emitted.
"""

from __future__ import annotations

from debugnames.core.errors import DebugInfoBug
from debugnames.core.layout import sign_extend, truncate
from debugnames.core.types_core import Bool, Const, ConstParamRef, Int, Uint
from debugnames.debuginfo.context import DebugInfoContext
from debugnames.debuginfo.output import NameBuffer


def push_const_param(ctx: DebugInfoContext, ct: Const, output: NameBuffer) -> None:
	if isinstance(ct.value, ConstParamRef):
		output.push(ct.value.name)
		return
	if isinstance(ct.ty, (Int, Uint, Bool)):
		bits = ctx.consts.try_eval_bits(ct)
		if bits is not None:
			output.push(_scalar_literal(ctx, ct, bits))
			return
	push_const_hash(ctx, ct, output)


def _scalar_literal(ctx: DebugInfoContext, ct: Const, bits: int) -> str:
	ty = ct.ty
	if isinstance(ty, Int):
		return str(sign_extend(bits, ctx.int_bits(ty.int_ty)))
	if isinstance(ty, Uint):
		return str(truncate(bits, ctx.int_bits(ty.uint_ty)))
	if bits not in (0, 1):
		raise DebugInfoBug(f"invalid bool constant bits {bits:#x} in {ct!r}")
	return "true" if bits else "false"


def push_const_hash(ctx: DebugInfoContext, ct: Const, output: NameBuffer) -> None:
	digest = truncate(ctx.consts.stable_hash(ct), 64)
	if ctx.cpp_like:
		output.push(f"CONST${digest:x}")
	else:
		output.push(f"{{CONST#{digest:x}}}")


__all__ = ["push_const_param", "push_const_hash"]

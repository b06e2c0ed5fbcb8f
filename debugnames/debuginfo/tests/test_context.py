# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from debugnames.core.types_core import IntTy, UintTy
from debugnames.debuginfo import DebugInfoContext, DebugInfoTarget, Dialect, cpp_like_debuginfo, host_word_bits
from debugnames.test_support import World


@pytest.mark.parametrize(
	"triple, msvc",
	[
		("x86_64-pc-windows-msvc", True),
		("i686-pc-windows-msvc", True),
		("aarch64-uwp-windows-msvc", True),
		("x86_64-pc-windows-gnu", False),
		("aarch64-pc-windows-gnullvm", False),
		("x86_64-unknown-linux-gnu", False),
		("aarch64-apple-darwin", False),
	],
)
def test_msvc_targets(triple: str, msvc: bool) -> None:
	target = DebugInfoTarget(triple=triple)
	assert target.is_like_msvc is msvc
	assert target.default_dialect() is (Dialect.CPP_LIKE if msvc else Dialect.NATIVE)


def _ctx(world: World, target: DebugInfoTarget, dialect: Dialect | None = None) -> DebugInfoContext:
	return DebugInfoContext(
		items=world.items,
		layouts=world.layouts,
		consts=world.consts,
		fn_sigs=world.fn_sigs,
		target=target,
		dialect=dialect,
	)


def test_dialect_defaults_to_target(world: World) -> None:
	ctx = _ctx(world, DebugInfoTarget(triple="x86_64-pc-windows-msvc"))
	assert ctx.dialect is Dialect.CPP_LIKE
	assert cpp_like_debuginfo(ctx)
	assert not cpp_like_debuginfo(_ctx(world, DebugInfoTarget()))


def test_dialect_override(world: World) -> None:
	ctx = _ctx(world, DebugInfoTarget(triple="x86_64-pc-windows-msvc"), Dialect.NATIVE)
	assert ctx.dialect is Dialect.NATIVE
	assert not ctx.cpp_like


def test_word_size(world: World) -> None:
	assert host_word_bits() in (32, 64)
	ctx = _ctx(world, DebugInfoTarget(word_bits=16))
	assert ctx.int_bits(UintTy.USIZE) == 16
	assert ctx.int_bits(IntTy.ISIZE) == 16
	assert ctx.int_bits(IntTy.I64) == 64
	with pytest.raises(ValueError):
		DebugInfoTarget(word_bits=48)

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from debugnames.core.errors import DebugInfoBug
from debugnames.core.item_id import ClosureKind
from debugnames.core.types_core import Bool, Closure, Int, IntTy, Lifetime, Uint, UintTy
from debugnames.debuginfo import compute_type_name
from debugnames.test_support import World

U8 = Uint(UintTy.U8)


def test_closure_args_are_truncated_to_enclosing_generics(world: World) -> None:
	run = world.items.ensure_path("app::run", generics=1)
	world.items.add_closure(run)
	second = world.items.add_closure(run)
	ty = Closure(second, (U8, Int(IntTy.I32), Bool()))
	assert world.names(ty) == ("app::run::{closure_env#1}<u8>", "app::run::closure_env$1<u8>")
	assert world.names(ty, qualified=False) == ("{closure_env#1}<u8>", "closure_env$1<u8>")


def test_closure_in_non_generic_fn(world: World) -> None:
	main = world.items.ensure_path("app::main")
	body = world.items.add_closure(main)
	ty = Closure(body, (Bool(),))
	assert world.names(ty) == ("app::main::{closure_env#0}", "app::main::closure_env$0")


@pytest.mark.parametrize(
	"kind, label",
	[
		(ClosureKind.CLOSURE, "closure_env"),
		(ClosureKind.GENERATOR, "generator_env"),
		(ClosureKind.ASYNC_BLOCK, "async_block_env"),
		(ClosureKind.ASYNC_CLOSURE, "async_closure_env"),
		(ClosureKind.ASYNC_FN, "async_fn_env"),
	],
)
def test_closure_kind_labels(world: World, kind: ClosureKind, label: str) -> None:
	main = world.items.ensure_path("app::main")
	body = world.items.add_closure(main, kind)
	ty = Closure(body, kind=kind)
	assert world.names(ty) == (f"app::main::{{{label}#0}}", f"app::main::{label}$0")


def test_nested_closure_uses_outermost_fn_generics(world: World) -> None:
	run = world.items.ensure_path("app::run", generics=1)
	outer = world.items.add_closure(run)
	inner = world.items.add_closure(outer)
	ty = Closure(inner, (U8, Bool()))
	assert world.names(ty) == (
		"app::run::{closure#0}::{closure_env#0}<u8>",
		"app::run::closure$0::closure_env$0<u8>",
	)


def test_closure_lifetimes_are_erased(world: World) -> None:
	run = world.items.ensure_path("app::run", generics=2)
	body = world.items.add_closure(run)
	ty = Closure(body, (Lifetime("'a"), U8, Bool()))
	assert world.names(ty)[0] == "app::run::{closure_env#0}<u8>"


def test_closure_kind_defaults_to_item_kind(world: World) -> None:
	main = world.items.ensure_path("app::main")
	body = world.items.add_closure(main, ClosureKind.ASYNC_FN)
	assert world.names(Closure(body)) == ("app::main::{async_fn_env#0}", "app::main::async_fn_env$0")


def test_closure_kind_must_match_item_kind(world: World, native) -> None:
	main = world.items.ensure_path("app::main")
	body = world.items.add_closure(main, ClosureKind.ASYNC_FN)
	with pytest.raises(DebugInfoBug):
		compute_type_name(native, Closure(body, kind=ClosureKind.GENERATOR))

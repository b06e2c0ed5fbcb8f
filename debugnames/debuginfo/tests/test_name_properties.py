# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Properties that must hold for every name, whatever the type."""

from __future__ import annotations

import pytest

from debugnames.core.layout import NicheTag, WrappingRange
from debugnames.debuginfo import compute_type_name
from debugnames.test_support import World, bracket_depths_balanced

SAMPLES = [
	"alloc::vec::Vec<alloc::vec::Vec<alloc::vec::Vec<u8>>>",
	"(i32, &mut [alloc::boxed::Box<u8>], *const [u8; 4])",
	"&(dyn core::iter::Iterator<Item=alloc::vec::Vec<u8>> + core::marker::Send)",
	"fn(alloc::vec::Vec<u8>, ...) -> alloc::boxed::Box<fn() -> u8>",
	"core::option::Option<core::option::Option<alloc::vec::Vec<u8>>>",
	"std::collections::HashMap<alloc::string::String, alloc::vec::Vec<(u8, char)>>",
]


@pytest.fixture
def loaded_world() -> World:
	world = World()
	option = world.enum("core::option::Option", ["None", "Some"], generics=1)
	world.layouts.set_layout(option, NicheTag(tag_bits=8, dataful_variant=1, valid_range=WrappingRange(0, 1)))
	return world


@pytest.mark.parametrize("text", SAMPLES)
def test_brackets_balance(loaded_world: World, text: str) -> None:
	for name in loaded_world.names(loaded_world.parse(text)):
		assert bracket_depths_balanced(name), name


@pytest.mark.parametrize("text", SAMPLES)
def test_cpp_names_avoid_debugger_hostile_characters(loaded_world: World, text: str) -> None:
	_, cpp = loaded_world.names(loaded_world.parse(text))
	assert ">>" not in cpp
	assert "#" not in cpp
	assert "[" not in cpp
	assert '"' not in cpp
	assert not cpp.startswith(("<", "{"))


@pytest.mark.parametrize("text", SAMPLES)
def test_names_are_deterministic(loaded_world: World, text: str) -> None:
	ty = loaded_world.parse(text)
	assert loaded_world.names(ty) == loaded_world.names(ty)
	first, second = World(), World()
	assert first.names(first.parse(text)) == second.names(second.parse(text))


def test_both_dialects_have_the_same_generic_slots(world: World) -> None:
	ty = world.parse("std::collections::HashMap<alloc::string::String, alloc::vec::Vec<app::Wrap<u8>>>")
	native, cpp = world.names(ty)
	assert native.count("<") == cpp.count("<") == 3
	assert native.count(",") == cpp.count(",") == 1


def test_qualified_flag_only_strips_outermost(world: World, native) -> None:
	ty = world.parse("alloc::vec::Vec<alloc::string::String>")
	qualified = compute_type_name(native, ty)
	unqualified = compute_type_name(native, ty, qualified=False)
	assert qualified.endswith(unqualified)
	assert unqualified == "Vec<alloc::string::String>"

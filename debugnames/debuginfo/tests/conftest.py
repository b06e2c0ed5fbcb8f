# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
import pytest

from debugnames.debuginfo import Dialect
from debugnames.test_support import World


@pytest.fixture
def world() -> World:
	"""A fresh in-memory world with 64-bit pointers."""
	return World()


@pytest.fixture
def native(world: World):
	return world.ctx(Dialect.NATIVE)


@pytest.fixture
def cpp(world: World):
	return world.ctx(Dialect.CPP_LIKE)

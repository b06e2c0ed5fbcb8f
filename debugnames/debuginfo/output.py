# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Output buffer and the bracket/separator bookkeeping shared by all encoders.

Notes on the C++-like dialect: the MSVC debugger parses type names as C++
expressions, so `>>` is always read as a right shift and spaces inside a name
confuse .natvis casts. Closing brackets therefore get a separating space when
they follow another `>`, and argument separators carry no space.
"""

from __future__ import annotations

from typing import Iterable

NON_CPP_AUTO_TRAIT_SEPARATOR = " + "


class NameBuffer:
	"""Append-only string builder with the few undo operations the encoder needs."""

	__slots__ = ("_text",)

	def __init__(self, text: str = "") -> None:
		self._text = text

	def push(self, text: str) -> None:
		self._text += text

	def ends_with(self, suffix: str) -> bool:
		return self._text.endswith(suffix)

	def truncate(self, count: int) -> None:
		"""Drop the last `count` characters."""
		if count:
			self._text = self._text[:-count]

	def getvalue(self) -> str:
		return self._text

	def __len__(self) -> int:
		return len(self._text)

	def __str__(self) -> str:
		return self._text

	def __repr__(self) -> str:
		return f"NameBuffer({self._text!r})"


def push_arg_separator(cpp_like: bool, output: NameBuffer) -> None:
	output.push("," if cpp_like else ", ")


def pop_arg_separator(output: NameBuffer) -> None:
	if output.ends_with(" "):
		output.truncate(1)
	if not output.ends_with(","):
		raise AssertionError(f"'output' does not end with an argument separator: {output.getvalue()!r}")
	output.truncate(1)


def push_close_angle_bracket(cpp_like: bool, output: NameBuffer) -> None:
	if cpp_like and output.ends_with(">"):
		output.push(" ")
	output.push(">")


def pop_close_angle_bracket(output: NameBuffer) -> None:
	if not output.ends_with(">"):
		raise AssertionError(f"'output' does not end with '>': {output.getvalue()!r}")
	output.truncate(1)
	if output.ends_with(" "):
		output.truncate(1)


def push_auto_trait_separator(cpp_like: bool, output: NameBuffer) -> None:
	if cpp_like:
		push_arg_separator(cpp_like, output)
	else:
		output.push(NON_CPP_AUTO_TRAIT_SEPARATOR)


def pop_auto_trait_separator(output: NameBuffer) -> None:
	if output.ends_with(NON_CPP_AUTO_TRAIT_SEPARATOR):
		output.truncate(len(NON_CPP_AUTO_TRAIT_SEPARATOR))
	else:
		pop_arg_separator(output)


def push_arg_list(cpp_like: bool, pieces: Iterable[str], output: NameBuffer) -> bool:
	"""
	Emit `<a, b, c>` from already rendered arguments.

	Returns False (and emits nothing) for an empty list so callers never open
	a bracket they cannot fill.
	"""
	pieces = list(pieces)
	if not pieces:
		return False
	output.push("<")
	for piece in pieces:
		output.push(piece)
		push_arg_separator(cpp_like, output)
	pop_arg_separator(output)
	push_close_angle_bracket(cpp_like, output)
	return True


__all__ = [
	"NameBuffer",
	"NON_CPP_AUTO_TRAIT_SEPARATOR",
	"push_arg_separator",
	"pop_arg_separator",
	"push_close_angle_bracket",
	"pop_close_angle_bracket",
	"push_auto_trait_separator",
	"pop_auto_trait_separator",
	"push_arg_list",
]

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
debugnames.notation: compact Rust-like notation for type descriptors.

`parse_type("alloc::vec::Vec<(i32, &[u8])>", table)` returns the descriptor
the debug-info encoder consumes; `parse_trait_ref` parses a trait reference
for vtable names.
"""

from debugnames.notation.parser import DEFAULT_AUTO_TRAITS, NotationParseError, parse_trait_ref, parse_type

__all__ = ["DEFAULT_AUTO_TRAITS", "NotationParseError", "parse_trait_ref", "parse_type"]

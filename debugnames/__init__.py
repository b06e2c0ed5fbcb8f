# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
debugnames: canonical type names for debug-info sections.

Packages:
  core: type descriptors, item identities, layout shapes, stable hashing
  debuginfo: the dialect-aware type/vtable name encoder and its service protocols
  notation: a compact Rust-like type notation (tests, CLI)

The CLI entrypoint is `debugnames.cli:main`.
"""

__all__ = ["core", "debuginfo", "notation"]

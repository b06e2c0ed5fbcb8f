# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
debugnames.core: shared data model used by the encoder and its services.

Modules:
  - item_id: item identities, def-path segments and closure kinds
  - types_core: the closed type-descriptor union and generic arguments
  - layout: enum layout shapes plus integer truncation helpers
  - errors: fatal encoder errors
  - xxhash64 / stable_hash: deterministic 64-bit hashing
"""

__all__ = [
	"item_id",
	"types_core",
	"layout",
	"errors",
	"xxhash64",
	"stable_hash",
]

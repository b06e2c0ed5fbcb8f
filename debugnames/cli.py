# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Command-line front end: print debug-info names for types written in the
compact notation.

  debugnames 'alloc::vec::Vec<(i32, &[u8])>'
  debugnames --target x86_64-pc-windows-msvc '&mut [u8; 4]'
  debugnames --enum 'core::option::Option=None,Some' --vtable core::fmt::Debug 'core::option::Option<u8>'
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Tuple

from debugnames.debuginfo import (
	DebugInfoContext,
	DebugInfoTarget,
	Dialect,
	VTableNameKind,
	compute_type_name,
	compute_vtable_name,
	host_word_bits,
)
from debugnames.debuginfo.services_impl import (
	SimpleConstEvaluator,
	SimpleFnSigTable,
	SimpleItemTable,
	SimpleLayoutTable,
)
from debugnames.notation import NotationParseError, parse_trait_ref, parse_type

logger = logging.getLogger(__name__)


def _parse_enum_decl(raw: str) -> Tuple[str, List[str]]:
	path, sep, variants = raw.partition("=")
	if not sep or not path or not variants:
		raise argparse.ArgumentTypeError(f"expected PATH=Variant1,Variant2, got {raw!r}")
	return path, [v.strip() for v in variants.split(",") if v.strip()]


def _build_arg_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="debugnames", description="Compute debug-info type names")
	parser.add_argument("types", nargs="+", metavar="TYPE", help="Type in compact notation, e.g. 'alloc::vec::Vec<u8>'")
	parser.add_argument("--target", default="x86_64-unknown-linux-gnu", help="Target triple (MSVC targets use the C++-like dialect)")
	parser.add_argument(
		"--target-word-bits",
		type=int,
		default=None,
		choices=(16, 32, 64),
		help="Pointer width of the target (default: host pointer width)",
	)
	parser.add_argument(
		"--dialect",
		choices=[d.value for d in Dialect],
		default=None,
		help="Override the dialect implied by --target",
	)
	parser.add_argument("--unqualified", action="store_true", help="Do not qualify the outermost item name")
	parser.add_argument("--type-param", dest="type_params", action="append", default=[], metavar="NAME", help="Treat NAME as a generic type parameter (repeatable)")
	parser.add_argument("--const-param", dest="const_params", action="append", default=[], metavar="NAME", help="Treat NAME as a const generic parameter (repeatable)")
	parser.add_argument("--enum", dest="enums", action="append", default=[], type=_parse_enum_decl, metavar="PATH=V1,V2", help="Declare an enum and its variants (repeatable)")
	parser.add_argument("--vtable", metavar="TRAIT", default=None, help="Print the vtable name for TYPE as TRAIT ('-' for no trait)")
	parser.add_argument("--vtable-type", action="store_true", help="With --vtable, name the vtable type instead of the global")
	parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
	return parser


def main(argv: list[str] | None = None) -> int:
	args = _build_arg_parser().parse_args(argv)
	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

	table = SimpleItemTable()
	for path, variants in args.enums:
		table.declare_enum(path, variants)

	target = DebugInfoTarget(triple=args.target, word_bits=args.target_word_bits or host_word_bits())
	ctx = DebugInfoContext(
		items=table,
		layouts=SimpleLayoutTable(),
		consts=SimpleConstEvaluator(),
		fn_sigs=SimpleFnSigTable(),
		target=target,
		dialect=Dialect(args.dialect) if args.dialect else None,
	)
	logger.debug("target %s, dialect %s", target.triple, ctx.dialect.value)

	trait_ref = None
	if args.vtable is not None and args.vtable != "-":
		try:
			trait_ref = parse_trait_ref(
				args.vtable,
				table,
				type_params=args.type_params,
				const_params=args.const_params,
				word_bits=target.word_bits,
			)
		except NotationParseError as err:
			print(f"error: {err}", file=sys.stderr)
			return 1

	exit_code = 0
	for text in args.types:
		try:
			ty = parse_type(
				text,
				table,
				type_params=args.type_params,
				const_params=args.const_params,
				word_bits=target.word_bits,
			)
		except NotationParseError as err:
			print(f"error: {err}", file=sys.stderr)
			exit_code = 1
			continue
		if args.vtable is not None:
			kind = VTableNameKind.TYPE if args.vtable_type else VTableNameKind.GLOBAL_VARIABLE
			print(compute_vtable_name(ctx, ty, trait_ref, kind))
		else:
			print(compute_type_name(ctx, ty, qualified=not args.unqualified))
	return exit_code


__all__ = ["main"]

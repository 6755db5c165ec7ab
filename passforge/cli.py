"""PassForge command-line interface.

Usage examples:
    python -m passforge check mypassword
    python -m passforge check -f passwords.txt
    python -m passforge generate -n 20 -c 5 --exclude-similar
    python -m passforge improve hunter2
"""

import argparse
import logging
import random
import sys

from rich.logging import RichHandler

from passforge import (
    DEFAULT_LENGTH,
    GenerationOptions,
    InvalidArgument,
    analyze,
    generate,
    improve,
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="passforge",
        description="Score, generate and improve passwords.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log debug details to stderr",
    )
    sub = parser.add_subparsers(dest="command")

    # ── check ──────────────────────────────────────────────────────────
    check_p = sub.add_parser("check", help="Analyse password strength")
    check_p.add_argument("passwords", nargs="*", help="Passwords to check")
    check_p.add_argument(
        "-f", "--file",
        help="Read passwords from a file (one per line)",
    )

    # ── generate ───────────────────────────────────────────────────────
    gen_p = sub.add_parser("generate", help="Generate secure passwords")
    gen_p.add_argument(
        "-n", "--length", type=int, default=DEFAULT_LENGTH,
        help=f"Password length (default: {DEFAULT_LENGTH})",
    )
    gen_p.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of passwords to generate (default: 1)",
    )
    gen_p.add_argument("--no-symbols", action="store_true")
    gen_p.add_argument("--no-uppercase", action="store_true")
    gen_p.add_argument("--no-lowercase", action="store_true")
    gen_p.add_argument("--no-numbers", action="store_true")
    gen_p.add_argument(
        "--no-letters", action="store_true",
        help="Disable both letter classes",
    )
    gen_p.add_argument(
        "--exclude-similar", action="store_true",
        help="Leave out look-alike characters (i, l, 1, o, 0, I, L, O)",
    )
    gen_p.add_argument(
        "--seed", type=int,
        help="Seed a non-cryptographic RNG for reproducible output",
    )

    # ── improve ────────────────────────────────────────────────────────
    imp_p = sub.add_parser("improve", help="Strengthen existing passwords")
    imp_p.add_argument("passwords", nargs="+", help="Passwords to improve")

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    if args.command == "check":
        return _cmd_check(args)
    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "improve":
        return _cmd_improve(args)

    parser.print_help()
    return 0


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False, show_time=False)],
    )


def _bar(score: int) -> str:
    filled = round(score / 10)
    return "#" * filled + "-" * (10 - filled)


def _cmd_check(args: argparse.Namespace) -> int:
    passwords = list(args.passwords)

    if args.file:
        with open(args.file) as f:
            passwords.extend(line.strip() for line in f if line.strip())

    if not passwords:
        print("Error: provide passwords as arguments or via --file", file=sys.stderr)
        return 1

    for pwd in passwords:
        report = analyze(pwd)
        print(f"  '{pwd}'")
        print(f"            Strength: [{_bar(report.score)}] {report.label} ({report.score}/100)")
        for line in report.feedback:
            print(f"            ! {line}")

    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    options = GenerationOptions(
        include_symbols=not args.no_symbols,
        include_uppercase=not args.no_uppercase,
        include_lowercase=not args.no_lowercase,
        include_numbers=not args.no_numbers,
        include_letters=not args.no_letters,
        include_similar_chars=not args.exclude_similar,
    )
    rng = random.Random(args.seed) if args.seed is not None else None

    for _ in range(args.count):
        try:
            pwd = generate(args.length, options, rng=rng)
        except InvalidArgument as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        report = analyze(pwd)
        print(f"  {pwd}  ({report.label}, {report.score}/100)")

    return 0


def _cmd_improve(args: argparse.Namespace) -> int:
    if not all(args.passwords):
        print("Error: Please enter a password to improve", file=sys.stderr)
        return 1

    for pwd in args.passwords:
        before = analyze(pwd)
        better = improve(pwd)
        after = analyze(better)
        print(f"  {better}  ({before.label} -> {after.label}, {after.score}/100)")

    return 0


if __name__ == "__main__":
    sys.exit(main())

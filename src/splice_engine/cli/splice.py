"""Single-file splice CLI commands."""

import argparse
from pathlib import Path

from splice_engine.splice.engine import SpliceEngine
from splice_engine.splice.errors import SpliceError
from splice_engine.splice.lifecycle import infer_state
from splice_engine.storage.loader import load_buffer, read_text, save_buffer

DEMO_FILE = "test-file.ts"
DEMO_DEFAULT = "// Hello \n\nconsole.log( 'Hello, world!' );"


def _read_arg_text(text: str | None, file: str | None) -> str | None:
    if file:
        return read_text(file)
    return text


def _open_engine(args: argparse.Namespace) -> tuple[SpliceEngine, str, bool]:
    """Load the target for a splice command; dry runs never create it."""
    path = Path(args.file)
    default = _read_arg_text(args.default, args.default_file) or ""
    existed = path.exists()
    if args.dry_run and not existed:
        original = default
    else:
        original = load_buffer(path, default)
    return SpliceEngine(original, target=str(path)), original, existed


def _finish(
    args: argparse.Namespace,
    engine: SpliceEngine,
    original: str,
    existed: bool,
    state: str,
) -> int:
    changed = engine.content != original
    if args.dry_run:
        print(engine.content, end="")
        print(f"\n[DRY RUN] {args.file} not modified (marker {state}).")
        return 0
    if changed:
        save_buffer(args.file, engine.content)
    action = "created" if not existed else ("updated" if changed else "unchanged")
    print(f"  {args.file}: {action} (marker {state})")
    return 0


def cmd_between(args: argparse.Namespace) -> int:
    try:
        content = _read_arg_text(args.content, args.content_file) or ""
        engine, original, existed = _open_engine(args)
        state = engine.replace_between(args.marker, content, args.after)
    except (SpliceError, OSError) as e:
        print(f"ERROR: {e}")
        return 1
    return _finish(args, engine, original, existed, state)


def cmd_after(args: argparse.Namespace) -> int:
    try:
        content = _read_arg_text(args.content, args.content_file) or ""
        engine, original, existed = _open_engine(args)
        state = engine.insert_after(args.anchor, content, args.marker)
    except (SpliceError, OSError) as e:
        print(f"ERROR: {e}")
        return 1
    return _finish(args, engine, original, existed, state)


def cmd_state(args: argparse.Namespace) -> int:
    path = Path(args.file)
    if not path.is_file():
        print(f"ERROR: {path} does not exist")
        return 1
    try:
        state = infer_state(read_text(path), args.marker)
    except (SpliceError, OSError) as e:
        print(f"ERROR: {e}")
        return 1
    print(f"  {args.marker}: {state}")
    return 0


def cmd_demo(args: argparse.Namespace) -> int:
    """Seed a small script and splice an alert after its greeting."""
    path = args.file or DEMO_FILE
    try:
        engine = SpliceEngine(load_buffer(path, DEMO_DEFAULT), target=str(path))
        save_buffer(path, engine.content)
        state = engine.replace_between(
            "// HELLO ALERT",
            "alert( 'Hello, world!' );",
            "// Hello",
        )
        save_buffer(path, engine.content)
    except (SpliceError, OSError) as e:
        print(f"ERROR: {e}")
        return 1
    print(f"  {path}: // HELLO ALERT {state}")
    return 0

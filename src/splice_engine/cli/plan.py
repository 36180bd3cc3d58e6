"""Plan CLI commands."""

import argparse
from pathlib import Path

from splice_engine.paths import plan_path
from splice_engine.plan.reader import read_plan
from splice_engine.splice.errors import PlanError


def _resolve_plan(args: argparse.Namespace) -> Path:
    return Path(args.plan).expanduser() if args.plan else plan_path()


def cmd_plan_validate(args: argparse.Namespace) -> int:
    from splice_engine.plan.validator import validate_plan

    path = _resolve_plan(args)
    try:
        plan = read_plan(path)
    except (PlanError, OSError) as e:
        print(f"ERROR: {e}")
        return 1
    result = validate_plan(plan)
    print(result.summary())
    return 0 if result.passed else 1


def cmd_plan_apply(args: argparse.Namespace) -> int:
    from splice_engine.plan.runner import apply_plan

    path = _resolve_plan(args)
    try:
        plan = read_plan(path)
        result = apply_plan(plan, path.parent, dry_run=args.dry_run)
    except (PlanError, OSError) as e:
        print(f"ERROR: {e}")
        return 1

    print("Splice Plan Results")
    print("─" * 40)
    print(f"  Updated: {len(result['updated'])}")
    print(f"  Created: {len(result['created'])}")
    print(f"  Skipped: {len(result['skipped'])}")
    if result["errors"]:
        print(f"  Errors:  {len(result['errors'])}")
        for e in result["errors"]:
            print(f"    - {e['path']}: {e['error']}")

    if result.get("dry_run"):
        print("\n[DRY RUN] No files were modified.")

    return 1 if result["errors"] else 0

"""Apply a splice plan — load each target, run its splices, save it back.

The run process:
1. Validate the whole plan up front
2. For each target, load the file (creating it from its default if absent)
3. Apply the splices in order against one in-memory buffer
4. Save only when the buffer changed and this is not a dry run

A target whose splices fail is not saved and does not stop the others.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from splice_engine.plan.reader import get_splices, get_targets, resolve_content, resolve_default
from splice_engine.plan.validator import validate_plan
from splice_engine.splice.engine import SpliceEngine
from splice_engine.splice.errors import PlanError, SpliceError
from splice_engine.storage.loader import load_buffer, save_buffer

logger = logging.getLogger(__name__)


def apply_splice(engine: SpliceEngine, splice: dict, base_dir: Path) -> str:
    """Apply one plan splice entry to an engine and return the marker state."""
    content = resolve_content(splice, base_dir)
    if "between" in splice:
        return engine.replace_between(splice["between"], content, splice.get("after"))
    return engine.insert_after(splice["after"], content, splice["marker"])


def apply_target(
    target: dict,
    base_dir: Path | str,
    dry_run: bool = False,
) -> dict[str, Any]:
    """Run all splices of a single plan target."""
    base = Path(base_dir)
    file_path = base / target["path"]
    default = resolve_default(target, base)

    existed = file_path.exists()
    if dry_run and not existed:
        original = default
    else:
        original = load_buffer(file_path, default)

    engine = SpliceEngine(original, target=str(file_path))
    states = [apply_splice(engine, splice, base) for splice in get_splices(target)]

    if not existed:
        action = "created"
    elif engine.content == original:
        action = "unchanged"
    else:
        action = "updated"

    if not dry_run and engine.content != original:
        save_buffer(file_path, engine.content)

    logger.info("%s: %s (%d splice(s))", file_path, action, len(states))
    return {"path": str(file_path), "action": action, "states": states, "dry_run": dry_run}


def apply_plan(
    plan: dict,
    base_dir: Path | str,
    dry_run: bool = False,
) -> dict[str, Any]:
    """Apply every target of a validated plan.

    Raises:
        PlanError: If the plan fails validation. No file is touched.
    """
    validation = validate_plan(plan)
    if not validation.passed:
        raise PlanError(f"Plan validation failed. Refusing to splice.\n{validation.summary()}")
    for w in validation.warnings:
        logger.warning(w)

    created = []
    updated = []
    skipped = []
    errors = []

    for target in get_targets(plan):
        path = str(Path(base_dir) / target["path"])
        try:
            res = apply_target(target, base_dir, dry_run)
        except (SpliceError, OSError) as e:
            logger.debug("target %s failed", path, exc_info=True)
            errors.append({"path": path, "error": str(e)})
            continue

        if res["action"] == "created":
            created.append(res["path"])
        elif res["action"] == "updated":
            updated.append(res["path"])
        else:
            skipped.append(res["path"])

    return {
        "created": created,
        "updated": updated,
        "skipped": skipped,
        "errors": errors,
        "dry_run": dry_run,
    }

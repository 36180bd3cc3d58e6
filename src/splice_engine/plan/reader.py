"""Parse splice plan YAML files."""

from pathlib import Path

import yaml

from splice_engine.splice.errors import PlanError
from splice_engine.storage.loader import read_text


def read_plan(path: Path | str) -> dict:
    """Read and parse a splice plan.

    Args:
        path: Path to the plan YAML.

    Returns:
        Parsed plan dict.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        PlanError: If the YAML is malformed or not a mapping.
    """
    plan_path = Path(path)
    with open(plan_path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise PlanError(f"plan at {plan_path} could not be parsed: {e}") from e

    if not isinstance(data, dict):
        raise PlanError(f"plan at {plan_path} is not a YAML mapping")

    return data


def get_targets(plan: dict) -> list[dict]:
    """Extract target entries from a plan."""
    return plan.get("targets", []) or []


def get_splices(target: dict) -> list[dict]:
    """Extract splice entries from a target."""
    return target.get("splices", []) or []


def resolve_default(target: dict, base_dir: Path) -> str:
    """Return a target's default template, inline or from ``default_file``."""
    if target.get("default_file"):
        return read_text(base_dir / target["default_file"])
    return target.get("default") or ""


def resolve_content(splice: dict, base_dir: Path) -> str:
    """Return a splice's content, inline or from ``content_file``."""
    if splice.get("content_file"):
        return read_text(base_dir / splice["content_file"])
    return splice.get("content", "")

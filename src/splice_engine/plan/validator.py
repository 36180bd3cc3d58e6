"""Validate splice plans before any file is touched."""

from dataclasses import dataclass, field

from splice_engine.plan.reader import get_splices, get_targets
from splice_engine.splice.errors import InvalidPattern
from splice_engine.splice.partition import compile_pattern


@dataclass
class PlanValidation:
    """Result of a plan validation run."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    total_targets: int = 0

    @property
    def passed(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = [f"Plan Validation: {self.total_targets} target(s) checked"]
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  {w}")
        if self.passed:
            lines.append("PASSED")
        return "\n".join(lines)


def _check_pattern(result: PlanValidation, where: str, pattern) -> None:
    if not isinstance(pattern, str):
        result.errors.append(f"{where}: pattern must be a string, got {type(pattern).__name__}")
        return
    try:
        compile_pattern(pattern)
    except InvalidPattern as e:
        result.errors.append(f"{where}: {e}")


def _check_text_fields(result: PlanValidation, where: str, entry: dict, fields: tuple) -> bool:
    ok = True
    for name in fields:
        if name in entry and not isinstance(entry[name], str):
            result.errors.append(
                f"{where}.{name}: must be a string, got {type(entry[name]).__name__}"
            )
            ok = False
    return ok


def _validate_splice(result: PlanValidation, where: str, splice) -> None:
    if not isinstance(splice, dict):
        result.errors.append(f"{where}: splice must be a mapping")
        return

    _check_text_fields(result, where, splice, ("content", "content_file", "marker"))

    has_content = "content" in splice
    has_file = "content_file" in splice
    if has_content == has_file:
        result.errors.append(f"{where}: needs exactly one of content / content_file")

    if "between" in splice:
        _check_pattern(result, f"{where}.between", splice["between"])
        if "after" in splice:
            _check_pattern(result, f"{where}.after", splice["after"])
        if "marker" in splice:
            result.warnings.append(f"{where}: 'marker' is ignored when 'between' is set")
    elif "after" in splice:
        _check_pattern(result, f"{where}.after", splice["after"])
        if "marker" not in splice:
            result.errors.append(f"{where}: 'after' without 'between' needs a 'marker'")
    else:
        result.errors.append(f"{where}: needs 'between' or 'after'")


def validate_plan(plan: dict) -> PlanValidation:
    """Validate the structure and patterns of a parsed plan.

    Args:
        plan: Plan dict from ``read_plan``.

    Returns:
        PlanValidation with errors and warnings.
    """
    result = PlanValidation()
    targets = plan.get("targets")
    if not isinstance(targets, list) or not targets:
        result.errors.append("plan: 'targets' must be a non-empty list")
        return result

    result.total_targets = len(targets)
    seen_paths: set[str] = set()

    for i, target in enumerate(get_targets(plan)):
        where = f"targets[{i}]"
        if not isinstance(target, dict):
            result.errors.append(f"{where}: target must be a mapping")
            continue

        _check_text_fields(result, where, target, ("path", "default", "default_file"))
        path = target.get("path")
        if not path:
            result.errors.append(f"{where}: missing 'path'")
        elif isinstance(path, str):
            if path in seen_paths:
                result.warnings.append(f"{where}: '{path}' appears more than once")
            seen_paths.add(path)

        if "default" in target and "default_file" in target:
            result.errors.append(f"{where}: set at most one of default / default_file")

        splices = target.get("splices")
        if not isinstance(splices, list) or not splices:
            result.errors.append(f"{where}: 'splices' must be a non-empty list")
            continue

        for j, splice in enumerate(get_splices(target)):
            _validate_splice(result, f"{where}.splices[{j}]", splice)

    return result

"""Plan module — read, validate, and apply YAML splice plans."""

from splice_engine.plan.reader import read_plan
from splice_engine.plan.validator import validate_plan, PlanValidation
from splice_engine.plan.runner import apply_plan, apply_target

__all__ = ["read_plan", "validate_plan", "PlanValidation", "apply_plan", "apply_target"]

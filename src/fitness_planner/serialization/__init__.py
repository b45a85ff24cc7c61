"""Serialization module — export plans to JSON-compatible structures."""

from fitness_planner.serialization.plan_json import to_plan_json, to_plan_json_string

__all__ = ["to_plan_json", "to_plan_json_string"]

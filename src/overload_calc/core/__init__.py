"""Calculation engine: validation, metrics, planner and history."""

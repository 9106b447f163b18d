"""Orchestrators for BMI use cases."""

from .bmi_orchestrator import BMIOrchestrator

__all__ = ["BMIOrchestrator"]

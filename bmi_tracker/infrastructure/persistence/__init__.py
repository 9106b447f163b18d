"""Persistence adapters for the BMI result store."""

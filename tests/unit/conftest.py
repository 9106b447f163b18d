"""Unit test configuration.

Unit tests must not depend on bmi_tracker.app or external services.
"""

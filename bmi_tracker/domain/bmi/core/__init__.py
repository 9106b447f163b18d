"""Core building blocks of the BMI domain."""

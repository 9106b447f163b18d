"""BMI domain: validation, calculation and classification."""

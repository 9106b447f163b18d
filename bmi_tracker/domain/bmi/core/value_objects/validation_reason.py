"""ValidationReason value object - why raw input was rejected."""

from enum import Enum


class ValidationReason(str, Enum):
    """Reason reported by the input validator.

    Rules are checked in declaration order and the first failing one
    is reported:
    - EMPTY_FIELD: weight or height is blank
    - NOT_A_NUMBER: weight or height is not a finite number
    - NON_POSITIVE: weight or height is zero or negative
    - UNREALISTIC_VALUE: weight > 1000 kg or height > 300 cm (strict mode),
      or the resulting BMI overflows or rounds to 0.00
    """

    EMPTY_FIELD = "EMPTY_FIELD"
    NOT_A_NUMBER = "NOT_A_NUMBER"
    NON_POSITIVE = "NON_POSITIVE"
    UNREALISTIC_VALUE = "UNREALISTIC_VALUE"

    def message(self) -> str:
        """Get user-facing message.

        Returns:
            str: Message shown to the user when input is rejected

        Example:
            >>> ValidationReason.EMPTY_FIELD.message()
            'Please fill in both weight and height fields'
        """
        messages = {
            ValidationReason.EMPTY_FIELD: "Please fill in both weight and height fields",
            ValidationReason.NOT_A_NUMBER: "Please enter valid numbers",
            ValidationReason.NON_POSITIVE: (
                "Please enter positive numbers for weight and height"
            ),
            ValidationReason.UNREALISTIC_VALUE: (
                "Please enter realistic values for height and weight"
            ),
        }
        return messages[self]

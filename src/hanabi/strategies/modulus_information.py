"""
Bounded integers used to pack information into a single choice.

A ModulusInformation is a value known to lie in [0, modulus). Several of
them can be packed into one number as digits of a mixed-radix numeral
(combine), unpacked again (split), or summed modulo a shared modulus
(add / subtract).
"""


class HatContractViolation(AssertionError):
    """
    Raised when a caller breaks the numeric contract of the hat protocol.

    This is always a bug in the calling strategy (e.g. encode and decode
    asking different questions), never an expected runtime condition.
    """


def require(condition: bool, message: str) -> None:
    """Raise HatContractViolation with message unless condition holds."""
    if not condition:
        raise HatContractViolation(message)


class ModulusInformation:
    """A value in [0, modulus)."""

    def __init__(self, modulus: int, value: int):
        """
        Initialize modulus information.

        Args:
            modulus: Number of distinguishable states (positive)
            value: Actual state, 0 <= value < modulus
        """
        require(modulus >= 1, f"Modulus must be positive, got {modulus}")
        require(0 <= value < modulus, f"Value {value} out of range for modulus {modulus}")
        self.modulus = modulus
        self.value = value

    @classmethod
    def none(cls) -> "ModulusInformation":
        """Information carrying nothing: (modulus=1, value=0)."""
        return cls(1, 0)

    def combine(self, other: "ModulusInformation", max_modulus: int) -> None:
        """
        Append other as the more significant digit, capped at max_modulus.

        Args:
            other: Information to merge in
            max_modulus: Ceiling for the resulting modulus
        """
        require(
            other.modulus <= self.info_remaining(max_modulus),
            f"Cannot combine modulus {other.modulus} into {self!r} with ceiling {max_modulus}",
        )
        self.value = self.value + self.modulus * other.value
        self.modulus = min(max_modulus, self.modulus * other.modulus)
        require(self.value < self.modulus, f"Combine produced out of range value: {self!r}")

    def info_remaining(self, max_modulus: int) -> int:
        """
        Largest modulus that can still be combined into self.

        Combining a value up to result - 1 raises our value to at most
        value + modulus * (result - 1), which must stay below max_modulus.

        Args:
            max_modulus: Ceiling that combine will be called with

        Returns:
            Largest result such that combine(other, max_modulus) is valid
            whenever other.modulus == result
        """
        require(self.value < max_modulus, f"{self!r} already exceeds ceiling {max_modulus}")
        result = (max_modulus - self.value - 1) // self.modulus + 1
        return result

    def split(self, modulus: int) -> "ModulusInformation":
        """
        Take the least significant digit off self.

        Inverse of combine: afterwards self holds the quotient, with the
        tightest modulus consistent with the original one.

        Args:
            modulus: Modulus of the digit to extract

        Returns:
            The extracted digit
        """
        require(modulus >= 1, f"Cannot split off modulus {modulus}")
        require(self.modulus >= modulus, f"Cannot split modulus {modulus} off {self!r}")
        original_modulus = self.modulus
        original_value = self.value
        value = self.value % modulus
        self.value = self.value // modulus
        # Largest modulus with value + (modulus' - 1) * modulus < original_modulus
        self.modulus = (original_modulus - value - 1) // modulus + 1
        require(original_value == value + modulus * self.value, "Split lost information")
        return ModulusInformation(modulus, value)

    def cast_up(self, modulus: int) -> None:
        """Widen the modulus without changing the value."""
        require(self.modulus <= modulus, f"Cannot cast {self!r} down to modulus {modulus}")
        self.modulus = modulus

    def add(self, other: "ModulusInformation") -> None:
        require(self.modulus == other.modulus, f"Modulus mismatch: {self!r} + {other!r}")
        self.value = (self.value + other.value) % self.modulus

    def subtract(self, other: "ModulusInformation") -> None:
        require(self.modulus == other.modulus, f"Modulus mismatch: {self!r} - {other!r}")
        self.value = (self.modulus + self.value - other.value) % self.modulus

    def copy(self) -> "ModulusInformation":
        return ModulusInformation(self.modulus, self.value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ModulusInformation):
            return NotImplemented
        return self.modulus == other.modulus and self.value == other.value

    def __repr__(self) -> str:
        return f"ModulusInformation(modulus={self.modulus}, value={self.value})"

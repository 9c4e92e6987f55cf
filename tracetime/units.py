from dataclasses import dataclass

from tracetime.util import ONE_DAY, ONE_HOUR, ONE_MILLISECOND, ONE_MINUTE, ONE_SECOND

# Units counted in thousands of the next smaller one display as decimals
DECIMAL_OF_PREVIOUS = 1000


@dataclass(frozen=True, kw_only=True)
class UnitStep:
    """One rung of the duration unit ladder.

    Attributes:
        unit: Suffix shown after the value ("d", "ms", ...)
        microseconds: Length of one unit in microseconds
        of_previous: How many of this unit make up the next larger one
    """

    unit: str
    microseconds: int
    of_previous: int

    def __post_init__(self) -> None:
        if self.microseconds <= 0:
            raise ValueError(
                f"UnitStep {self.unit!r} scale must be positive, got {self.microseconds}"
            )
        if self.of_previous <= 0:
            raise ValueError(
                f"UnitStep {self.unit!r} of_previous must be positive, "
                f"got {self.of_previous}"
            )

    @property
    def is_decimal(self) -> bool:
        """True if values in this unit are shown as a single decimal number."""
        return self.of_previous == DECIMAL_OF_PREVIOUS

    def __str__(self) -> str:
        return f"UnitStep({self.unit}, {self.microseconds}μs)"


UNIT_STEPS: tuple[UnitStep, ...] = (
    UnitStep(unit="d", microseconds=ONE_DAY, of_previous=24),
    UnitStep(unit="h", microseconds=ONE_HOUR, of_previous=60),
    UnitStep(unit="m", microseconds=ONE_MINUTE, of_previous=60),
    UnitStep(unit="s", microseconds=ONE_SECOND, of_previous=1000),
    UnitStep(unit="ms", microseconds=ONE_MILLISECOND, of_previous=1000),
    UnitStep(unit="μs", microseconds=1, of_previous=1000),
)

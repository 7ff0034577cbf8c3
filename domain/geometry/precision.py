from enum import Enum
from typing import Optional, Union, overload
import math
from pydantic import Field, model_validator
from domain.geometry.coordinate import Coordinate
from utils.base_model import ImmutableModel


class PrecisionModelType(Enum):
    """Kinds of precision model."""
    FLOATING = "floating"
    FIXED = "fixed"


class PrecisionModel(ImmutableModel):
    """
    Policy governing how coordinates are represented.

    A floating model keeps arbitrary real values. A fixed model snaps values
    to a grid with spacing ``1 / scale``; a scale of 100 keeps two decimal
    places, a scale of 0.1 rounds to multiples of ten.
    """
    precision_type: PrecisionModelType = Field(
        default=PrecisionModelType.FLOATING,
        description="Floating or fixed precision"
    )
    scale: float = Field(
        default=0.0,
        description="Grid scale factor (only meaningful for a fixed model)"
    )

    @model_validator(mode='after')
    def validate_scale(self) -> 'PrecisionModel':
        """Validate that a fixed model has a positive, finite scale."""
        if self.precision_type is PrecisionModelType.FIXED:
            if not (self.scale > 0 and math.isfinite(self.scale)):
                raise ValueError(f"Fixed precision scale must be positive and finite, got {self.scale}")
        return self

    @classmethod
    def floating(cls) -> 'PrecisionModel':
        """Create a floating precision model."""
        return cls(precision_type=PrecisionModelType.FLOATING)

    @classmethod
    def fixed(cls, scale: float) -> 'PrecisionModel':
        """Create a fixed precision model with the given scale factor."""
        return cls(precision_type=PrecisionModelType.FIXED, scale=scale)

    @property
    def is_floating(self) -> bool:
        return self.precision_type is PrecisionModelType.FLOATING

    @property
    def grid_size(self) -> float:
        """Spacing of the precision grid, or 0.0 for a floating model."""
        if self.is_floating:
            return 0.0
        return 1.0 / self.scale

    @overload
    def make_precise(self, value: float) -> float: ...

    @overload
    def make_precise(self, value: Coordinate) -> Coordinate: ...

    def make_precise(self, value: Union[float, Coordinate]) -> Union[float, Coordinate]:
        """
        Snap a value or a coordinate to this model's grid.

        Values are rounded half up (towards positive infinity). A floating
        model returns its input unchanged, as do non-finite values.

        Args:
            value: An ordinate value or a Coordinate

        Returns:
            The snapped value, of the same type as the input. Coordinates are
            returned as new instances.
        """
        if isinstance(value, Coordinate):
            if self.is_floating:
                return value
            return Coordinate(x=self._round(value.x), y=self._round(value.y))
        if self.is_floating:
            return value
        return self._round(value)

    def _round(self, value: float) -> float:
        if not math.isfinite(value):
            return value
        return math.floor(value * self.scale + 0.5) / self.scale

    def __str__(self) -> str:
        if self.is_floating:
            return "Floating"
        return f"Fixed (Scale={self.scale})"


def is_floating(pm: Optional[PrecisionModel]) -> bool:
    """Test whether a precision model is floating; an absent model counts as floating."""
    if pm is None:
        return True
    return pm.is_floating

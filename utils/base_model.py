# utils/base_model.py
from typing import TypeVar, Any, Dict, cast
from pydantic import BaseModel

T = TypeVar('T', bound=BaseModel)


class ImmutableModel(BaseModel):
    """
    Base class for all geometry and overlay values.

    Every value handed out by the overlay support code is a fresh, frozen
    instance, so callers may share them freely between threads:
    - Immutability: All instances are frozen after creation
    - Copyability: Modified copies are made via with_changes()
    """
    model_config = {
        "frozen": True,  # Make all instances immutable
    }

    def field_values(self) -> Dict[str, Any]:
        """Return the declared fields of this instance without serializing nested models."""
        return {name: getattr(self, name) for name in type(self).model_fields}

    def with_changes(self, **changes: Any) -> T:
        """
        Create a new instance with specified changes.

        Nested models are passed through as instances rather than dumped to
        dictionaries, so subclasses held in base-class typed fields (a
        LineString inside a GeometryCollection, say) keep their type.

        Args:
            **changes: Keyword arguments with field values to change

        Returns:
            New instance with updated values, re-run through validation

        Raises:
            ValueError: If an invalid field name is provided
        """
        current_data = self.field_values()

        for key, value in changes.items():
            if key not in current_data:
                raise ValueError(f"Invalid field: {key}")
            current_data[key] = value

        return cast(T, self.__class__.model_validate(current_data))

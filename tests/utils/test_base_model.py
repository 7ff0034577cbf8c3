import pytest
from typing import Optional, Tuple
from domain.geometry.collection import GeometryCollection
from domain.geometry.coordinate import Coordinate
from domain.geometry.geometry import Geometry
from domain.geometry.line_string import LineString
from domain.geometry.point import Point
from utils.base_model import ImmutableModel


class SimpleModel(ImmutableModel):
    """Simple test model with basic attributes."""
    name: str
    value: int


class HolderModel(ImmutableModel):
    """Model holding geometries in base-class typed fields."""
    title: str
    items: Tuple[Geometry, ...] = ()
    extra: Optional[Geometry] = None


class TestImmutableModel:
    """Test suite for ImmutableModel base class."""

    def test_immutability(self):
        """Test that models are immutable after creation."""
        model = SimpleModel(name="test", value=42)

        with pytest.raises(Exception):
            model.name = "changed"

        with pytest.raises(Exception):
            model.value = 100

    def test_with_changes_basic(self):
        """Test creating modified copies with with_changes() method."""
        original = SimpleModel(name="test", value=42)

        modified = original.with_changes(name="updated")

        assert original.name == "test"
        assert modified.name == "updated"
        assert modified.value == 42
        assert original is not modified

    def test_with_changes_invalid_field(self):
        """Test that with_changes() raises error for invalid field names."""
        model = SimpleModel(name="test", value=42)

        with pytest.raises(ValueError) as exc_info:
            model.with_changes(nonexistent="value")

        assert "Invalid field: nonexistent" in str(exc_info.value)

    def test_with_changes_revalidates(self):
        """Test that changed values go through validation again."""
        line = LineString(points=(Coordinate(x=0.0, y=0.0), Coordinate(x=1.0, y=0.0)))

        with pytest.raises(ValueError):
            line.with_changes(points=(Coordinate(x=0.0, y=0.0),))

    def test_with_changes_keeps_subclass_instances(self):
        """Test that geometries held in base-class fields keep their concrete type."""
        point = Point(coordinate=Coordinate(x=1.0, y=2.0))
        line = LineString(points=(Coordinate(x=0.0, y=0.0), Coordinate(x=1.0, y=0.0)))
        original = HolderModel(title="Example", items=(point, line))

        modified = original.with_changes(title="Updated", extra=GeometryCollection())

        assert modified.title == "Updated"
        assert isinstance(modified.items[0], Point)
        assert isinstance(modified.items[1], LineString)
        assert isinstance(modified.extra, GeometryCollection)
        assert original.extra is None

    def test_field_values(self):
        model = SimpleModel(name="test", value=1)
        assert model.field_values() == {"name": "test", "value": 1}

    def test_chained_with_changes(self):
        """Test that with_changes can be chained."""
        original = SimpleModel(name="test", value=1)

        result = original.with_changes(name="step1") \
            .with_changes(value=2) \
            .with_changes(name="final")

        assert result.name == "final"
        assert result.value == 2
        assert original.name == "test"
        assert original.value == 1

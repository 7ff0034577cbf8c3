import pytest
from domain.geometry.envelope import Envelope
from domain.geometry.precision import PrecisionModel
from domain.overlay.envelope_safety import expand_distance, safe_overlap_envelope

BOXES = [
    Envelope.from_bounds(0.0, 10.0, 0.0, 4.0),
    Envelope.from_bounds(-5.0, 5.0, 100.0, 130.0),
    Envelope.from_bounds(1.0, 1.0, 2.0, 2.0),  # Zero area
    Envelope.from_bounds(0.0, 8.0, 3.0, 3.0),  # Zero height
]

PRECISION_MODELS = [
    PrecisionModel.floating(),
    PrecisionModel.fixed(1.0),
    PrecisionModel.fixed(1000.0),
    None,
]


class TestExpandDistance:
    def test_floating_margin_is_tenth_of_smaller_side(self):
        env = Envelope.from_bounds(0.0, 10.0, 0.0, 4.0)
        assert expand_distance(env, PrecisionModel.floating()) == pytest.approx(0.4)

    def test_absent_model_is_floating(self):
        env = Envelope.from_bounds(0.0, 10.0, 0.0, 4.0)
        assert expand_distance(env, None) == pytest.approx(0.4)

    def test_fixed_margin_is_three_grid_cells(self):
        env = Envelope.from_bounds(0.0, 10.0, 0.0, 4.0)
        assert expand_distance(env, PrecisionModel.fixed(100.0)) == pytest.approx(0.03)
        assert expand_distance(env, PrecisionModel.fixed(0.5)) == pytest.approx(6.0)

    def test_fixed_margin_independent_of_envelope(self):
        pm = PrecisionModel.fixed(10.0)
        assert expand_distance(Envelope(), pm) == pytest.approx(0.3)
        assert expand_distance(Envelope.from_bounds(0.0, 1e6, 0.0, 1e6), pm) == pytest.approx(0.3)

    def test_floating_zero_area_margin(self):
        env = Envelope.from_bounds(0.0, 8.0, 3.0, 3.0)
        assert expand_distance(env, PrecisionModel.floating()) == 0.0


class TestSafeOverlapEnvelope:
    @pytest.mark.parametrize("env", BOXES)
    @pytest.mark.parametrize("pm", PRECISION_MODELS)
    def test_contains_input_and_expands_symmetrically(self, env, pm):
        safe = safe_overlap_envelope(env, pm)
        margin = expand_distance(env, pm)

        assert safe.covers(env)
        assert env.min_x - safe.min_x == pytest.approx(margin)
        assert safe.max_x - env.max_x == pytest.approx(margin)
        assert env.min_y - safe.min_y == pytest.approx(margin)
        assert safe.max_y - env.max_y == pytest.approx(margin)

    def test_input_not_modified(self):
        env = Envelope.from_bounds(0.0, 10.0, 0.0, 4.0)
        safe = safe_overlap_envelope(env, PrecisionModel.fixed(1.0))

        assert safe is not env
        assert env == Envelope.from_bounds(0.0, 10.0, 0.0, 4.0)

    def test_null_envelope_stays_null(self):
        assert safe_overlap_envelope(Envelope(), PrecisionModel.floating()).is_null
        assert safe_overlap_envelope(Envelope(), PrecisionModel.fixed(10.0)).is_null

from domain.geometry.dimension import Dimension


class TestDimension:
    def test_ordering(self):
        assert Dimension.POINT < Dimension.CURVE < Dimension.SURFACE
        assert max(Dimension.POINT, Dimension.SURFACE) is Dimension.SURFACE
        assert min(Dimension.CURVE, Dimension.SURFACE) is Dimension.CURVE

    def test_symbol(self):
        assert Dimension.FALSE.symbol == "F"
        assert Dimension.POINT.symbol == "0"
        assert Dimension.CURVE.symbol == "1"
        assert Dimension.SURFACE.symbol == "2"

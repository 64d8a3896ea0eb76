import pytest

from hydrocyl.catalog.seals import SealType, lookup_by_diameter, piston_seal, rod_seal, wiper_seal
from hydrocyl.core.errors import InvalidDimensionError


class TestSealCatalog:
    @pytest.mark.parametrize("bore,width", [(63.0, 18.0), (100.0, 22.5), (140.0, 26.5)])
    def test_piston_seal_by_bore(self, bore: float, width: float) -> None:
        assert piston_seal(bore).width == width
        assert piston_seal(bore).code == "K19"

    @pytest.mark.parametrize("rod,height", [(20.0, 5.0), (50.0, 8.0), (90.0, 12.0)])
    def test_rod_seal_height(self, rod: float, height: float) -> None:
        assert rod_seal(rod).height == height

    def test_wiper(self) -> None:
        wiper = wiper_seal(45.0)
        assert wiper.code == "K17"
        assert wiper.width == 9.0

    def test_range_lower_bound_inclusive(self) -> None:
        assert piston_seal(80.0).width == 22.5
        assert piston_seal(79.99).width == 18.0

    def test_below_first_range_falls_back_to_first_profile(self) -> None:
        assert piston_seal(30.0).width == 18.0
        assert rod_seal(10.0).code == "K33"
        assert rod_seal(10.0).height == 5.0

    def test_open_ended_last_range(self) -> None:
        assert wiper_seal(500.0).width == 12.0

    def test_lookup_accepts_tag(self) -> None:
        assert lookup_by_diameter("rod", 30.0) == lookup_by_diameter(SealType.ROD, 30.0)

    @pytest.mark.parametrize(
        "func,value",
        [(piston_seal, 0.0), (rod_seal, -1.0), (wiper_seal, 0.0)],
    )
    def test_non_positive_diameter(self, func, value: float) -> None:
        with pytest.raises(InvalidDimensionError):
            func(value)

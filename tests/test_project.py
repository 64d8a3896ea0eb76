import json
from pathlib import Path

import pytest

from hydrocyl.core.errors import InvalidDimensionError, InvalidStrokeError, MountingValidationError
from hydrocyl.design.cylinder import HydraulicCylinder
from hydrocyl.design.mounting import FrontFlange, SphericalBearing
from hydrocyl.project import DesignProject, load_project, save_project

EXAMPLE = Path(__file__).resolve().parents[1] / "data" / "projects" / "press_80_45.json"


@pytest.fixture()
def project(cylinder: HydraulicCylinder, front_flange: FrontFlange) -> DesignProject:
    return DesignProject(cylinder=cylinder, mounting=front_flange, name="Пресс 80/45")


class TestRecords:
    def test_round_trip(self, project: DesignProject) -> None:
        assert DesignProject.from_record(project.to_record()) == project

    def test_record_layout(self, project: DesignProject) -> None:
        record = project.to_record()
        assert set(record) == {"name", "cylinder", "mounting"}
        assert record["mounting"]["category"] == "frontFlange"
        assert record["cylinder"]["boreDiameter"] == 80.0

    def test_name_optional(self, project: DesignProject) -> None:
        record = project.to_record()
        del record["name"]
        assert DesignProject.from_record(record).name == ""

    def test_missing_cylinder(self, project: DesignProject) -> None:
        record = project.to_record()
        del record["cylinder"]
        with pytest.raises(InvalidDimensionError) as exc:
            DesignProject.from_record(record)
        assert exc.value.parameter_name == "cylinder"

    def test_missing_mounting(self, project: DesignProject) -> None:
        record = project.to_record()
        del record["mounting"]
        with pytest.raises(MountingValidationError) as exc:
            DesignProject.from_record(record)
        assert exc.value.parameter_name == "mounting"

    def test_cylinder_revalidated(self, project: DesignProject) -> None:
        record = project.to_record()
        record["cylinder"]["closedLength"] = 450.0
        with pytest.raises(InvalidStrokeError):
            DesignProject.from_record(record)

    def test_unknown_mounting_category(self, project: DesignProject) -> None:
        record = project.to_record()
        record["mounting"]["category"] = "tieRod"
        with pytest.raises(MountingValidationError):
            DesignProject.from_record(record)


class TestFiles:
    def test_save_and_load(self, project: DesignProject, tmp_path: Path) -> None:
        path = save_project(project, tmp_path / "nested" / "press.json")
        assert path.exists()
        assert load_project(path) == project

    def test_file_is_readable_json(self, project: DesignProject, tmp_path: Path) -> None:
        path = save_project(project, tmp_path / "press.json")
        text = path.read_text(encoding="utf-8")
        assert "Пресс" in text
        assert json.loads(text)["mounting"]["boltCount"] == 6

    def test_load_example(self) -> None:
        project = load_project(EXAMPLE)
        assert isinstance(project.mounting, FrontFlange)
        assert project.cylinder.piston.compact_seal_width == 22.5
        assert project.mounting.validate()
        assert project.advisories() == []

    def test_load_rejects_non_object(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        with pytest.raises(InvalidDimensionError):
            load_project(path)

    def test_load_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_project(tmp_path / "absent.json")


class TestSummary:
    def test_reference_values(self, project: DesignProject) -> None:
        s = project.summary()
        assert s["name"] == "Пресс 80/45"
        assert s["mounting"] == "frontFlange"
        assert s["pressure_bar"] == pytest.approx(200.0)
        assert s["min_closed_length_mm"] == pytest.approx(600.5)
        assert s["open_length_mm"] == pytest.approx(1200.0)
        assert s["push_force_kn"] == pytest.approx(95.504, abs=1e-3)
        assert s["pull_force_n"] == pytest.approx(65286.2, abs=0.5)
        assert s["pull_push_ratio"] == pytest.approx(0.6836, abs=1e-4)
        assert s["wall_thickness_mm"] == pytest.approx(6.093, abs=1e-3)
        assert s["total_weight_kg"] == pytest.approx(20.24, rel=1e-2)
        assert s["buckling_factor"] == pytest.approx(6.067, abs=1e-3)
        assert s["buckling_safe"] is True

    def test_infeasible_wall(self, front_flange: FrontFlange) -> None:
        cyl = HydraulicCylinder(pressure=150.0, bore_diameter=80.0, rod_diameter=45.0, stroke=500.0, closed_length=700.0)
        s = DesignProject(cylinder=cyl, mounting=front_flange).summary()
        assert s["wall_thickness_mm"] is None
        assert s["total_weight_kg"] is None
        assert s["push_force_n"] > 0

    def test_advisories_use_mounting(self, cylinder: HydraulicCylinder, spherical_bearing: SphericalBearing) -> None:
        project = DesignProject(cylinder=cylinder, mounting=spherical_bearing)
        assert [a.code for a in project.advisories()] == ["BUCKLING_RISK"]
        assert project.summary()["buckling_safe"] is False

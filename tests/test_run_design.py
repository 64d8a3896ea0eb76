import importlib.util
from pathlib import Path

import pandas as pd
import pytest

from hydrocyl.project import load_project

REPO_ROOT = Path(__file__).resolve().parents[1]
EXAMPLE = REPO_ROOT / "data" / "projects" / "press_80_45.json"

RAW = [
    "--pressure", "20",
    "--bore", "80",
    "--rod", "45",
    "--stroke", "500",
    "--closed-length", "700",
]
FLANGE = [
    "--mounting", "frontFlange",
    "--mount", "flangeDiameter=160",
    "--mount", "boltCircleDiameter=130",
    "--mount", "boltCount=6",
]


@pytest.fixture(scope="module")
def run_design():
    spec = importlib.util.spec_from_file_location("run_design", REPO_ROOT / "scripts" / "run_design.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestRunDesign:
    def test_project_file(self, run_design, capsys) -> None:
        assert run_design.main(["--project", str(EXAMPLE)]) == 0
        out = capsys.readouterr().out
        assert "Hydraulic Cylinder Design Check - Пресс 80/45" in out
        assert "push_force_kn" in out
        assert "No design advisories" in out

    def test_raw_parameters(self, run_design, capsys) -> None:
        assert run_design.main(RAW + FLANGE + ["--name", "raw"]) == 0
        out = capsys.readouterr().out
        assert "frontFlange" in out
        assert "buckling_safe" in out

    def test_blocking_advisory_exit_code(self, run_design, capsys) -> None:
        argv = RAW + ["--mounting", "sphericalBearing", "--mount", "sphereDiameter=30", "--mount", "boreDiameter=20"]
        assert run_design.main(argv) == 2
        assert "[CRITICAL] BUCKLING_RISK" in capsys.readouterr().out

    def test_invalid_cylinder(self, run_design, capsys) -> None:
        argv = ["--pressure", "20", "--bore", "80", "--rod", "90", "--stroke", "500", "--closed-length", "700"]
        assert run_design.main(argv + FLANGE) == 1
        assert "Design error" in capsys.readouterr().out

    def test_invalid_mounting(self, run_design, capsys) -> None:
        argv = RAW + ["--mounting", "frontFlange", "--mount", "flangeDiameter=100",
                      "--mount", "boltCircleDiameter=130", "--mount", "boltCount=6"]
        assert run_design.main(argv) == 1
        assert "boltCircleDiameter" in capsys.readouterr().out

    def test_missing_options(self, run_design, capsys) -> None:
        assert run_design.main(["--pressure", "20"]) == 1
        assert "missing required options" in capsys.readouterr().out

    def test_bad_mount_pair(self, run_design, capsys) -> None:
        assert run_design.main(RAW + ["--mount", "boltCount"]) == 1
        assert "KEY=VALUE" in capsys.readouterr().out

    def test_csv_requires_sweep(self, run_design, tmp_path, capsys) -> None:
        assert run_design.main(["--project", str(EXAMPLE), "--csv", str(tmp_path / "s.csv")]) == 1
        assert "--csv requires --sweep" in capsys.readouterr().out

    def test_sweep_to_csv(self, run_design, tmp_path, capsys) -> None:
        csv_path = tmp_path / "out" / "sweep.csv"
        argv = ["--project", str(EXAMPLE), "--sweep", "100", "1500", "100", "--csv", str(csv_path)]
        assert run_design.main(argv) == 0
        out = capsys.readouterr().out
        assert "15 points" in out
        assert "max safe stroke: 800.00 mm" in out
        df = pd.read_csv(csv_path)
        assert list(df.columns) == ["stroke_mm", "open_length_mm", "critical_load_n", "buckling_factor", "is_safe"]
        assert len(df) == 15

    def test_bad_sweep_step(self, run_design, capsys) -> None:
        assert run_design.main(["--project", str(EXAMPLE), "--sweep", "100", "1500", "0"]) == 1
        assert "STEP must be > 0" in capsys.readouterr().out

    def test_save(self, run_design, tmp_path) -> None:
        path = tmp_path / "saved.json"
        assert run_design.main(RAW + FLANGE + ["--name", "saved", "--save", str(path)]) == 0
        project = load_project(path)
        assert project.name == "saved"
        assert project.cylinder.stroke == 500.0

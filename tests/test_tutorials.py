import runpy
from pathlib import Path

import pytest

TUTORIALS = sorted((Path(__file__).resolve().parents[1] / "tutorials").glob("*.py"))


@pytest.mark.parametrize("path", TUTORIALS, ids=lambda p: p.stem)
def test_tutorial_main_runs(path, capsys):
    namespace = runpy.run_path(str(path), run_name="tutorial")
    namespace["main"]()
    out = capsys.readouterr().out
    assert out.strip()


def test_parallel_tutorial_reports_equivalence(capsys):
    path = next(p for p in TUTORIALS if p.stem == "02_parallel_enumeration")
    runpy.run_path(str(path), run_name="tutorial")["main"]()
    out = capsys.readouterr().out
    assert "same_content: True" in out
    assert "routed_same_content: True" in out

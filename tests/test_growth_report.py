import importlib
import json
import logging

import pytest

import tools.growth_report
from tools.growth_report import format_report, main, run_growth


def test_run_growth_contains_every_point():
    report = run_growth(points=200, radius=50, seed=3)
    min_x, min_y, width, height = report["logical"]
    assert min_x >= -50 and min_x + width - 1 <= 50
    assert min_y >= -50 and min_y + height - 1 <= 50
    assert report["reallocations"] == report["events"].get("reallocate", 0)
    assert report["reallocations"] < 200


def test_run_growth_is_deterministic():
    assert run_growth(50, 100, seed=1) == run_growth(50, 100, seed=1)


def test_format_report():
    text = format_report(run_growth(10, 5, seed=0))
    assert "reallocations:" in text
    assert "capacity:" in text


def test_import_and_run_growth_leave_logging_alone():
    logger = logging.getLogger("growth_report")
    handlers = list(logger.handlers)
    importlib.reload(tools.growth_report)
    tools.growth_report.run_growth(5, 5, seed=2)
    assert logger.handlers == handlers


def test_main_prints_json(capsys):
    main(["--points", "20", "--radius", "10", "--seed", "4", "--json"])
    report = json.loads(capsys.readouterr().out)
    assert report["points"] == 20
    assert len(report["capacity"]) == 4


def test_main_rejects_negative_points():
    with pytest.raises(SystemExit):
        main(["--points", "-1"])

from __future__ import annotations

import json
from pathlib import Path

import pytest

import frame_points
from framing.controller import EXTRA_RANGE_METERS


def test_prints_pose_for_points(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = frame_points.main(["--point", "0,0", "--point", "1,1,20", "--no-elevation", "--heading", "10"])

    assert exit_code == 0
    pose = json.loads(capsys.readouterr().out)
    assert pose["center"]["lat"] == pytest.approx(0.5)
    assert pose["center"]["lng"] == pytest.approx(0.5)
    assert pose["center"]["altitude"] == pytest.approx(10.0)
    assert pose["tilt"] == 60.0
    assert pose["heading"] == 10.0


def test_fly_to_output(capsys: pytest.CaptureFixture[str]) -> None:
    frame_points.main(["--point", "0,0", "--point", "1,1", "--no-elevation"])
    pose = json.loads(capsys.readouterr().out)

    frame_points.main(["--point", "0,0", "--point", "1,1", "--no-elevation", "--fly-to"])
    camera = json.loads(capsys.readouterr().out)

    assert camera["range"] == pytest.approx(pose["range"] + EXTRA_RANGE_METERS)
    assert camera["roll"] == 0.0
    assert camera["duration_millis"] == 5000


def test_reads_points_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    points_path = tmp_path / "points.json"
    points_path.write_text(json.dumps({"points": [{"lat": 10, "lng": 20}, [12, 22, 4]]}))

    exit_code = frame_points.main(["--points-json", str(points_path), "--no-elevation"])

    assert exit_code == 0
    pose = json.loads(capsys.readouterr().out)
    assert pose["center"]["lat"] == pytest.approx(11.0)
    assert pose["center"]["altitude"] == pytest.approx(2.0)


def test_no_points_exits_with_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert frame_points.main(["--no-elevation"]) == 2
    assert "Cannot frame points" in capsys.readouterr().err


def test_invalid_padding_exits_with_error(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = frame_points.main(["--point", "0,0", "--no-elevation", "--padding", "0", "0.5", "0", "0.6"])

    assert exit_code == 2
    assert "visible viewport" in capsys.readouterr().err


def test_rejects_malformed_point() -> None:
    with pytest.raises(SystemExit):
        frame_points.parse_args(["--point", "north,south"])
    with pytest.raises(SystemExit):
        frame_points.parse_args(["--point", "95,0"])


def test_writes_preview(tmp_path: Path) -> None:
    preview = tmp_path / "framing.png"

    exit_code = frame_points.main(
        ["--point", "0,0", "--point", "1,1", "--no-elevation", "--padding", "0.05", "0.05", "0.05", "0.35", "--preview", str(preview)]
    )

    assert exit_code == 0
    assert preview.exists()
    assert preview.stat().st_size > 0


def test_points_json_out_of_range_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    points_path = tmp_path / "points.json"
    points_path.write_text(json.dumps([{"lat": 10, "lng": 20}, {"lat": 95, "lng": 20}]))

    exit_code = frame_points.main(["--points-json", str(points_path), "--no-elevation"])

    assert exit_code == 2
    assert "out of range" in capsys.readouterr().err

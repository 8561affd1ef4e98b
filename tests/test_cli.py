"""Tests for the geoclip command line."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

from geoclip.cli import main as cli_main


def _write(path: Path, obj: object) -> str:
    path.write_text(json.dumps(obj))
    return str(path)


def test_cli_clip_writes_to_stdout(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """clip reads a GeoJSON file and prints the clipped geometry."""
    src = _write(
        tmp_path / 'line.geojson',
        {'type': 'LineString', 'coordinates': [[170.0, 0.0], [-170.0, 0.0]]},
    )
    monkeypatch.setattr(sys, 'argv', ['geoclip', 'clip', src])
    rc = cli_main.main()
    assert rc == 0
    out = json.loads(capsys.readouterr().out)
    assert out['type'] == 'MultiLineString'
    assert len(out['coordinates']) == 2


def test_cli_clip_writes_output_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """clip -o writes the result to a file."""
    src = _write(
        tmp_path / 'in.geojson',
        {
            'type': 'Feature',
            'properties': {'id': 7},
            'geometry': {'type': 'LineString', 'coordinates': [[0.0, 0.0], [10.0, 5.0]]},
        },
    )
    dest = tmp_path / 'out.geojson'
    monkeypatch.setattr(
        sys, 'argv', ['geoclip', 'clip', src, '-o', str(dest), '--indent', '2']
    )
    assert cli_main.main() == 0
    out = json.loads(dest.read_text())
    assert out['properties'] == {'id': 7}
    assert out['geometry']['type'] == 'LineString'


def test_cli_clip_reports_missing_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """A missing input file returns exit code 1 with an error message."""
    monkeypatch.setattr(sys, 'argv', ['geoclip', 'clip', str(tmp_path / 'nope.geojson')])
    assert cli_main.main() == 1
    assert 'Error:' in capsys.readouterr().err


def test_cli_clip_reports_bad_geojson(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Malformed JSON and non-object input are reported as errors."""
    bad = tmp_path / 'bad.geojson'
    bad.write_text('{not json')
    monkeypatch.setattr(sys, 'argv', ['geoclip', 'clip', str(bad)])
    assert cli_main.main() == 1
    src = _write(tmp_path / 'list.geojson', [1, 2, 3])
    monkeypatch.setattr(sys, 'argv', ['geoclip', 'clip', src])
    assert cli_main.main() == 1
    assert 'JSON object' in capsys.readouterr().err


def test_cli_boundary(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """boundary prints the nine-point rectangle as a LineString."""
    monkeypatch.setattr(sys, 'argv', ['geoclip', 'boundary', '--direction=-1'])
    assert cli_main.main() == 0
    out = json.loads(capsys.readouterr().out)
    assert out['type'] == 'LineString'
    assert len(out['coordinates']) == 9
    assert out['coordinates'][0] == pytest.approx([-180.0, -90.0])

import re

import pytest

from orbitprop.cli import main

ISS_1 = "1 25544U 98067A   20140.34419374 -.00000374  00000-0  13653-5 0  9990"
ISS_2 = "2 25544  51.6433 131.2277 0001338 330.3524 173.1622 15.49372617227549"
NOAA_1 = "1 33591U 09005A   16163.48990228  .00000077  00000-0  66998-4 0  9990"
NOAA_2 = "2 33591  99.0394 120.2160 0013054 232.8317 127.1662 14.12079902378332"
GEO_1 = "1 24208U 96044A   06177.04061740 -.00000094  00000-0  10000-3 0  1600"
GEO_2 = "2 24208   3.8536  80.0121 0026640 311.0977  48.3000  1.00778054 36119"

SUMMARY = re.compile(
    r"Tle Parsed:Error: (\d+):(\d+)\nAbove:Below horizon: (\d+):(\d+)\n")


def _write(tmp_path, lines):
    path = tmp_path / "tles.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def _summary(text):
    match = SUMMARY.search(text)
    assert match is not None
    return tuple(int(group) for group in match.groups())


def test_missing_file_flag_exits_with_status_one(capsys):
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 1
    assert "All flags are required" in capsys.readouterr().out


def test_unreadable_file_exits_with_status_one(tmp_path, capsys):
    with pytest.raises(SystemExit) as info:
        main(["-file", str(tmp_path / "absent.txt")])
    assert info.value.code == 1
    assert "Error opening file" in capsys.readouterr().err


def test_header_echoes_arguments(tmp_path, capsys):
    path = _write(tmp_path, [])
    assert main(["-file", str(path), "-alt", "1.5", "-lon", "12.65",
                 "-lat", "55.6167"]) == 0
    out = capsys.readouterr().out
    assert out.startswith(
        f"Altitude: 1.50\nLongitude: 12.65\nLatitude: 55.62\nFile: {path}\n")
    assert _summary(out) == (0, 0, 0, 0)


def test_comments_and_short_lines_are_skipped(tmp_path, capsys):
    path = _write(tmp_path, [
        "# a comment",
        "// another comment",
        "ISS (ZARYA)",
        "1 short line",
        "",
        ISS_1,
        "2 also too short",
        ISS_2,
        NOAA_1,
        NOAA_2,
    ])
    main(["--file", str(path)])
    parsed, errors, above, below = _summary(capsys.readouterr().out)
    assert (parsed, errors) == (2, 0)
    assert above + below <= parsed


def test_malformed_tle_is_counted_as_error(tmp_path, capsys):
    broken = ISS_1.replace(" 20140.", " 2x140.")
    path = _write(tmp_path, [broken, ISS_2])
    main(["-file", str(path)])
    captured = capsys.readouterr()
    assert _summary(captured.out)[:2] == (0, 1)
    assert "could not parse TLE" in captured.err


def test_satellite_report_shows_epoch_and_look_result(tmp_path, capsys):
    path = _write(tmp_path, [GEO_1, GEO_2])
    main(["-file", str(path), "-lat", "0.9", "-lon", "0.2", "-alt", "0.1"])
    out = capsys.readouterr().out
    assert re.search(
        r"24208:\n\tepoch 2006-06-26T00:58:29\.343Z\n\t"
        r"(below horizon|azimuth: -?\d+\.\d\d\n\televation: -?\d+\.\d\d)\n",
        out)
    parsed, errors, above, below = _summary(out)
    assert (parsed, errors) == (1, 0)
    assert above + below == 1


def test_odd_line_left_over_is_ignored(tmp_path, capsys):
    path = _write(tmp_path, [GEO_1, GEO_2, ISS_1])
    main(["-file", str(path)])
    parsed, errors, _, _ = _summary(capsys.readouterr().out)
    assert (parsed, errors) == (1, 0)
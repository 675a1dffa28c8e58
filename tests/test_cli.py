import json
import os
import pytest

from filetree.cli import build_parser, main


@pytest.fixture
def two_file_directory(tmp_path):
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "b.txt").write_text("b")
    return str(tmp_path)


def test_layout_prints_json(two_file_directory, capsys):
    exit_code = main(["layout", two_file_directory])

    assert exit_code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["root"] == two_file_directory
    assert data["space"]["total_leaves"] == 2
    assert data["tree"]["x"] == 10.0
    assert data["tree"]["y"] == 0.0


def test_layout_y_scale(two_file_directory, capsys):
    main(["layout", two_file_directory, "--y-scale", "0.5"])

    data = json.loads(capsys.readouterr().out)
    assert data["space"]["y_spacing"] == 200.0


def test_layout_invalid_path(tmp_path, capsys):
    exit_code = main(["layout", str(tmp_path / "missing")])

    assert exit_code == 1
    assert "Invalid path." in capsys.readouterr().err


def test_layout_bad_y_scale(two_file_directory, capsys):
    exit_code = main(["layout", two_file_directory, "--y-scale", "0"])

    assert exit_code == 1
    assert "Y scale must be positive" in capsys.readouterr().err


def test_command_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_serve_defaults():
    args = build_parser().parse_args(["serve"])

    assert args.host == "127.0.0.1"
    assert args.port == 8000


def test_layout_undecodable_name(tmp_path, capsys):
    try:
        with open(os.path.join(os.fsencode(tmp_path), b"bad\xff.txt"), "wb") as f:
            f.write(b"x")
    except OSError:
        pytest.skip("filesystem rejects non-UTF-8 names")

    exit_code = main(["layout", str(tmp_path)])

    assert exit_code == 0
    data = json.loads(capsys.readouterr().out)
    assert [c["name"] for c in data["tree"]["children"]] == ["bad\\xff.txt"]

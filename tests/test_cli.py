#!/usr/bin/env python3
"""
Tests for the command line interface
"""

import pytest

from fuzzyfind import __version__
from fuzzyfind import finder as finder_module
from fuzzyfind.cli import main, parse_args, config_from_args

pytestmark = pytest.mark.usefixtures("restore_logging")


def test_prints_matches(make_tree, capsys):
    make_tree({".gitignore": "*.log\n", "src/main.py": "", "main.log": ""})

    assert main(["main"]) == 0

    out, _ = capsys.readouterr()
    assert out.splitlines() == ["src/main.py"]


def test_insensitive_flag(make_tree, capsys):
    make_tree({"README.md": ""})

    assert main(["readme"]) == 0
    assert capsys.readouterr().out == ""

    assert main(["-i", "readme"]) == 0
    assert capsys.readouterr().out == "README.md\n"


def test_empty_term_is_reported(make_tree, capsys):
    make_tree({"main.py": ""})

    assert main([""]) == 0

    out, err = capsys.readouterr()
    assert out == ""
    assert "No valid input given." in err


def test_missing_root_is_reported(tmp_path, capsys):
    assert main(["--root", str(tmp_path / "nope"), "x"]) == 0
    assert "not a readable directory" in capsys.readouterr().err


def test_unlistable_root_is_reported(make_tree, monkeypatch, capsys):
    make_tree({"main.py": ""})

    def scandir(path):
        raise PermissionError(13, "Permission denied", path)

    monkeypatch.setattr(finder_module.os, "scandir", scandir)

    assert main(["main"]) == 0

    out, err = capsys.readouterr()
    assert out == ""
    assert "Permission denied" in err


def test_root_prefix_is_only_used_for_output(make_tree, capsys):
    make_tree({"srv/data/zebra.txt": "", "srv/data/yak.txt": ""})

    assert main(["--root", "srv/data", "s"]) == 0
    assert capsys.readouterr().out == ""

    assert main(["--root", "srv/data", "y"]) == 0
    assert capsys.readouterr().out == "srv/data/yak.txt\n"


def test_zero_matches_exit_code(make_tree, capsys):
    make_tree({"main.py": ""})
    assert main(["zzz"]) == 0
    assert capsys.readouterr().out == ""


def test_missing_term_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 2


def test_invalid_ignore_filename(capsys):
    assert main(["--ignore-file", "a/b", "x"]) == 2
    assert "bare file name" in capsys.readouterr().err


def test_verbose_writes_diagnostics_to_stderr(make_tree, capsys):
    make_tree({"main.py": ""})

    assert main(["-v", "main"]) == 0

    out, err = capsys.readouterr()
    assert out == "main.py\n"
    assert "Matching main.py against main" in err


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_config_from_args(monkeypatch):
    monkeypatch.setenv("FUZZYFIND_INSENSITIVE", "true")
    monkeypatch.setenv("FUZZYFIND_IGNORE_FILENAME", ".ignore")

    config = config_from_args(parse_args(["term"]))
    assert config.insensitive
    assert config.ignore_filename == ".ignore"
    assert config.use_defaults

    config = config_from_args(parse_args([
        "--ignore-file", ".fuzzyignore", "--no-defaults",
        "--exclude", "*.tmp", "--exclude", "dist/", "--root", "src", "term",
    ]))
    assert config.ignore_filename == ".fuzzyignore"
    assert not config.use_defaults
    assert config.extra_patterns == ["*.tmp", "dist/"]
    assert config.root == "src"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

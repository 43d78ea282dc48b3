"""Tests for the command line entry point."""

from pathlib import Path

import pytest

from member_reflector.domain.models import BindingFlags
from member_reflector.main import binding_flags_from_args, main, parse_args


@pytest.fixture
def cli_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Run the command line from an empty directory with logs in tmp_path."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MEMBERS_LOG_DIR", str(tmp_path / "logs"))
    return tmp_path


@pytest.mark.integration
def test_lists_members_of_class(cli_env: Path, capsys) -> None:
    """Test that every member of the target class is printed."""
    with pytest.raises(SystemExit) as exc_info:
        main(["fractions:Fraction"])

    out = capsys.readouterr().out
    assert exc_info.value.code == 0
    assert out.startswith("fractions.Fraction:")
    assert "property" in out
    assert "_numerator" in out
    assert (cli_env / "logs").is_dir()


@pytest.mark.integration
def test_public_only(cli_env: Path, capsys) -> None:
    """Test that --public-only hides underscore members."""
    with pytest.raises(SystemExit):
        main(["fractions:Fraction", "--public-only"])

    out = capsys.readouterr().out
    assert " numerator" in out
    assert "_numerator" not in out


@pytest.mark.integration
def test_target_from_environment(cli_env: Path, monkeypatch, capsys) -> None:
    """Test that the target can come from MEMBERS_TARGET."""
    monkeypatch.setenv("MEMBERS_TARGET", "fractions:Fraction")

    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 0
    assert "fractions.Fraction:" in capsys.readouterr().out


@pytest.mark.integration
def test_missing_target(cli_env: Path, capsys) -> None:
    """Test that a missing target is a configuration error."""
    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 1
    assert "Configuration error" in capsys.readouterr().err


@pytest.mark.integration
def test_unknown_module(cli_env: Path, capsys) -> None:
    """Test that an unimportable target exits with an error."""
    with pytest.raises(SystemExit) as exc_info:
        main(["member_reflector_missing_module:Thing"])

    assert exc_info.value.code == 1
    assert "Cannot load" in capsys.readouterr().err


@pytest.mark.unit
def test_binding_flags_from_args() -> None:
    """Test the member filter built from command line switches."""
    assert binding_flags_from_args(parse_args(["x:Y"])) == BindingFlags.ALL
    assert binding_flags_from_args(parse_args(["x:Y", "--public-only"])) == (
        BindingFlags.PUBLIC | BindingFlags.INSTANCE | BindingFlags.STATIC
    )
    assert binding_flags_from_args(parse_args(["x:Y", "--public-only", "--instance-only"])) == (
        BindingFlags.PUBLIC | BindingFlags.INSTANCE
    )

"""Unit tests for the __main__ entry point."""

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from kubevirt_validations.__main__ import (
    EXIT_INPUT_ERROR,
    EXIT_INVALID,
    EXIT_VALID,
    main,
    run_validation,
)
from kubevirt_validations.strings import (
    BMC_PROTOCOL_ERROR,
    DNS1123_START_ERROR,
    VIRTUAL_MACHINE_EXISTS,
    VIRTUAL_MACHINE_TEMPLATE_EXISTS,
)


class TestRunValidation:
    """Tests for run_validation function."""

    def test_valid_value(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a valid value prints valid and exits 0."""
        assert run_validation("mac", "01:23:45:67:89:ab") == EXIT_VALID
        assert capsys.readouterr().out.strip() == "valid"

    def test_invalid_value(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test an invalid value prints the message and exits 1."""
        assert run_validation("bmc-url", "http://1.2.3.4:1234") == EXIT_INVALID
        assert capsys.readouterr().out.strip() == BMC_PROTOCOL_ERROR

    def test_invalid_value_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test an invalid value is only printed, not logged as an error."""
        with caplog.at_level(logging.DEBUG):
            assert run_validation("mac", "01:23") == EXIT_INVALID
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]

    def test_unknown_kind(self) -> None:
        """Test unknown validators are an input error."""
        assert run_validation("nope", "value") == EXIT_INPUT_ERROR

    def test_name_without_existing(self) -> None:
        """Test name checks without an entity file only check syntax."""
        assert run_validation("name", "vm1") == EXIT_VALID
        assert run_validation("name", "-vm1") == EXIT_INVALID

    def test_name_with_existing(
        self,
        write_file: Callable[[str, str], Path],
        vm1: dict[str, Any],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test duplicate names are reported against the entity file."""
        path = write_file("vms.json", json.dumps({"items": [vm1]}))
        code = run_validation("name", "vm1", namespace="test-namespace", existing_path=str(path))
        assert code == EXIT_INVALID
        assert capsys.readouterr().out.strip() == VIRTUAL_MACHINE_EXISTS

        code = run_validation("name", "vm1", namespace="other", existing_path=str(path))
        assert code == EXIT_VALID

    def test_template_name(
        self,
        write_file: Callable[[str, str], Path],
        vm1: dict[str, Any],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test template mode uses the template message."""
        path = write_file("templates.json", json.dumps([vm1]))
        code = run_validation(
            "name", "vm1", namespace="test-namespace", existing_path=str(path), template=True
        )
        assert code == EXIT_INVALID
        assert capsys.readouterr().out.strip() == VIRTUAL_MACHINE_TEMPLATE_EXISTS

    def test_missing_existing_file(self, tmp_path: Path) -> None:
        """Test an unreadable entity file is an input error."""
        code = run_validation("name", "vm1", existing_path=str(tmp_path / "missing.json"))
        assert code == EXIT_INPUT_ERROR

    def test_malformed_existing_file(self, write_file: Callable[[str, str], Path]) -> None:
        """Test a malformed entity file is an input error."""
        path = write_file("vms.json", "{broken")
        assert run_validation("name", "vm1", existing_path=str(path)) == EXIT_INPUT_ERROR

    def test_directory_as_existing_file(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test an unreadable entity path is an input error, not a crash."""
        directory = tmp_path / "vms.json"
        directory.mkdir()
        assert run_validation("name", "vm1", existing_path=str(directory)) == EXIT_INPUT_ERROR
        assert "Cannot read" in caplog.text


class TestMain:
    """Tests for main function."""

    def test_main_valid(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test main returns the validation exit code."""
        with patch("sys.argv", ["kubevirt-validations", "dns1123", "my-vm"]):
            assert main() == EXIT_VALID
        assert "valid" in capsys.readouterr().out

    def test_main_passes_options(self) -> None:
        """Test main forwards parsed options to run_validation."""
        argv = [
            "kubevirt-validations",
            "name",
            "vm1",
            "--namespace",
            "ns",
            "--existing",
            "vms.yaml",
            "--template",
        ]
        with (
            patch("sys.argv", argv),
            patch("kubevirt_validations.__main__.run_validation", return_value=EXIT_VALID) as mock_run,
        ):
            assert main() == EXIT_VALID
        mock_run.assert_called_once_with(
            kind="name",
            value="vm1",
            namespace="ns",
            existing_path="vms.yaml",
            template=True,
        )

    def test_main_value_after_double_dash(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test values starting with a dash are passed after --."""
        with patch("sys.argv", ["kubevirt-validations", "dns1123", "--", "-abc"]):
            assert main() == EXIT_INVALID
        assert capsys.readouterr().out.strip() == f"{DNS1123_START_ERROR}."

    def test_main_rejects_unknown_kind(self) -> None:
        """Test argparse rejects unknown validators."""
        with patch("sys.argv", ["kubevirt-validations", "nope", "value"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 2

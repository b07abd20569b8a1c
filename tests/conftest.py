"""Pytest configuration and fixtures for kubevirt-validations tests."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

TEST_NAMESPACE = "test-namespace"


def make_vm(name: str, namespace: str = TEST_NAMESPACE, kind: str = "VirtualMachine") -> dict[str, Any]:
    """Build a minimal raw Kubernetes object for a VM-like entity."""
    return {
        "apiVersion": "kubevirt.io/v1",
        "kind": kind,
        "metadata": {"name": name, "namespace": namespace},
        "spec": {"running": False},
    }


@pytest.fixture
def vm1() -> dict[str, Any]:
    """Existing VM named vm1 in the test namespace."""
    return make_vm("vm1")


@pytest.fixture
def vm2() -> dict[str, Any]:
    """Existing VM named vm2 in the test namespace."""
    return make_vm("vm2")


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Fixture providing a helper that writes content to a temporary file.

    Usage:
        def test_something(write_file):
            path = write_file("vms.json", "[]")
    """

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def vm_factory() -> Callable[..., dict[str, Any]]:
    """Fixture providing ``make_vm`` for tests that need custom entities."""
    return make_vm


@pytest.fixture
def namespace() -> str:
    """Namespace the vm1 and vm2 fixtures live in."""
    return TEST_NAMESPACE

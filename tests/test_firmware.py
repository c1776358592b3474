"""Unit tests for firmware version validation."""

from __future__ import annotations

import pytest

from services.firmware import is_valid_firmware_version


@pytest.mark.parametrize(
    "version",
    [
        "0.0.0",
        "1.0.0",
        "1.2.3",
        "10.20.30",
        "1.0.0-alpha",
        "1.0.0-alpha.1",
        "1.0.0-0.3.7",
        "1.0.0-x.7.z.92",
        "1.0.0-x-y-z.--",
        "1.0.0-0A.is.legal",
        "1.0.0+build.5",
        "1.0.0+0012.build",
        "1.0.0-beta+exp.sha.5114f85",
        "99999999999999999999.0.0",
    ],
)
def test_accepts_semantic_versions(version: str) -> None:
    assert is_valid_firmware_version(version) is True


@pytest.mark.parametrize(
    "version",
    [
        "",
        "1",
        "1.0",
        "1.0.0.0",
        "01.0.0",
        "1.01.0",
        "1.0.01",
        "v1.0.0",
        " 1.0.0",
        "1.0.0 ",
        "1.0.0\n",
        "1.0.0-",
        "1.0.0+",
        "1.0.0-01",
        "1.0.0-alpha..1",
        "1.0.0+build..5",
        "1.0.0-alpha_beta",
        "not-a-version",
        "bad",
        "１.0.0",
        "1.0.0-béta",
    ],
)
def test_rejects_invalid_versions(version: str) -> None:
    assert is_valid_firmware_version(version) is False

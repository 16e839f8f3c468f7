from __future__ import annotations

import re

from task_manager import __version__
from task_manager.core.config import Settings


def test_version_is_semver() -> None:
    pattern = r"^\d+\.\d+\.\d+$"
    assert re.match(pattern, __version__) is not None


def test_settings_report_package_version() -> None:
    assert Settings().version == __version__

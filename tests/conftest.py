"""Fixtures for the test suite."""

import pytest

from givebrevo.activity_log import ActivityLog


@pytest.fixture(autouse=True)
def activity_log_file(settings, tmp_path):
    """Write the activity log of each test in its own directory."""
    settings.GIVEBREVO_LOG_FILE = tmp_path / "givewp_brevo_log.txt"
    return settings.GIVEBREVO_LOG_FILE


@pytest.fixture
def activity_log(activity_log_file):
    """Return the activity log, initialized like at startup."""
    log = ActivityLog(activity_log_file)
    log.ensure_exists()
    return log

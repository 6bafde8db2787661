from __future__ import annotations

import pytest

from textedit_history.runtime import telemetry


@pytest.fixture(autouse=True, scope="session")
def quiet_telemetry() -> None:
    telemetry.configure(preset="silent")

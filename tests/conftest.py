from typing import Any, Dict

import pytest


@pytest.fixture(scope="session", autouse=True)
def configure_default_settings() -> Dict[str, Any]:
    """
    Utrzymuje spójne środowisko testowe - testy nie mogą zależeć od
    przypadkowego pliku .env ani zmiennych środowiskowych.
    """

    from aegis_core.config import SETTINGS

    overrides = {
        "AMBIGUITY_THRESHOLD": 50,
        "SUPPORTED_LANGUAGES": ["en", "ko", "ja"],
        "CONTEXT_MAX_TOKENS": 500,
        "CONTEXT_CHARS_PER_TOKEN": 4,
        "LOG_TO_FILE": False,
    }

    original_values = {attr: getattr(SETTINGS, attr) for attr in overrides}

    for attr, value in overrides.items():
        setattr(SETTINGS, attr, value)

    yield original_values

    for attr, value in original_values.items():
        setattr(SETTINGS, attr, value)


@pytest.fixture
def telemetry_snapshot() -> Dict[str, Any]:
    """Przykładowy snapshot telemetrii w kształcie zwracanym przez kolektor."""
    return {
        "platform": {"os": "linux", "arch": "x64"},
        "cpu": {
            "usage": 75,
            "topProcesses": [
                {"name": "node", "pid": 101, "cpu": 30.5},
                {"name": "python", "pid": 202, "cpu": 20},
                {"name": "postgres", "pid": 303, "cpu": 10},
                {"name": "sshd", "pid": 404, "cpu": 1},
            ],
        },
        "memory": {"used": "11.0 GB", "total": "16.0 GB", "usage": 69},
        "disk": [
            {"mount": "/", "used": "60 GB", "total": "100 GB", "usage": 60},
            {"mount": "/home", "used": "200 GB", "total": "500 GB", "usage": 40},
        ],
        "network": [{"port": 3000}, {"port": 8080}],
        "errors": [{"message": "Kernel panic - not syncing"}],
        "docker": [
            {"name": "postgres", "status": "running"},
            {"name": "redis", "status": "running"},
        ],
        "git": {"branch": "main", "status": "clean"},
    }

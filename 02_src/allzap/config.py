"""Project-level configuration and path helpers."""

import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"

DEFAULT_SIM_INTERVAL = 15.0  # seconds between simulated inbound messages
TRACE_LOG_CAPACITY = 1000

LOGS_DIR.mkdir(parents=True, exist_ok=True)


def resolve_sim_interval(env_value: str | float | None = None) -> float:
    """Resolve SIM_INTERVAL_SECONDS to a positive number of seconds."""
    if env_value is None:
        env_value = os.getenv("SIM_INTERVAL_SECONDS")
    if env_value is None or env_value == "":
        return DEFAULT_SIM_INTERVAL

    try:
        interval = float(env_value)
    except (TypeError, ValueError):
        return DEFAULT_SIM_INTERVAL

    return interval if interval > 0 else DEFAULT_SIM_INTERVAL


def resolve_sim_autostart(env_value: str | None = None) -> bool:
    """Resolve SIM_AUTOSTART to a boolean."""
    if env_value is None:
        env_value = os.getenv("SIM_AUTOSTART", "")
    return env_value.strip().lower() in {"1", "true", "yes", "on"}

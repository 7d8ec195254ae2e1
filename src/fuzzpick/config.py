"""Config loading with precedence: CLI flags > env vars > ~/.fuzzpick file."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from pathlib import Path

from fuzzpick.utils.scoring import CASE_SMART, validate_case

CONFIG_FILE = Path.home() / ".fuzzpick"

_TRUTHY = ("1", "true", "yes")


@dataclass
class Config:
    case: str = CASE_SMART
    verbose: bool = False


def _read_config_file() -> dict[str, str]:
    """Read key=value pairs from ~/.fuzzpick."""
    if not CONFIG_FILE.exists():
        return {}
    values: dict[str, str] = {}
    for line in CONFIG_FILE.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, _, value = line.partition("=")
        values[key.strip().lower()] = value.strip().strip('"').strip("'")
    return values


def save_config(case: str) -> None:
    """Save config to ~/.fuzzpick with restricted permissions."""
    CONFIG_FILE.write_text(f"case={validate_case(case)}\n")
    CONFIG_FILE.chmod(stat.S_IRUSR | stat.S_IWUSR)  # 0o600


def load_config(
    *,
    case: str | None = None,
    verbose: bool | None = None,
) -> Config:
    """Load config with precedence: explicit args > env vars > config file."""
    file_values = _read_config_file()

    resolved_case = (
        case or os.environ.get("FUZZPICK_CASE") or file_values.get("case") or CASE_SMART
    )

    return Config(
        case=validate_case(resolved_case),
        verbose=resolve_verbose(verbose, file_values=file_values),
    )


def resolve_verbose(
    verbose: bool | None = None,
    *,
    file_values: dict[str, str] | None = None,
) -> bool:
    """Resolve the verbose flag alone, without validating the rest of the config."""
    if verbose is not None:
        return verbose
    if file_values is None:
        file_values = _read_config_file()
    raw = os.environ.get("FUZZPICK_VERBOSE") or file_values.get("verbose") or ""
    return raw.strip().lower() in _TRUTHY

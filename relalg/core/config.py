"""
Engine settings

A single process-level settings object. Operators read it at execute
time, so changes apply to the next execution.

Example:
    ```python
    from relalg.core.config import configure

    configure(nulls_last=False)
    ```
"""

import logging
from dataclasses import dataclass, fields, replace
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Tunable engine behavior"""

    pad_value: Any = None  # fill value for unmatched attributes in outer joins
    nulls_last: bool = True  # OrderBy places None after all other values
    max_display_width: int = 30  # column width limit of the table formatter


_settings = Settings()


def get_settings() -> Settings:
    """Return the active settings"""
    return _settings


def configure(**overrides: Any) -> Settings:
    """
    Replace one or more settings

    Args:
        **overrides: Setting names and their new values

    Returns:
        The new active settings

    Raises:
        ValueError: If an unknown setting name is passed
    """
    global _settings

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ValueError(
            f"Unknown setting(s): {', '.join(unknown)}. Available: {', '.join(sorted(known))}"
        )

    _settings = replace(_settings, **overrides)
    logger.debug("Settings updated: %s", _settings)
    return _settings


def reset_settings() -> Settings:
    """Restore the default settings"""
    global _settings
    _settings = Settings()
    return _settings

"""Runtime configuration for pytoll."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pytoll.exceptions import TollConfigError

_TRUE_VALUES = frozenset({"1", "true", "yes", "y", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "n", "off"})


def _env_bool(name: str, value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise TollConfigError(f"{name} must be a boolean flag, got {value!r}")


@dataclasses.dataclass(frozen=True)
class TollConfig:
    """Run configuration.

    Parameters
    ----------
    report_unfinished : bool
        Emit a diagnostic for every crossing still waiting for its exit
        when input ends.  Off by default: unmatched entries are dropped
        silently.
    encoding : str
        Text encoding used to decode standard input.
    debug : bool
        Enable DEBUG logging from the command-line entry point.
    """

    report_unfinished: bool = False
    encoding: str = "utf-8"
    debug: bool = False

    @classmethod
    def from_env(cls, **overrides: Any) -> TollConfig:
        """Create configuration from ``TOLL_*`` environment variables.

        Explicit keyword arguments override environment values.

        Raises
        ------
        TollConfigError
            When a boolean variable holds an unrecognised value.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        if "report_unfinished" not in overrides:
            config_kwargs["report_unfinished"] = _env_bool(
                "TOLL_REPORT_UNFINISHED",
                env.get("TOLL_REPORT_UNFINISHED"),
                False,
            )

        if "debug" not in overrides:
            config_kwargs["debug"] = _env_bool("TOLL_DEBUG", env.get("TOLL_DEBUG"), False)

        encoding_env = env.get("TOLL_ENCODING")
        if encoding_env is not None and "encoding" not in overrides:
            config_kwargs["encoding"] = encoding_env.strip()

        config_kwargs.update(overrides)

        return cls(**config_kwargs)

"""Engine settings resolved from ``WIKITEXT_ENGINE_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from wikitext_engine.runtime import telemetry


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Behaviour switches shared by the session and the attribute query."""

    probe_neighbors: bool = True
    strict_selection: bool = False
    log_preset: Optional[str] = None

    @classmethod
    def from_env(cls) -> "EngineSettings":
        preset = os.getenv(f"{telemetry.ENV_PREFIX}LOG_PRESET") or None
        return cls(
            probe_neighbors=telemetry.env_flag("PROBE_NEIGHBORS", True),
            strict_selection=telemetry.env_flag("STRICT_SELECTION", False),
            log_preset=preset.strip().lower() if preset else None,
        )

    def apply_logging(self) -> None:
        """Switch telemetry to ``log_preset`` when one is set."""

        if self.log_preset:
            telemetry.configure(preset=self.log_preset)


__all__ = ["EngineSettings"]

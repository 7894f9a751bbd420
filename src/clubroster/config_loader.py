"""Persist and load CLI configuration profiles."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

from clubroster.membership.dates import MIN_JOIN_YEAR

ENV_MEMBERS_FILE = "CLUBROSTER_MEMBERS_FILE"
ENV_LOG_LEVEL = "CLUBROSTER_LOG_LEVEL"


@dataclass(frozen=True)
class AppConfig:
    members_file: Path = Path("members.jsonl")
    log_level: str = "WARNING"
    min_join_year: int = MIN_JOIN_YEAR

    @classmethod
    def load(cls, path: Path) -> "AppConfig":
        data = json.loads(path.read_text(encoding="utf-8"))
        defaults = cls()
        return cls(
            members_file=Path(data.get("members_file", defaults.members_file)),
            log_level=str(data.get("log_level", defaults.log_level)).upper(),
            min_join_year=int(data.get("min_join_year", defaults.min_join_year)),
        )

    def save(self, path: Path) -> None:
        payload = {
            "members_file": str(self.members_file),
            "log_level": self.log_level,
            "min_join_year": self.min_join_year,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def with_env(self, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Overlay ``CLUBROSTER_*`` environment variables."""

        environ = os.environ if environ is None else environ
        updated = self
        members_file = environ.get(ENV_MEMBERS_FILE)
        if members_file:
            updated = replace(updated, members_file=Path(members_file))
        log_level = environ.get(ENV_LOG_LEVEL)
        if log_level:
            updated = replace(updated, log_level=log_level.upper())
        return updated

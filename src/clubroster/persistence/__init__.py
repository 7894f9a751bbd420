"""Persistence layer for the membership collection."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Iterable, List, Literal

from pydantic import BaseModel, ValidationError
from pydantic.config import ConfigDict

from clubroster.models import Member


logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


class PersistenceError(RuntimeError):
    """Raised when the member file cannot be read or written."""


class StoredMember(BaseModel):
    """On-disk shape of a single member line."""

    v: Literal[1] = FORMAT_VERSION
    dni: str
    name: str
    joined_on: date

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def from_member(cls, member: Member) -> "StoredMember":
        return cls(dni=member.dni, name=member.name, joined_on=member.joined_on)

    def to_member(self) -> Member:
        return Member(dni=self.dni, name=self.name, joined_on=self.joined_on)


@dataclass
class LoadResult:
    members: List[Member] = field(default_factory=list)
    skipped: int = 0


class MemberFile:
    """Line-based JSON file holding one member per line.

    Each line is a complete record tagged with its format version, so a damaged
    line only costs that record. The whole file is rewritten on save.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> LoadResult:
        if not self.path.exists():
            logger.info("Member file %s not found; starting empty", self.path)
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.touch()
            except OSError as exc:
                raise PersistenceError(f"Could not create {self.path}: {exc}") from exc
            return LoadResult()

        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            raise PersistenceError(f"Could not read {self.path}: {exc}") from exc

        result = LoadResult()
        for line_no, line in enumerate(raw.split(b"\n"), start=1):
            if not line.strip():
                continue
            try:
                stored = StoredMember.model_validate_json(line.decode("utf-8"))
                result.members.append(stored.to_member())
            except UnicodeDecodeError:
                result.skipped += 1
                logger.warning("Skipping record with invalid UTF-8 at %s:%d", self.path, line_no)
            except ValidationError as exc:
                result.skipped += 1
                logger.warning(
                    "Skipping unreadable record at %s:%d (%d error(s))",
                    self.path,
                    line_no,
                    exc.error_count(),
                )
        logger.debug("Loaded %d member(s) from %s", len(result.members), self.path)
        return result

    def save(self, members: Iterable[Member]) -> int:
        lines = [
            json.dumps(StoredMember.from_member(member).model_dump(mode="json"), ensure_ascii=False)
            for member in members
        ]
        payload = "".join(f"{line}\n" for line in lines)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise PersistenceError(f"Could not write {self.path}: {exc}") from exc
        logger.debug("Saved %d member(s) to %s", len(lines), self.path)
        return len(lines)


__all__ = ["FORMAT_VERSION", "LoadResult", "MemberFile", "PersistenceError", "StoredMember"]

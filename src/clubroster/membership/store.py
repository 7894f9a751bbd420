"""Ordered membership collection with load/save through ``MemberFile``."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterator, List, Optional, Tuple

from clubroster.membership.dates import MIN_JOIN_YEAR, parse_join_date
from clubroster.models import Member
from clubroster.persistence import LoadResult, MemberFile


logger = logging.getLogger(__name__)


class MemberNotFoundError(LookupError):
    """Raised when no member matches the requested DNI."""

    def __init__(self, dni: str):
        super().__init__(f"No member with DNI {dni!r}.")
        self.dni = dni


class MembershipStore:
    """Members in insertion order. Lookups act on the first DNI match."""

    def __init__(self, members: Optional[List[Member]] = None, *, min_join_year: int = MIN_JOIN_YEAR):
        self._members: List[Member] = list(members or [])
        self.min_join_year = min_join_year

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Member]:
        return iter(list(self._members))

    @property
    def members(self) -> Tuple[Member, ...]:
        return tuple(self._members)

    def add(self, member: Member) -> None:
        self._members.append(member)
        logger.debug("Added member %s", member.dni)

    def find(self, dni: str) -> Optional[Member]:
        for member in self._members:
            if member.dni == dni:
                return member
        return None

    def remove(self, dni: str) -> Member:
        for index, member in enumerate(self._members):
            if member.dni == dni:
                del self._members[index]
                logger.debug("Removed member %s", dni)
                return member
        raise MemberNotFoundError(dni)

    def modify(
        self,
        dni: str,
        *,
        name: Optional[str] = None,
        joined_on: date | str | None = None,
        today: Optional[date] = None,
    ) -> Member:
        """Update name and/or join date of the first member matching ``dni``.

        The date is validated before any field is written, so a bad date
        leaves the record untouched.
        """

        member = self.find(dni)
        if member is None:
            raise MemberNotFoundError(dni)
        new_date: Optional[date] = None
        if isinstance(joined_on, str):
            new_date = parse_join_date(joined_on, today=today, min_year=self.min_join_year)
        elif joined_on is not None:
            new_date = joined_on
        if name is not None:
            member.name = name
        if new_date is not None:
            member.joined_on = new_date
        logger.debug("Modified member %s", dni)
        return member

    def list_by_name(self) -> List[Member]:
        return sorted(self._members, key=lambda member: member.name)

    def list_by_tenure(self, today: Optional[date] = None) -> List[Member]:
        today = today or date.today()
        return sorted(self._members, key=lambda member: member.tenure(today), reverse=True)

    def load(self, source: MemberFile) -> LoadResult:
        """Replace the collection with the contents of ``source``."""

        result = source.load()
        self._members = list(result.members)
        return result

    def save(self, destination: MemberFile) -> int:
        return destination.save(self._members)

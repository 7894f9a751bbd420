"""Console driver for the membership program."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from clubroster.console import Console, MenuOption, run_menu
from clubroster.membership.dates import (
    DATE_PATTERN,
    DateValidationError,
    check_day,
    check_month,
    check_year,
    format_join_date,
)
from clubroster.membership.store import MembershipStore
from clubroster.models import Member
from clubroster.persistence import MemberFile, PersistenceError


logger = logging.getLogger(__name__)

_MODIFY_NAME = 1
_MODIFY_DATE = 2
_MODIFY_BOTH = 3


class MembershipApp:
    """Loads the member file, runs the menu, and saves on exit."""

    def __init__(
        self,
        store: MembershipStore,
        storage: MemberFile,
        console: Console,
        *,
        today: Optional[date] = None,
    ) -> None:
        self.store = store
        self.storage = storage
        self.console = console
        self._today = today
        self._load_failed = False

    @property
    def today(self) -> date:
        return self._today or date.today()

    def run(self) -> None:
        self.load()
        run_menu(
            self.console,
            "What do you want to do?",
            [
                MenuOption("Register a member.", self.add_member),
                MenuOption("Remove a member.", self.remove_member),
                MenuOption("Modify a member.", self.modify_member),
                MenuOption("List members by name.", self.list_by_name),
                MenuOption("List members by tenure.", self.list_by_tenure),
            ],
        )
        self.console.say("See you next time.")
        self.save()

    def load(self) -> None:
        try:
            result = self.store.load(self.storage)
        except PersistenceError as exc:
            logger.error("Loading members failed: %s", exc)
            self.console.say("Error reading the member file.")
            self._load_failed = True
            return
        self.console.say(f"Loaded {len(result.members)} member(s).")
        if result.skipped:
            self.console.say(f"Skipped {result.skipped} unreadable record(s).")

    def save(self) -> None:
        if self._load_failed:
            logger.warning("Not saving over %s because it could not be read", self.storage.path)
            self.console.say("The member file could not be read at startup; it was left untouched.")
            return
        try:
            self.store.save(self.storage)
        except PersistenceError as exc:
            logger.error("Saving members failed: %s", exc)
            self.console.say("Error saving the member file.")

    def add_member(self) -> None:
        console = self.console
        dni = console.ask_nonempty("DNI: ")
        name = console.ask("Name: ").strip()
        min_year = self.store.min_join_year

        while True:
            year = console.ask_int("Join year: ")
            try:
                check_year(year, today=self.today, min_year=min_year)
                break
            except DateValidationError as exc:
                console.say(str(exc))
        while True:
            month = console.ask_int("Join month: ")
            try:
                check_month(month)
                break
            except DateValidationError as exc:
                console.say(str(exc))
        while True:
            day = console.ask_int("Join day: ")
            try:
                check_day(day, month)
                break
            except DateValidationError as exc:
                console.say(str(exc))

        self.store.add(Member(dni=dni, name=name, joined_on=date(year, month, day)))
        console.say("Member registered.")

    def remove_member(self) -> None:
        dni = self.console.ask("DNI of the member to remove: ").strip()
        self.store.remove(dni)
        self.console.say("Member removed.")

    def modify_member(self) -> None:
        console = self.console
        dni = console.ask("DNI of the member to modify: ").strip()
        member = self.store.find(dni)
        if member is None:
            console.say(f"No member with DNI {dni!r}.")
            return
        console.say(f"Member found: {self._describe(member)}")
        console.say("What do you want to modify?")
        console.say(f"{_MODIFY_NAME}. Name")
        console.say(f"{_MODIFY_DATE}. Join date")
        console.say(f"{_MODIFY_BOTH}. Both")
        choice = console.ask_int("Choice: ")
        if choice not in (_MODIFY_NAME, _MODIFY_DATE, _MODIFY_BOTH):
            console.say("Invalid option.")
            return

        new_name = None
        new_date = None
        if choice in (_MODIFY_NAME, _MODIFY_BOTH):
            new_name = console.ask("New name: ").strip()
        if choice in (_MODIFY_DATE, _MODIFY_BOTH):
            new_date = console.ask(f"New join date ({DATE_PATTERN}): ")
        try:
            self.store.modify(dni, name=new_name, joined_on=new_date, today=self.today)
        except DateValidationError as exc:
            console.say(f"{exc} Not modified.")
            return
        console.say(f"Updated: {self._describe(member)}")

    def list_by_name(self) -> None:
        for member in self.store.list_by_name():
            self.console.say(self._describe(member))

    def list_by_tenure(self) -> None:
        for member in self.store.list_by_tenure(self.today):
            self.console.say(self._describe(member))

    def _describe(self, member: Member) -> str:
        return (
            f"Member(dni={member.dni!r}, name={member.name!r}, "
            f"joined={format_join_date(member.joined_on)}, tenure={member.tenure(self.today)})"
        )

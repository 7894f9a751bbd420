"""Console driver for the roster program."""

from __future__ import annotations

from clubroster.console import Console, MenuOption, run_menu
from clubroster.models import Player, Position
from clubroster.roster.store import PlayerNotFoundError, RosterStore




class RosterApp:
    def __init__(self, store: RosterStore, console: Console) -> None:
        self.store = store
        self.console = console

    def run(self) -> None:
        run_menu(
            self.console,
            "What do you want to do?",
            [
                MenuOption("Add a player.", self.add_player),
                MenuOption("Remove a player by jersey number.", self.remove_player),
                MenuOption("Show the roster.", self.show_roster),
                MenuOption("Show players by position.", self.show_position),
            ],
        )
        self.console.say("See you next time.")

    def add_player(self) -> None:
        console = self.console
        number = console.ask_int("Jersey number: ")
        dni = console.ask_nonempty("Player DNI: ")
        name = console.ask("Player name: ").strip()
        console.say("Select the player's position:")
        position = console.choose(
            "Enter the number of the position: ",
            list(Position),
            label=lambda item: item.value,
        )
        height = console.ask_float("Player height (metres): ", minimum_exclusive=0.0)
        self.store.add(number, Player(dni=dni, name=name, position=position, height=height))
        console.say("Player added.")

    def remove_player(self) -> None:
        """Prompt for a jersey number until one matches; an empty line cancels."""

        console = self.console
        while True:
            number = console.ask_int(
                "Jersey number of the player to remove (empty to cancel): ",
                allow_cancel=True,
            )
            if number is None:
                console.say("Removal cancelled.")
                return
            try:
                removed = self.store.remove(number)
            except PlayerNotFoundError:
                console.say("That player is not on the roster, enter another number.")
                continue
            console.say(f"Removed player: {removed}")
            return

    def show_roster(self) -> None:
        self.console.say("The roster is:")
        for number, player in self.store.list():
            self.console.say(f"Number {number}: {player}")

    def show_position(self) -> None:
        position = self.console.choose(
            "Enter the number of the position: ",
            list(Position),
            label=lambda item: item.value,
        )
        entries = self.store.filter_by_position(position)
        if not entries:
            self.console.say(f"No players at {position.value}.")
            return
        for number, player in entries:
            self.console.say(f"Number {number}: {player}")

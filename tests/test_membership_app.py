from datetime import date
from pathlib import Path

from clubroster.membership import MembershipApp, MembershipStore
from clubroster.models import Member
from clubroster.persistence import MemberFile, PersistenceError
from tests.helpers import ScriptedConsole

TODAY = date(2026, 10, 16)


def _run(tmp_path: Path, answers, members=None):
    storage = MemberFile(tmp_path / "members.jsonl")
    if members:
        storage.save(members)
    store = MembershipStore()
    console = ScriptedConsole(answers)
    MembershipApp(store, storage, console, today=TODAY).run()
    return store, storage, console


def test_add_member_reprompts_invalid_components_and_saves_on_exit(tmp_path: Path):
    answers = ["1", "111A", "Ana", "1949", "2010", "13", "2", "29", "28", "6"]
    store, storage, console = _run(tmp_path, answers)

    assert [(m.dni, m.name, m.joined_on) for m in store] == [("111A", "Ana", date(2010, 2, 28))]
    assert "Month 13 is not between 1 and 12." in console.lines
    assert "Day 29 is not valid for month 2." in console.lines
    assert any(line.startswith("Year 1949") for line in console.lines)
    assert [m.dni for m in storage.load().members] == ["111A"]


def test_loaded_members_listed_by_tenure(tmp_path: Path):
    members = [
        Member(dni="111A", name="Ana", joined_on=date(2010, 6, 15)),
        Member(dni="222B", name="Bruno", joined_on=date(1995, 11, 30)),
    ]
    _, _, console = _run(tmp_path, ["5", "4", "6"], members)

    assert "Loaded 2 member(s)." in console.lines
    listing = [line for line in console.lines if line.startswith("Member(")]
    assert listing == [
        "Member(dni='222B', name='Bruno', joined=30/11/1995, tenure=30)",
        "Member(dni='111A', name='Ana', joined=15/06/2010, tenure=16)",
        "Member(dni='111A', name='Ana', joined=15/06/2010, tenure=16)",
        "Member(dni='222B', name='Bruno', joined=30/11/1995, tenure=30)",
    ]


def test_remove_unknown_member_is_reported(tmp_path: Path):
    members = [Member(dni="111A", name="Ana", joined_on=date(2010, 6, 15))]
    store, _, console = _run(tmp_path, ["2", "999Z", "2", "111A", "6"], members)

    assert "No member with DNI '999Z'." in console.lines
    assert "Member removed." in console.lines
    assert len(store) == 0


def test_modify_both_with_bad_date_keeps_record(tmp_path: Path):
    members = [Member(dni="111A", name="Ana", joined_on=date(2010, 6, 15))]
    store, _, console = _run(tmp_path, ["3", "111A", "3", "Ana Maria", "29/02/2012", "6"], members)

    member = store.find("111A")
    assert member.name == "Ana"
    assert member.joined_on == date(2010, 6, 15)
    assert any(line.endswith("Not modified.") for line in console.lines)


def test_modify_join_date(tmp_path: Path):
    members = [Member(dni="111A", name="Ana", joined_on=date(2010, 6, 15))]
    store, storage, console = _run(tmp_path, ["3", "111A", "2", "01/01/2000", "6"], members)

    assert store.find("111A").joined_on == date(2000, 1, 1)
    assert "Updated: Member(dni='111A', name='Ana', joined=01/01/2000, tenure=26)" in console.lines
    assert storage.load().members[0].joined_on == date(2000, 1, 1)


def test_modify_unknown_member(tmp_path: Path):
    _, _, console = _run(tmp_path, ["3", "999Z", "6"])
    assert "No member with DNI '999Z'." in console.lines


def test_skipped_records_are_reported(tmp_path: Path):
    path = tmp_path / "members.jsonl"
    path.write_text('{"v": 1, "dni": "111A", "name": "Ana", "joined_on": "2010-06-15"}\ngarbage\n', encoding="utf-8")
    store, _, console = _run(tmp_path, ["6"])

    assert len(store) == 1
    assert "Skipped 1 unreadable record(s)." in console.lines


def test_end_of_input_still_saves(tmp_path: Path):
    store, storage, _ = _run(tmp_path, ["1", "111A", "Ana", "2010", "6", "15"])
    assert [m.dni for m in storage.load().members] == ["111A"]


def test_unreadable_file_is_not_overwritten_on_exit(tmp_path: Path):
    path = tmp_path / "members.jsonl"
    path.mkdir()
    (path / "keep").write_text("x", encoding="utf-8")
    store = MembershipStore()
    console = ScriptedConsole(["1", "111A", "Ana", "2010", "6", "15", "6"])
    MembershipApp(store, MemberFile(path), console, today=TODAY).run()

    assert "Error reading the member file." in console.lines
    assert "The member file could not be read at startup; it was left untouched." in console.lines
    assert "Error saving the member file." not in console.lines
    assert (path / "keep").read_text(encoding="utf-8") == "x"


class _FailingMemberFile(MemberFile):
    def save(self, members):
        raise PersistenceError("disk full")


def test_save_failure_is_reported(tmp_path: Path):
    store = MembershipStore()
    console = ScriptedConsole(["6"])
    MembershipApp(store, _FailingMemberFile(tmp_path / "members.jsonl"), console, today=TODAY).run()

    assert "Loaded 0 member(s)." in console.lines
    assert "Error saving the member file." in console.lines
    assert console.lines[-2] == "See you next time."


def test_invalid_utf8_record_keeps_the_rest_on_disk(tmp_path: Path):
    path = tmp_path / "members.jsonl"
    path.write_bytes(
        b'{"v": 1, "dni": "111A", "name": "Ana", "joined_on": "2010-06-15"}\n'
        b'{"v": 1, "dni": "222B", "name": "\xff\xfe", "joined_on": "1995-11-30"}\n'
    )
    store, storage, console = _run(tmp_path, ["6"])

    assert [m.dni for m in store] == ["111A"]
    assert "Skipped 1 unreadable record(s)." in console.lines
    assert [m.dni for m in storage.load().members] == ["111A"]


def test_blank_dni_is_asked_again_before_the_date(tmp_path: Path):
    store, _, console = _run(tmp_path, ["1", "", "  ", "111A", "Ana", "2010", "6", "15", "6"])

    assert [m.dni for m in store] == ["111A"]
    assert console.lines.count("This field cannot be empty.") == 2
    assert console.prompts[:5] == ["Choice: ", "DNI: ", "DNI: ", "DNI: ", "Name: "]

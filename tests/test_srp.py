from patternkit.srp import Journal


def test_add_entry_numbers_consecutively():
    journal = Journal()
    first = journal.add_entry("I cried today")
    second = journal.add_entry("I ate a bug")
    assert second == first + 1
    assert journal.entries == [f"{first}: I cried today", f"{second}: I ate a bug"]


def test_numbering_is_shared_between_journals():
    a, b = Journal(), Journal()
    n = a.add_entry("one")
    m = b.add_entry("two")
    assert m == n + 1


def test_remove_entry_steps_counter_back():
    journal = Journal()
    n = journal.add_entry("first")
    journal.remove_entry(0)
    assert journal.add_entry("again") == n


def test_str_joins_entries_with_newlines():
    journal = Journal()
    journal.add_entry("a")
    journal.add_entry("b")
    assert str(journal) == "\n".join(journal.entries)
    assert str(Journal()) == ""


def test_save_round_trip(tmp_path):
    journal = Journal()
    journal.add_entry("hello")
    journal.add_entry("world")
    target = tmp_path / "journal.txt"
    journal.save(target)
    assert target.read_text() == str(journal)
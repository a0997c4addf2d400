from __future__ import annotations

from edit_engine.buffer import RegisterBank, RegisterValue
from edit_engine.buffer import search
from edit_engine.buffer.registers import CLIPBOARD, UNNAMED


def test_named_write_mirrors_into_unnamed_register() -> None:
    bank = RegisterBank()

    bank.yank_to(CLIPBOARD, "hello", source="cut")

    assert bank.get(CLIPBOARD) == RegisterValue("hello", source="cut")
    assert bank.get() == RegisterValue("hello", source="cut")
    assert bank.get("z") == RegisterValue("")


def test_snapshot_is_a_copy() -> None:
    bank = RegisterBank()
    bank.yank_to(UNNAMED, "a")

    snapshot = dict(bank.snapshot())
    bank.yank_to(UNNAMED, "b")

    assert snapshot[UNNAMED].text == "a"


def test_find_next_ignores_case_and_does_not_wrap() -> None:
    text = "Foo foo FOO"

    assert search.find_next(text, "foo") == (0, 3)
    assert search.find_next(text, "foo", 1) == (4, 7)
    assert search.find_next(text, "foo", 9) is None
    assert search.find_next(text, "foo", 1, case_sensitive=True) == (4, 7)
    assert search.find_next(text, "") is None


def test_needle_is_literal() -> None:
    assert list(search.iter_matches("a.b axb", "a.b")) == [(0, 3)]


def test_replace_all_is_literal_and_counts() -> None:
    text, count = search.replace_all("Cat cat CAT", "cat", r"\1dog")

    assert text == r"\1dog \1dog \1dog"
    assert count == 3
    assert search.replace_all("abc", "", "x") == ("abc", 0)


def test_matches_splitting_a_cluster_are_skipped() -> None:
    text = "café cafe"

    assert list(search.iter_matches(text, "cafe")) == [(6, 10)]
    assert search.replace_all(text, "cafe", "X") == ("café X", 1)

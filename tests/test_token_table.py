"""Unit tests for the Chicken token table.

WHY: Every encoded byte is a straight table lookup, so a single wrong
entry corrupts every occurrence of that byte in every message. The
table is also built lazily and shared across threads, so first-use
races must not expose a partial table or build it twice.

HOW: Tests check each entry against the bit layout (length, case per
bit position, terminator), compare rebuilt tables, and race several
threads through get_token_table() on a cleared table.

RULES:
- Bit i (0..6) set -> upper case at position i, clear -> lower case
- Bit 7 set <-> token has 8 characters ending in "."
- The table is built at most once per process
"""

import threading
import time

import pytest

from mime_encoders.encoders import chicken
from mime_encoders.encoders.chicken import (
    LOWER_WORD,
    TERMINATOR,
    UPPER_WORD,
    build_token_table,
    get_token_table,
    grow_token,
)

# Tokens worked out by hand from the bit layout (bit 0 -> "C"/"c", ...).
KNOWN_TOKENS = {
    0x00: b"chicken",
    0x01: b"Chicken",
    0x02: b"cHicken",
    0x05: b"ChIcken",
    0x40: b"chickeN",
    0x7F: b"CHICKEN",
    0x80: b"chicken.",
    0x81: b"Chicken.",
    0xAA: b"cHiCkEn.",
    0x55: b"ChIcKeN",
    0xFF: b"CHICKEN.",
}


class TestReferenceWords:
    """The reference words are the same letters in two cases."""

    def test_lower_word_is_case_shifted_upper(self):
        assert UPPER_WORD == "CHICKEN"
        assert LOWER_WORD == "chicken"
        assert len(UPPER_WORD) == len(LOWER_WORD) == 7

    def test_terminator_is_period(self):
        assert TERMINATOR == "."


class TestGrowToken:
    """grow_token() maps one byte value to its token."""

    @pytest.mark.parametrize("value,expected", sorted(KNOWN_TOKENS.items()))
    def test_known_tokens(self, value, expected):
        assert grow_token(value) == expected

    def test_length_depends_only_on_high_bit(self):
        for value in range(256):
            token = grow_token(value)
            if value & 0x80:
                assert len(token) == 8
                assert token.endswith(b".")
            else:
                assert len(token) == 7
                assert b"." not in token

    def test_case_matches_each_low_bit(self):
        for value in range(256):
            token = grow_token(value).decode("ascii")
            for bit in range(7):
                letter = token[bit]
                assert letter.isalpha()
                assert letter.isupper() == bool(value & (1 << bit)), (value, bit)

    def test_letters_follow_reference_word(self):
        for value in range(256):
            token = grow_token(value).decode("ascii")
            assert token[:7].lower() == LOWER_WORD

    def test_tokens_are_ascii(self):
        for value in range(256):
            grow_token(value).decode("ascii")

    @pytest.mark.parametrize("value", [-1, 256, 1000])
    def test_rejects_non_byte_values(self, value):
        with pytest.raises(ValueError):
            grow_token(value)


class TestBuildTokenTable:
    """build_token_table() produces 256 deterministic entries."""

    def test_has_256_entries(self):
        assert len(build_token_table()) == 256

    def test_entry_is_token_for_its_index(self):
        table = build_token_table()
        for value in range(256):
            assert table[value] == grow_token(value)

    def test_rebuild_is_identical(self):
        assert build_token_table() == build_token_table()

    def test_entries_are_unique(self):
        assert len(set(build_token_table())) == 256

    def test_no_entry_empty_or_longer_than_eight(self):
        for token in build_token_table():
            assert 7 <= len(token) <= 8

    def test_table_is_immutable(self):
        table = build_token_table()
        assert isinstance(table, tuple)
        assert all(isinstance(token, bytes) for token in table)


class TestSharedTable:
    """get_token_table() builds once and hands out the same table."""

    def test_builds_on_first_use(self, fresh_token_table):
        assert fresh_token_table._table is None
        table = get_token_table()
        assert fresh_token_table._table is table
        assert table == build_token_table()

    def test_returns_same_object_every_call(self):
        assert get_token_table() is get_token_table()

    def test_builds_once(self, fresh_token_table, monkeypatch):
        calls = []
        original = chicken.build_token_table

        def counting_build():
            calls.append(1)
            return original()

        monkeypatch.setattr(chicken, "build_token_table", counting_build)
        get_token_table()
        get_token_table()
        assert len(calls) == 1

    def test_concurrent_first_use(self, fresh_token_table, monkeypatch):
        """Racing first callers all see one fully built table."""
        calls = []
        original = chicken.build_token_table

        def slow_build():
            calls.append(1)
            time.sleep(0.05)
            return original()

        monkeypatch.setattr(chicken, "build_token_table", slow_build)

        thread_count = 16
        barrier = threading.Barrier(thread_count)
        results = [None] * thread_count

        def worker(index):
            barrier.wait()
            results[index] = get_token_table()

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(thread_count)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(calls) == 1
        first = results[0]
        assert first is not None
        assert len(first) == 256
        assert all(result is first for result in results)
        assert first == original()

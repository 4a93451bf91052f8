from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import pytest

from ordered_merge.adapters.sources import CallableSource, FileSource, FileSourceError, IteratorSource, as_source
from ordered_merge.domain.results import END
from ordered_merge.ports.sequence_source import SequenceSource


def test_iterator_source_pulls_one_value_per_call() -> None:
    source = IteratorSource([1, 2])
    assert source.try_pull() == 1
    assert source.try_pull() == 2
    assert source.try_pull() is END


def test_iterator_source_keeps_reporting_end() -> None:
    # After END the producer is never touched again.
    calls: list[int] = []

    def gen():
        calls.append(1)
        yield 1

    source = IteratorSource(gen())
    assert source.try_pull() == 1
    assert source.try_pull() is END
    assert source.try_pull() is END
    assert calls == [1]


def test_iterator_source_passes_none_through() -> None:
    # None is a value, not end-of-sequence.
    source = IteratorSource([None])
    assert source.try_pull() is None
    assert source.try_pull() is END


def test_callable_source_stops_at_sentinel() -> None:
    done = object()
    values = iter([1, 2, done, 3])
    source = CallableSource(lambda: next(values), sentinel=done)
    assert source.try_pull() == 1
    assert source.try_pull() == 2
    assert source.try_pull() is END
    assert source.try_pull() is END


def test_callable_source_treats_none_as_a_value_by_default() -> None:
    # Without an explicit sentinel only END ends the sequence.
    values = iter([None, 0, END])
    source = CallableSource(lambda: next(values))
    assert source.try_pull() is None
    assert source.try_pull() == 0
    assert source.try_pull() is END


def test_callable_source_matches_sentinel_by_identity() -> None:
    # Values whose == is not a plain bool never reach the sentinel check by equality.
    class Elementwise:
        def __eq__(self, other):
            raise TypeError("ambiguous truth value")

        __hash__ = None

    value = Elementwise()
    source = CallableSource(lambda: value, sentinel=None)
    assert source.try_pull() is value


def test_file_source_skips_blank_lines(tmp_path: Path) -> None:
    path = tmp_path / "values.txt"
    path.write_text("1\n\n  3 \n5\n", encoding="utf-8")
    source = FileSource(path)
    assert [source.try_pull() for _ in range(4)] == [1, 3, 5, END]


def test_file_source_uses_parser(tmp_path: Path) -> None:
    path = tmp_path / "values.txt"
    path.write_text("1.10\n2.5\n", encoding="utf-8")
    source = FileSource(path, parse=Decimal)
    assert source.try_pull() == Decimal("1.10")


def test_file_source_opens_lazily(tmp_path: Path) -> None:
    # Construction does not touch the filesystem; the first pull does.
    source = FileSource(tmp_path / "missing.txt")
    with pytest.raises(FileNotFoundError):
        source.try_pull()


def test_file_source_close_is_idempotent(tmp_path: Path) -> None:
    path = tmp_path / "values.txt"
    path.write_text("1\n2\n", encoding="utf-8")
    source = FileSource(path)
    assert source.try_pull() == 1
    source.close()
    source.close()
    assert source.try_pull() is END


def test_as_source_passes_sources_through() -> None:
    source = IteratorSource([])
    assert as_source(source) is source


def test_as_source_wraps_iterables() -> None:
    wrapped = as_source(range(3))
    assert isinstance(wrapped, SequenceSource)
    assert wrapped.try_pull() == 0


def test_as_source_accepts_custom_pull_objects() -> None:
    # Anything with try_pull satisfies the port without inheriting from it.
    class Countdown:
        def try_pull(self):
            return END

    source = Countdown()
    assert as_source(source) is source


def test_as_source_rejects_non_iterables() -> None:
    with pytest.raises(TypeError):
        as_source(3.14)


def test_file_source_reports_unparseable_line_with_location(tmp_path: Path) -> None:
    path = tmp_path / "values.txt"
    path.write_text("1\n\nabc\n3\n", encoding="utf-8")
    source = FileSource(path)
    assert source.try_pull() == 1
    with pytest.raises(FileSourceError) as info:
        source.try_pull()
    assert info.value.line_no == 3
    assert str(info.value) == f"{path}:3: cannot parse 'abc'"
    assert isinstance(info.value.__cause__, ValueError)


def test_file_source_reports_decimal_parse_failure(tmp_path: Path) -> None:
    # decimal.InvalidOperation is an ArithmeticError, not a ValueError; it is wrapped the same way.
    path = tmp_path / "values.txt"
    path.write_text("1.5\nnope\n", encoding="utf-8")
    source = FileSource(path, parse=Decimal)
    assert source.try_pull() == Decimal("1.5")
    with pytest.raises(FileSourceError) as info:
        source.try_pull()
    assert info.value.line_no == 2


def test_file_source_reports_undecodable_bytes(tmp_path: Path) -> None:
    path = tmp_path / "values.bin"
    path.write_bytes(b"1\n\xff\xfe\n")
    source = FileSource(path)
    with pytest.raises(FileSourceError) as info:
        source.try_pull()
    assert str(path) in str(info.value)
    assert isinstance(info.value.__cause__, UnicodeDecodeError)

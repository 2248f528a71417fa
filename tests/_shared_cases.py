"""Centralized stream cases used across parser/ast/cli tests."""

from __future__ import annotations

from dataclasses import dataclass

from garbagestream.parser import ParseErrorKind


@dataclass(frozen=True, slots=True)
class MetricCase:
    name: str
    source: str
    expect: int


@dataclass(frozen=True, slots=True)
class MalformedCase:
    name: str
    source: str
    kind: ParseErrorKind


GARBAGE_LENGTH_CASES: tuple[MetricCase, ...] = (
    MetricCase(name="empty_garbage", source="<>", expect=0),
    MetricCase(name="random_characters", source="<random characters>", expect=17),
    MetricCase(name="nested_openers_are_literal", source="<<<<>", expect=3),
    MetricCase(name="escaped_closer", source="<{!>}>", expect=2),
    MetricCase(name="escaped_escape", source="<!!>", expect=0),
    MetricCase(name="escape_pairs_then_close", source="<!!!>>", expect=0),
    MetricCase(name="mixed_punctuation", source='<{o"i!a,<{i<a>', expect=10),
)

GROUP_COUNT_CASES: tuple[MetricCase, ...] = (
    MetricCase(name="single_group", source="{}", expect=1),
    MetricCase(name="triple_nested", source="{{{}}}", expect=3),
    MetricCase(name="two_siblings", source="{{},{}}", expect=3),
    MetricCase(name="mixed_nesting", source="{{{},{},{{}}}}", expect=6),
    MetricCase(name="groups_inside_garbage", source="{<{},{},{{}}>}", expect=1),
    MetricCase(name="garbage_siblings", source="{<a>,<a>,<a>,<a>}", expect=1),
    MetricCase(name="wrapped_garbage", source="{{<a>},{<a>},{<a>},{<a>}}", expect=5),
    MetricCase(name="escaped_garbage_closers", source="{{<!>},{<!>},{<!>},{<a>}}", expect=2),
)

SCORE_CASES: tuple[MetricCase, ...] = (
    MetricCase(name="single_group", source="{}", expect=1),
    # 1 + 2 + 3
    MetricCase(name="triple_nested", source="{{{}}}", expect=6),
    # 1 + 2 + 2
    MetricCase(name="two_siblings", source="{{},{}}", expect=5),
    # 1 + 2 + 3 + 3 + 3 + 4
    MetricCase(name="mixed_nesting", source="{{{},{},{{}}}}", expect=16),
    MetricCase(name="garbage_siblings", source="{<a>,<a>,<a>,<a>}", expect=1),
    # 1 + 2 + 2 + 2 + 2
    MetricCase(name="wrapped_garbage", source="{{<ab>},{<ab>},{<ab>},{<ab>}}", expect=9),
    MetricCase(name="wrapped_escaped_escapes", source="{{<!!>},{<!!>},{<!!>},{<!!>}}", expect=9),
    # 1 + 2
    MetricCase(name="escaped_closers_swallow_groups", source="{{<a!>},{<a!>},{<a!>},{<ab>}}", expect=3),
)

MALFORMED_CASES: tuple[MalformedCase, ...] = (
    MalformedCase(name="empty", source="", kind=ParseErrorKind.EMPTY_INPUT),
    MalformedCase(name="leading_letter", source="x", kind=ParseErrorKind.UNEXPECTED_LEADING_CHARACTER),
    MalformedCase(name="lone_garbage_open", source="<", kind=ParseErrorKind.UNTERMINATED_GARBAGE),
    MalformedCase(name="lone_escape", source="<!", kind=ParseErrorKind.DANGLING_ESCAPE),
    MalformedCase(
        name="garbage_without_close",
        source="<random characters",
        kind=ParseErrorKind.UNTERMINATED_GARBAGE,
    ),
    MalformedCase(
        name="garbage_close_escaped",
        source="<random characters!>",
        kind=ParseErrorKind.UNTERMINATED_GARBAGE,
    ),
    MalformedCase(name="lone_group_open", source="{", kind=ParseErrorKind.UNTERMINATED_GROUP),
    MalformedCase(name="group_with_open_garbage", source="{<", kind=ParseErrorKind.UNTERMINATED_GARBAGE),
    MalformedCase(name="group_without_close", source="{<>", kind=ParseErrorKind.UNTERMINATED_GROUP),
    MalformedCase(name="group_close_inside_garbage", source="{<!>}", kind=ParseErrorKind.UNTERMINATED_GARBAGE),
    MalformedCase(name="outer_group_unclosed", source="{{}", kind=ParseErrorKind.UNTERMINATED_GROUP),
)


def case_id(case: MetricCase | MalformedCase) -> str:
    return case.name

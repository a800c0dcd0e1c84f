from __future__ import annotations

import io

from hypothesis import given
from hypothesis import strategies as st

from uerr import UserError, into_user_error
from uerr.render import HELP_FIRST, HELP_REST, REASON_FIRST, REASON_REST

_LINE_CHARS = st.characters(min_codepoint=32, max_codepoint=126)
_LINES = st.text(alphabet=_LINE_CHARS, min_size=0, max_size=30)


@given(st.text())
def test_message_is_preserved(message: str) -> None:
    assert UserError(message).message == message


@given(st.lists(_LINES, max_size=20), st.lists(_LINES, max_size=20))
def test_fluent_and_mutating_forms_are_equivalent(reasons: list[str], tips: list[str]) -> None:
    chained = UserError("boom")
    mutated = UserError("boom")
    for reason in reasons:
        chained = chained.and_reason(reason)
        mutated.add_reason(reason)
    for tip in tips:
        chained = chained.and_help(tip)
        mutated.add_help(tip)

    assert chained.reasons == mutated.reasons == tuple(reasons)
    assert chained.help == mutated.help == tuple(tips)


@given(_LINES, _LINES, st.lists(_LINES, max_size=10), st.lists(_LINES, max_size=10))
def test_render_has_one_line_per_entry_in_order(
    prefix: str,
    message: str,
    reasons: list[str],
    tips: list[str],
) -> None:
    err = UserError(message, reasons=reasons, help=tips)
    stream = io.StringIO()

    err.print_all(prefix, stream=stream)
    lines = stream.getvalue().split("\n")

    assert lines[-1] == ""
    lines = lines[:-1]
    assert len(lines) == 1 + len(reasons) + len(tips)
    assert lines[0] == f"{prefix}{message}"

    expected_reasons = [
        f"{REASON_FIRST if index == 0 else REASON_REST}{reason}"
        for index, reason in enumerate(reasons)
    ]
    expected_tips = [
        f"{HELP_FIRST if index == 0 else HELP_REST}{tip}" for index, tip in enumerate(tips)
    ]
    assert lines[1:] == expected_reasons + expected_tips


@given(st.one_of(st.integers(), st.floats(allow_nan=False), st.text(), st.booleans()))
def test_conversion_uses_text_and_starts_empty(value: object) -> None:
    err = into_user_error(value)

    assert err.message == str(value)
    assert err.reasons == ()
    assert err.help == ()

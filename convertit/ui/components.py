from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Optional, Tuple

import streamlit as st

from convertit.models import ConversionResult, SUPPORTED_CURRENCIES
from convertit.services.conversion import display_text


def format_timestamp(now: Optional[datetime] = None) -> str:
    """e.g. 'Monday, October 19, 2026 at 02:05:09 PM UTC'"""
    now = now or datetime.now().astimezone()
    text = f"{now:%A, %B} {now.day}, {now:%Y} at {now:%I:%M:%S %p}"
    tz = now.tzname()
    return f"{text} {tz}" if tz else text


def render_timestamp(state_key: str = "timestamp") -> str:
    # Computed once per session, not on every rerun
    if state_key not in st.session_state:
        st.session_state[state_key] = format_timestamp()
    st.caption(st.session_state[state_key])
    return st.session_state[state_key]


def render_converter_form(
    on_change: Callable[[], None],
    default_from: str = "USD",
    default_to: str = "EUR",
    currencies: Optional[List[str]] = None,
    state_key: str = "fx",
) -> Tuple[str, str, str]:
    currencies = currencies or SUPPORTED_CURRENCIES
    amount = st.text_input("Amount", value="1", key=f"{state_key}_amount", on_change=on_change)
    cols = st.columns(2)
    with cols[0]:
        from_ccy = st.selectbox(
            "From",
            options=currencies,
            index=_index_of(currencies, default_from),
            key=f"{state_key}_from",
            on_change=on_change,
        )
    with cols[1]:
        to_ccy = st.selectbox(
            "To",
            options=currencies,
            index=_index_of(currencies, default_to),
            key=f"{state_key}_to",
            on_change=on_change,
        )
    return amount, from_ccy, to_ccy


def render_result(result: Optional[ConversionResult], target=None) -> None:
    if target is None:
        target = st
    if result is None:
        return
    if result.ok:
        target.success(display_text(result))
    else:
        target.error(display_text(result))


def _index_of(options: List[str], value: str) -> int:
    try:
        return options.index(value)
    except ValueError:
        return 0

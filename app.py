from __future__ import annotations

import streamlit as st

from convertit.config import get_settings
from convertit.logging_config import setup_logging
from convertit.services.conversion import MSG_LOADING, ConversionController
from convertit.ui.components import render_converter_form, render_result, render_timestamp


def _request_conversion() -> None:
    st.session_state["convert_requested"] = True


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)

    st.set_page_config(page_title="Convertit", page_icon="💱")
    st.title("Currency Converter")
    render_timestamp()

    if "controller" not in st.session_state:
        st.session_state["controller"] = ConversionController()
    # first run converts the default form values
    st.session_state.setdefault("convert_requested", True)
    controller: ConversionController = st.session_state["controller"]

    amount, from_ccy, to_ccy = render_converter_form(
        on_change=_request_conversion,
        default_from=settings.default_from,
        default_to=settings.default_to,
    )
    button_slot = st.empty()
    result_slot = st.empty()

    if st.session_state["convert_requested"]:
        st.session_state["convert_requested"] = False
        # perform() is synchronous: the button stays disabled until it returns
        button_slot.button("Convert", key="convert_pending", disabled=True)
        with st.spinner(MSG_LOADING):
            st.session_state["last_result"] = controller.perform(amount, from_ccy, to_ccy)

    button_slot.button("Convert", key="convert", on_click=_request_conversion)
    render_result(st.session_state.get("last_result"), target=result_slot)


main()

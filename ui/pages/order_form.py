"""Order form page - per-size, per-day quantities for the visible window."""

import pandas as pd
import streamlit as st

from ui.config import get_settings
from yuzuorders.models.common import ExportMode
from yuzuorders.services.controller import OrderController
from yuzuorders.services.order_store import coerce_quantity
from yuzuorders.services.sheet_sync import export_all, export_window


def _cell_key(category: str, size: str, date_key: str) -> str:
    return f"qty::{category}::{size}::{date_key}"


def _on_cell_change(controller: OrderController, category: str, size: str, date_key: str):
    raw = st.session_state.get(_cell_key(category, size, date_key))
    # Clamp to a number; the sign is kept
    quantity = coerce_quantity(raw)
    controller.update(category, size, date_key, quantity if quantity is not None else 0)


def render(controller: OrderController):
    """Render the order form."""
    st.title("Order List")

    include_history = get_settings().export_mode == ExportMode.ALL

    if st.button("Save", type="primary"):
        with st.spinner("Saving to Google Sheets..."):
            result = controller.save(include_history=include_history)
        if result.success:
            st.toast("Saved to Google Sheets.")
        else:
            st.error(result.error)

    render_window_header(controller)
    render_categories(controller)
    render_preview(controller, include_history)


def render_window_header(controller: OrderController):
    """Day labels with back/forward buttons; the center day is emphasised."""
    view = controller.snapshot()
    cols = st.columns([1, 2, 2, 2, 2, 2, 1])

    with cols[0]:
        if st.button("◀", key="shift_back"):
            controller.shift(-1)
            st.rerun()

    for idx, label in enumerate(view.labels):
        with cols[idx + 1]:
            if idx == 2:
                st.markdown(f"**<u>{label}</u>**", unsafe_allow_html=True)
            else:
                st.markdown(label)

    with cols[6]:
        if st.button("▶", key="shift_forward"):
            controller.shift(1)
            st.rerun()


def render_categories(controller: OrderController):
    """One bordered section per category, one input per (size, day)."""
    view = controller.snapshot()

    for category, sizes in view.table.items():
        with st.container(border=True):
            st.subheader(category.capitalize())

            for size in sizes:
                cols = st.columns([2, 2, 2, 2, 2, 2])
                cols[0].markdown(f"**{size}**")

                for idx, date_key in enumerate(view.keys):
                    qty = controller.get(category, size, date_key)
                    cols[idx + 1].number_input(
                        f"{category} {size} {date_key}",
                        value=float(qty),
                        step=1.0,
                        format="%g",
                        key=_cell_key(category, size, date_key),
                        label_visibility="collapsed",
                        on_change=_on_cell_change,
                        args=(controller, category, size, date_key),
                    )


def render_preview(controller: OrderController, include_history: bool):
    """Show the rows a save would send."""
    view = controller.snapshot()
    if include_history:
        payload = export_all(view.table, view.keys)
    else:
        payload = export_window(view.table, view.keys)

    with st.expander(f"Sheet preview ({len(payload.rows)} rows)"):
        if not payload.rows:
            st.info("No items yet.")
            return

        df = pd.DataFrame(
            [row.values for row in payload.rows],
            columns=payload.date_keys,
            index=[row.item for row in payload.rows],
        )
        df.index.name = payload.header[0]
        st.dataframe(df, use_container_width=True)

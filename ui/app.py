"""
Order List Streamlit Application

Main entry point for the order form. State lives in one OrderController
per browser session.

Run with: streamlit run ui/app.py
"""

import logging

import streamlit as st

from ui.config import get_settings
from ui.pages import order_form
from yuzuorders.services.controller import OrderController
from yuzuorders.services.sheet_sync import SheetSync
from yuzuorders.storage.local_store import LocalOrderStorage

logger = logging.getLogger(__name__)

CONTROLLER_KEY = "order_controller"

# Page configuration
settings = get_settings()
st.set_page_config(
    page_title=settings.page_title,
    page_icon=settings.page_icon or None,
    layout="centered",
)


def build_controller() -> OrderController:
    """Create the session controller and load its starting table."""
    settings = get_settings()
    controller = OrderController(
        storage=LocalOrderStorage(settings.storage_path),
        sync=SheetSync(settings.sync_url, timeout=settings.request_timeout),
    )
    controller.load_local()

    # Remote wins when the sheet has rows; otherwise keep the local table
    result = controller.load_remote()
    if not result.success:
        logger.info(f"Using local orders: {result.error}")

    return controller


def get_controller() -> OrderController:
    """Get or create this session's controller."""
    if CONTROLLER_KEY not in st.session_state:
        st.session_state[CONTROLLER_KEY] = build_controller()
    return st.session_state[CONTROLLER_KEY]


def main():
    """Main application entry point."""
    order_form.render(get_controller())


if __name__ == "__main__":
    main()

"""Virtual Art Gallery - Streamlit application."""

import streamlit as st
from datetime import datetime

from virtual_gallery.catalog import AICClient, build_image_url
from virtual_gallery.controller import GalleryController
from virtual_gallery.favorites import FavoritesStore
from virtual_gallery.models import Artwork
from virtual_gallery.storage import KeyValueStore

# Configuration
MAX_LOG_ENTRIES = 200
THUMBNAIL_WIDTH = 80
NO_IMAGE_HTML = (
    "<div style='width:80px;height:80px;background:#eee;border-radius:6px;"
    "display:flex;align-items:center;justify-content:center;font-size:12px'>"
    "No Image</div>"
)

st.set_page_config(page_title="Virtual Art Gallery", layout="centered")


# =============================================================================
# Logging
# =============================================================================

def _append_log(level: str, message: str):
    """Append a log entry to session state."""
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    entry = f"{timestamp} | {level:<5} | {message}"
    st.session_state.debug_logs.append(entry)
    st.session_state.debug_logs = st.session_state.debug_logs[-MAX_LOG_ENTRIES:]


def log_event(message: str):
    _append_log("INFO", message)


def component_log_callback(level: str, message: str):
    """Callback for gallery components to log through our system."""
    _append_log(level, message)


def show_alert(message: str):
    """Queue a user-visible error for the current run."""
    st.session_state.alerts.append(message)


# =============================================================================
# Session State Initialization
# =============================================================================

@st.cache_resource
def get_favorites_store() -> FavoritesStore:
    """Favorites are loaded once per process and shared by all sessions."""
    store = FavoritesStore(KeyValueStore())
    store.set_logger(component_log_callback)
    store.load()
    return store


def init_session_state():
    """Initialize all session state variables."""
    defaults = {
        "debug_logs": [],
        "alerts": [],
        "loaded": False,
        "search_term": "",
        "ssl_bypass": False,
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default

    if "controller" not in st.session_state:
        client = AICClient()
        client.set_logger(component_log_callback)
        controller = GalleryController(client)
        controller.set_logger(component_log_callback)
        controller.set_alert(show_alert)
        st.session_state.controller = controller


init_session_state()
controller: GalleryController = st.session_state.controller
favorites = get_favorites_store()


# =============================================================================
# Intents
# =============================================================================

def toggle_favorite(artwork: Artwork):
    favorites.toggle(artwork)


def open_detail(artwork: Artwork):
    controller.select(artwork)


def update_ssl_bypass():
    controller.client.ssl_bypass = st.session_state.ssl_bypass
    log_event(f"SSL bypass set to {st.session_state.ssl_bypass}")


# =============================================================================
# UI Components
# =============================================================================

def render_image(artwork: Artwork, width: int | None = None):
    """Render the artwork image, or a placeholder when it has none."""
    url = build_image_url(artwork.image_id, controller.state.iiif_url)
    if url:
        if width:
            st.image(url, width=width)
        else:
            st.image(url, width="stretch")
    else:
        st.markdown(NO_IMAGE_HTML, unsafe_allow_html=True)


def render_alerts():
    """Show queued errors once, then forget them."""
    for message in st.session_state.alerts:
        st.error(message)
    st.session_state.alerts = []


@st.dialog("Artwork details")
def show_artwork_dialog(artwork: Artwork):
    st.subheader(artwork.title)
    if artwork.image_id:
        render_image(artwork)
    st.write(f"**Artist:** {artwork.artist_display or 'Unknown'}")
    st.write(f"**Date:** {artwork.date_display or 'Unknown'}")

    col_fav, col_share, col_close = st.columns(3)
    with col_fav:
        label = "Remove Favorite" if favorites.is_favorite(artwork.id) else "Add Favorite"
        if st.button(label, type="primary"):
            toggle_favorite(artwork)
            st.rerun()
    with col_share:
        share_clicked = st.button("Share")
    with col_close:
        if st.button("Close"):
            controller.close_detail()
            st.rerun()

    if share_clicked:
        log_event(f"Shared: {artwork.id}")
        st.caption("Copy to share:")
        st.code(artwork.share_message(), language=None)


def render_artwork_card(artwork: Artwork, index: int):
    """Render one list entry. Keys include the index, ids may repeat."""
    with st.container(border=True):
        col_image, col_text, col_actions = st.columns([1, 4, 1])
        with col_image:
            render_image(artwork, width=THUMBNAIL_WIDTH)
        with col_text:
            st.markdown(f"**{artwork.title}**")
            st.caption(artwork.artist_label)
            st.caption(artwork.date_label)
        with col_actions:
            is_fav = favorites.is_favorite(artwork.id)
            st.button(
                "♥" if is_fav else "♡",
                key=f"fav-{index}-{artwork.id}",
                type="primary" if is_fav else "secondary",
                on_click=toggle_favorite,
                args=(artwork,),
                help="Remove favorite" if is_fav else "Add favorite",
            )
            st.button(
                "Details",
                key=f"details-{index}-{artwork.id}",
                on_click=open_detail,
                args=(artwork,),
            )


def render_sidebar():
    """Render the sidebar with favorites, options and debug console."""
    with st.sidebar:
        st.subheader(f"Favorites ({len(favorites)})")
        saved = favorites.artworks()
        if not saved:
            st.caption("Tap ♡ on an artwork to save it here.")
        for artwork in saved:
            col_title, col_remove = st.columns([4, 1])
            col_title.caption(f"{artwork.title} ({artwork.artist_label})")
            col_remove.button(
                "✕",
                key=f"unfav-{artwork.id}",
                on_click=toggle_favorite,
                args=(artwork,),
                help="Remove favorite",
            )

        st.subheader("Options")
        st.checkbox(
            "Bypass SSL verification",
            key="ssl_bypass",
            on_change=update_ssl_bypass,
            help="Use if you encounter SSL errors",
        )

        # Debug console
        with st.expander("Debug Console", expanded=False):
            if st.button("Clear Logs"):
                st.session_state.debug_logs = []
            log_text = "\n".join(st.session_state.debug_logs) if st.session_state.debug_logs else "No logs yet."
            st.code(log_text, language=None)


# =============================================================================
# Main Application
# =============================================================================

def main():
    """Main application entry point."""
    render_sidebar()

    st.markdown("### Virtual Art Gallery")

    with st.form("search_form", border=False):
        term = st.text_input(
            "Search",
            key="search_term",
            placeholder="Search artworks...",
            label_visibility="collapsed",
        )
        submitted = st.form_submit_button("Search")

    if submitted:
        log_event(f"Search submitted: {term!r}")
        with st.spinner("Loading artworks..."):
            controller.search(term)
        st.session_state.loaded = True

    if not st.session_state.loaded:
        log_event("Initial load")
        with st.spinner("Loading artworks..."):
            controller.initial_load()
        st.session_state.loaded = True

    render_alerts()

    selected = controller.state.selected
    if selected is not None:
        # The dialog keeps its own copy; clearing now stops it reopening after a dismiss
        controller.close_detail()
        show_artwork_dialog(selected)

    items = controller.items
    if not items:
        st.info("No artworks to show. Try another search.")
        return

    for index, artwork in enumerate(items):
        render_artwork_card(artwork, index)

    st.caption(f"{len(items)} artworks, page {controller.state.current_page}")
    if st.button("Load more", key="load_more", disabled=controller.is_loading, width="stretch"):
        log_event("Load more requested")
        with st.spinner("Loading more artworks..."):
            controller.load_more()
        st.rerun()


if __name__ == "__main__":
    main()

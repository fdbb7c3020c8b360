"""Streamlit UI scaffold for Klondike."""

from __future__ import annotations

import streamlit as st

from klondike.config import configure_logging, load_config
from klondike.service import SolitaireService, TableView


def get_service() -> SolitaireService:
    if "solitaire_service" not in st.session_state:
        config = load_config()
        configure_logging(config)
        st.session_state["solitaire_service"] = SolitaireService(config=config)
    return st.session_state["solitaire_service"]


def rerun() -> None:
    st.rerun()


def card_text(payload: dict | None) -> str:
    if payload is None:
        return "[  ]"
    if not payload.get("face_up"):
        return "[##]"
    return f"[{payload['label']}]"


def is_selected(view: TableView, pile: int, index: int) -> bool:
    selection = view.selection
    return bool(selection) and selection["kind"] == "tableau" and selection["pile"] == pile and index >= selection["index"]


def render_top_row(service: SolitaireService, view: TableView) -> None:
    cols = st.columns(7)
    if cols[0].button(f"Stock ({view.stock_count})", key="stock"):
        service.draw()
        rerun()
    waste_label = card_text(view.waste_top)
    if view.selection and view.selection["kind"] == "waste":
        waste_label = f"*{waste_label}*"
    if cols[1].button(waste_label, key="waste", disabled=view.waste_top is None):
        service.select({"kind": "waste"})
        rerun()
    for index, pile in enumerate(view.foundations):
        top = pile[-1] if pile else None
        if cols[3 + index].button(card_text(top), key=f"foundation-{index}"):
            service.activate({"kind": "foundation", "index": index})
            rerun()


def render_tableau(service: SolitaireService, view: TableView) -> None:
    cols = st.columns(7)
    for pile_index, pile in enumerate(view.tableau):
        with cols[pile_index]:
            if st.button("Drop here", key=f"column-{pile_index}"):
                service.activate({"kind": "tableau", "index": pile_index})
                rerun()
            for card_index, payload in enumerate(pile):
                label = card_text(payload)
                if is_selected(view, pile_index, card_index):
                    label = f"*{label}*"
                if payload.get("face_up"):
                    if st.button(label, key=f"card-{pile_index}-{card_index}"):
                        service.select({"kind": "tableau", "pile": pile_index, "index": card_index})
                        rerun()
                else:
                    st.write(label)


def main() -> None:
    st.set_page_config(page_title="Klondike Sandbox", layout="wide")
    st.title("Klondike")

    service = get_service()

    st.sidebar.header("Game Controls")
    if st.sidebar.button("New game"):
        service.start_new_game()
        rerun()
    if st.sidebar.button("Undo"):
        service.undo()
        rerun()
    if st.sidebar.button("Hint"):
        service.hint()
        rerun()

    view = service.get_view()
    st.sidebar.write(f"Moves recorded: {view.history_length - 1}")
    st.info(view.status)
    if view.won:
        st.success("All cards are on the foundations.")

    render_top_row(service, view)
    st.divider()
    render_tableau(service, view)


if __name__ == "__main__":
    main()

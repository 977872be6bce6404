"""Streamlit entry point for the Esports Earnings Analyser app."""

from __future__ import annotations

import streamlit as st
from earnings_analyser import synth, utils, view, viz
from earnings_analyser.aggregate import to_frame
from earnings_analyser.config import EXPORT_FILENAME
from earnings_analyser.errors import NoDataError
from earnings_analyser.logging_setup import configure_logging, get_logger
from earnings_analyser.session import AnalyserSession, Notice

configure_logging()
logger = get_logger("earnings_analyser.app")

_SESSION_KEY = "analyser_session"
_UPLOAD_KEY = "last_upload_id"


def _session() -> AnalyserSession:
    if _SESSION_KEY not in st.session_state:
        st.session_state[_SESSION_KEY] = AnalyserSession()
    return st.session_state[_SESSION_KEY]


def _show_notice(notice: Notice | None) -> None:
    # Toasts dismiss themselves and never block the page.
    if notice is None:
        return
    st.toast(notice.message, icon="⚠️" if notice.kind == "warning" else "🚫")


def _handle_upload(session: AnalyserSession) -> None:
    uploaded = st.sidebar.file_uploader("Import CSV", help="IdNo,TotalMoney,GameName,... export")
    if uploaded is None:
        return
    upload_id = (uploaded.name, uploaded.size, getattr(uploaded, "file_id", None))
    if st.session_state.get(_UPLOAD_KEY) == upload_id:
        return
    st.session_state[_UPLOAD_KEY] = upload_id
    result = session.import_bytes(uploaded.getvalue(), uploaded.name, uploaded.type)
    _show_notice(result.notice)


def _on_max_display_change(session: AnalyserSession) -> None:
    session.set_max_display(st.session_state["max_display_slider"])


def _on_threshold_change(session: AnalyserSession, key: str) -> None:
    session.set_threshold(st.session_state[key])


def _filter_controls(session: AnalyserSession) -> None:
    sidebar = st.sidebar
    sidebar.header("Display filter")

    threshold_mode = session.params.mode == view.THRESHOLD
    if sidebar.button("Hide Others" if threshold_mode else "Show Others", use_container_width=True):
        session.toggle_mode()
        st.rerun()

    # Widgets mirror the session; callbacks write user changes back into it.
    if session.params.mode == view.GROUPED:
        st.session_state["max_display_slider"] = session.params.max_display
        sidebar.slider(
            "Top titles",
            min_value=1,
            max_value=session.settings.max_display_limit,
            step=1,
            key="max_display_slider",
            on_change=_on_max_display_change,
            args=(session,),
            help="Titles beyond this rank are grouped as Other.",
        )
        return

    threshold = float(session.params.threshold)
    slider_min, slider_max = view.threshold_slider_range(session.threshold_max, threshold)
    st.session_state["threshold_slider"] = threshold
    st.session_state["threshold_input"] = threshold
    sidebar.slider(
        "Minimum earnings",
        min_value=slider_min,
        max_value=slider_max,
        key="threshold_slider",
        on_change=_on_threshold_change,
        args=(session, "threshold_slider"),
    )
    sidebar.number_input(
        "Threshold ($)",
        key="threshold_input",
        on_change=_on_threshold_change,
        args=(session, "threshold_input"),
    )
    sidebar.caption(f"Showing titles at or above {utils.format_currency(session.params.threshold)}")


def _export_controls(session: AnalyserSession) -> str:
    sidebar = st.sidebar
    sidebar.header("Export")
    try:
        csv_text = session.export_csv()
    except NoDataError as exc:
        sidebar.caption(str(exc))
        return viz.IMAGE_FORMATS[0]
    sidebar.download_button(
        "Download CSV",
        data=csv_text.encode("utf-8"),
        file_name=EXPORT_FILENAME,
        mime="text/csv",
        use_container_width=True,
    )
    image_format = sidebar.radio("Chart image format", viz.IMAGE_FORMATS, format_func=str.upper, horizontal=True)
    sidebar.caption(f"Use the chart toolbar camera icon to save the chart as {image_format.upper()}.")
    return image_format


def main() -> None:
    """Render the Earnings Analyser Streamlit application."""

    st.set_page_config(
        page_title="Esports Earnings Analyser",
        page_icon="🎮",
        layout="wide",
    )

    session = _session()

    st.sidebar.header("Data")
    _handle_upload(session)
    if st.sidebar.button("Load sample data", use_container_width=True):
        logger.info("Loading synthetic sample dataset")
        result = session.import_text(synth.to_csv_text(synth.generate_earnings()), "sample.csv")
        _show_notice(result.notice)

    _filter_controls(session)
    image_format = _export_controls(session)

    st.title("Esports earnings by title")
    summary_entries = session.summary_entries()

    chart_col, summary_col = st.columns([1.2, 1], gap="large")
    with chart_col:
        donut_fig = viz.plot_category_donut(summary_entries)
        st.plotly_chart(
            donut_fig,
            use_container_width=True,
            config=viz.image_export_config(image_format),
        )

    with summary_col:
        if st.toggle("Show summary", value=True):
            st.code(session.summary_text(), language=None)
        else:
            for entry in viz.legend_entries(summary_entries):
                st.markdown(
                    f'<span style="color:{entry["color"]};font-size:1.2rem">■</span> {entry["label"]}',
                    unsafe_allow_html=True,
                )

    if session.has_data:
        with st.expander("All titles", expanded=False):
            table = to_frame(session.aggregate)
            table["amount"] = table["amount"].apply(utils.format_currency)
            st.dataframe(
                table.rename(columns={"category": "Title", "amount": "Total earnings"}),
                hide_index=True,
                use_container_width=True,
            )


if __name__ == "__main__":
    main()

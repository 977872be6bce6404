"""Tests for the session object that owns imports and filter state."""

from __future__ import annotations

import pytest
from earnings_analyser import session as session_mod
from earnings_analyser import view
from earnings_analyser.config import Settings
from earnings_analyser.errors import NoDataError

HEADER = "IdNo,TotalMoney,GameName,Genre,PlayerNo,TournamentNo,Top_Country,Top_Country_Earnings,Releaseyear"
SAMPLE = "\n".join(
    [
        HEADER,
        "1,500,Dota 2,MOBA,10,5,US,100,2013",
        "2,300,Fortnite,BR,10,5,US,100,2017",
        "3,100,Chess,Board,10,5,US,100,1475",
        '4,100,"Game, The",Action,10,5,US,100,2020',
    ]
)


@pytest.fixture()
def session() -> session_mod.AnalyserSession:
    return session_mod.AnalyserSession(settings=Settings())


def test_import_text_replaces_aggregate(session: session_mod.AnalyserSession) -> None:
    result = session.import_text(SAMPLE, "earnings.csv")
    assert result.ok and result.categories == 4 and result.notice is None
    assert session.aggregate["Game, The"] == pytest.approx(100.0)

    session.import_text(HEADER + "\n9,42,Chess,Board,1,1,US,1,1475", "again.csv")
    assert session.aggregate == {"Chess": 42.0}


def test_wrong_type_is_rejected_without_state_change(session: session_mod.AnalyserSession) -> None:
    session.import_text(SAMPLE, "earnings.csv")
    before = dict(session.aggregate)

    result = session.import_text(SAMPLE, "earnings.xlsx", "application/vnd.ms-excel")
    assert not result.ok
    assert result.notice == session_mod.Notice("error", session_mod.WRONG_TYPE_MESSAGE)
    assert session.aggregate == before


def test_csv_detection_by_name_or_content_type() -> None:
    assert session_mod.is_csv_source("DATA.CSV")
    assert session_mod.is_csv_source("upload", "text/csv; charset=utf-8")
    assert not session_mod.is_csv_source("data.txt", "text/plain")
    assert not session_mod.is_csv_source(None)


def test_empty_result_resets_aggregate(session: session_mod.AnalyserSession) -> None:
    session.import_text(SAMPLE, "earnings.csv")
    result = session.import_text(HEADER + "\n1,abc,Chess", "broken.csv")

    assert not result.ok
    assert result.notice == session_mod.Notice("warning", session_mod.NO_VALID_DATA_MESSAGE)
    assert session.aggregate == {}
    assert session.summary_text() == "No valid data found."


def test_undecodable_bytes_are_unreadable(session: session_mod.AnalyserSession) -> None:
    session.import_text(SAMPLE)
    result = session.import_bytes(b"\xff\xfe\xfa\x00", "earnings.csv", "text/csv")

    assert not result.ok
    assert result.notice.message == session_mod.UNREADABLE_MESSAGE
    assert len(session.aggregate) == 4


def test_import_bytes_tolerates_bom(session: session_mod.AnalyserSession) -> None:
    result = session.import_bytes(("\ufeff" + SAMPLE).encode("utf-8"), "earnings.csv", "text/csv")
    assert result.ok
    assert session.aggregate["Dota 2"] == pytest.approx(500.0)


def test_import_file(tmp_path, session: session_mod.AnalyserSession) -> None:
    path = tmp_path / "earnings.csv"
    path.write_text(SAMPLE, encoding="utf-8")
    assert session.import_file(path).ok

    missing = session.import_file(tmp_path / "missing.csv")
    assert missing.notice.message == session_mod.UNREADABLE_MESSAGE
    assert len(session.aggregate) == 4

    other = tmp_path / "notes.txt"
    other.write_text(SAMPLE, encoding="utf-8")
    assert session.import_file(other).notice.message == session_mod.WRONG_TYPE_MESSAGE


def test_threshold_mode_recomputes_default_threshold(session: session_mod.AnalyserSession) -> None:
    assert session.toggle_mode() == view.THRESHOLD
    assert session.threshold_max == 1000.0
    assert session.params.threshold == 500.0

    session.import_text(SAMPLE, "earnings.csv")
    assert session.threshold_max == pytest.approx(500.0)
    assert session.params.threshold == pytest.approx(250.0)
    assert [label for label, _ in session.filtered_view()] == ["Dota 2", "Fortnite"]


def test_all_negative_aggregate_keeps_threshold_inside_slider(session: session_mod.AnalyserSession) -> None:
    session.import_text(HEADER + "\n1,-100,Refunds,Misc,1,1,US,1,2020\n2,-300,Chargebacks,Misc,1,1,US,1,2020")
    session.toggle_mode()

    assert session.params.threshold == pytest.approx(-50.0)
    low, high = view.threshold_slider_range(session.threshold_max, session.params.threshold)
    assert low <= session.params.threshold <= high
    assert [label for label, _ in session.filtered_view()] == []


def test_set_threshold_clamps_manual_input(session: session_mod.AnalyserSession) -> None:
    session.import_text(SAMPLE)
    session.set_mode(view.THRESHOLD)
    assert session.set_threshold("-10") == 0.0
    assert len(session.filtered_view()) == 4
    assert session.set_threshold("300") == 300.0
    assert [amount for _, amount in session.filtered_view()] == [500.0, 300.0]


def test_grouped_mode_params_persist_across_imports(session: session_mod.AnalyserSession) -> None:
    session.import_text(SAMPLE)
    session.set_max_display(2)
    session.import_text(SAMPLE)

    result = session.filtered_view()
    assert result[-1] == ("Other", pytest.approx(200.0))
    assert len(result) == 3


def test_returning_to_grouped_mode_resets_max_display(session: session_mod.AnalyserSession) -> None:
    session.set_max_display(3)
    session.toggle_mode()
    session.toggle_mode()
    assert session.params.mode == view.GROUPED
    assert session.params.max_display == 10


def test_set_max_display_is_bounded(session: session_mod.AnalyserSession) -> None:
    session.set_max_display(0)
    assert session.params.max_display == 1
    session.set_max_display(500)
    assert session.params.max_display == 20


def test_export_requires_data(session: session_mod.AnalyserSession) -> None:
    with pytest.raises(NoDataError):
        session.export_csv()


def test_export_round_trips_through_import(session: session_mod.AnalyserSession) -> None:
    session.import_text(SAMPLE, "earnings.csv")
    original = dict(session.aggregate)

    exported = session.export_csv()
    assert exported.startswith("GameName,TotalEarnings\n")

    result = session.import_text(exported, "aggregated_data.csv")
    assert result.ok
    assert session.aggregate.keys() == original.keys()
    for name, value in original.items():
        assert session.aggregate[name] == pytest.approx(value)


def test_summary_entries_follow_view(session: session_mod.AnalyserSession) -> None:
    session.import_text(SAMPLE)
    session.set_max_display(1)
    entries = session.summary_entries()
    assert [entry["name"] for entry in entries] == ["Dota 2", "Other"]
    assert entries[1]["amount"] == pytest.approx(500.0)

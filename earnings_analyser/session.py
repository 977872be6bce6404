"""Per-user analyser state: the current aggregate and the filter controls.

The host application owns one :class:`AnalyserSession` and drives it with
discrete events (an import, a mode toggle, a slider change). Every operation
finishes before the next event is handled, so no locking is involved.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Literal

from . import aggregate as agg
from . import parser, summarize, view
from .config import EXPORT_HEADER, Settings, load_settings
from .errors import EmptyDatasetError, NoDataError, UnreadableInputError, WrongInputTypeError
from .logging_setup import get_logger

logger = get_logger(__name__)

CSV_CONTENT_TYPES = {"text/csv"}

WRONG_TYPE_MESSAGE = "Please select a valid CSV file."
UNREADABLE_MESSAGE = "An error occurred while reading the file."
NO_VALID_DATA_MESSAGE = "No valid data found in the CSV file."
NO_EXPORT_DATA_MESSAGE = "No data to export. Please import a CSV file first."


@dataclass(frozen=True)
class Notice:
    """Transient user-facing message; the host decides how long to show it."""

    kind: Literal["error", "warning"]
    message: str


@dataclass(frozen=True)
class ImportResult:
    ok: bool
    categories: int = 0
    notice: Notice | None = None


def is_csv_source(filename: str | None, content_type: str | None = None) -> bool:
    if content_type and content_type.split(";")[0].strip().lower() in CSV_CONTENT_TYPES:
        return True
    return filename is not None and filename.lower().endswith(".csv")


def _is_export_layout(text: str) -> bool:
    header = parser.split_lines(text)[0].strip().lstrip("\ufeff")
    return [name.strip() for name in parser.split_fields(header)] == list(EXPORT_HEADER)


def parse_source_text(text: str) -> agg.Aggregate:
    """Parse either the raw nine-column input or a previously exported file.

    Raises :class:`EmptyDatasetError` when no row survives parsing.
    """

    if _is_export_layout(text):
        totals = parser.parse_export_text(text)
    else:
        totals = parser.parse_csv_text(text)
    if not totals:
        raise EmptyDatasetError(NO_VALID_DATA_MESSAGE)
    return totals


@dataclass
class AnalyserSession:
    settings: Settings = field(default_factory=load_settings)
    aggregate: agg.Aggregate = field(default_factory=dict)
    params: view.FilterParams | None = None
    threshold_max: float | None = None

    def __post_init__(self) -> None:
        if self.params is None:
            self.params = view.FilterParams(max_display=self.settings.max_display)
        if self.threshold_max is None:
            self.threshold_max = self.settings.default_threshold_max

    # -- imports -----------------------------------------------------------------

    def import_text(
        self,
        text: str,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> ImportResult:
        """Replace the aggregate with the contents of ``text``.

        ``filename``/``content_type`` are checked when given; a source that is
        not CSV leaves the session untouched. A source without a single valid
        row clears the aggregate instead of leaving stale data behind.
        """

        try:
            _require_csv(filename, content_type)
            totals = parse_source_text(text)
        except WrongInputTypeError as exc:
            logger.warning("Rejected %s (%s): not a CSV source", filename, content_type)
            return ImportResult(ok=False, notice=Notice("error", str(exc)))
        except EmptyDatasetError as exc:
            logger.warning("No valid rows in %s", filename or "input")
            self.aggregate = {}
            return ImportResult(ok=False, notice=Notice("warning", str(exc)))

        self.aggregate = totals
        if self.params.mode == view.THRESHOLD:
            self._reset_threshold()
        logger.info("Imported %d categories from %s", len(totals), filename or "input")
        return ImportResult(ok=True, categories=len(totals))

    def import_bytes(
        self,
        data: bytes,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> ImportResult:
        try:
            _require_csv(filename, content_type)
            text = _decode(data)
        except WrongInputTypeError as exc:
            logger.warning("Rejected %s (%s): not a CSV source", filename, content_type)
            return ImportResult(ok=False, notice=Notice("error", str(exc)))
        except UnreadableInputError as exc:
            logger.warning("Could not decode %s: %s", filename or "input", exc.__cause__)
            return ImportResult(ok=False, notice=Notice("error", str(exc)))
        return self.import_text(text, filename, content_type)

    def import_file(self, path: str | Path) -> ImportResult:
        path = Path(path)
        try:
            _require_csv(path.name)
            data = _read(path)
        except WrongInputTypeError as exc:
            logger.warning("Rejected %s: not a CSV file", path)
            return ImportResult(ok=False, notice=Notice("error", str(exc)))
        except UnreadableInputError as exc:
            logger.warning("Could not read %s: %s", path, exc.__cause__)
            return ImportResult(ok=False, notice=Notice("error", str(exc)))
        return self.import_bytes(data, path.name)

    # -- filter controls ---------------------------------------------------------

    def set_mode(self, mode: view.Mode) -> None:
        if mode == self.params.mode:
            return
        self.params = self.params.with_mode(mode)
        if mode == view.THRESHOLD:
            self._reset_threshold()
        else:
            self.params = replace(self.params, max_display=self.settings.max_display)

    def toggle_mode(self) -> view.Mode:
        self.set_mode(view.GROUPED if self.params.mode == view.THRESHOLD else view.THRESHOLD)
        return self.params.mode

    def set_max_display(self, max_display: int) -> None:
        clamped = min(max(int(max_display), 1), self.settings.max_display_limit)
        self.params = replace(self.params, max_display=clamped)

    def set_threshold(self, value: object) -> float:
        threshold = view.clamp_threshold(value)
        self.params = replace(self.params, threshold=threshold)
        return threshold

    def _reset_threshold(self) -> None:
        self.threshold_max = view.threshold_slider_max(self.aggregate, self.settings.default_threshold_max)
        self.params = replace(self.params, threshold=self.threshold_max / 2)

    # -- outputs -----------------------------------------------------------------

    @property
    def has_data(self) -> bool:
        return bool(self.aggregate)

    def filtered_view(self) -> view.FilteredView:
        return view.filter_view(self.aggregate, self.params)

    def summary_entries(self) -> list[summarize.SummaryEntry]:
        return summarize.summarize_view(self.filtered_view())

    def summary_text(self) -> str:
        return summarize.format_summary(self.filtered_view())

    def export_csv(self) -> str:
        if not self.aggregate:
            raise NoDataError(NO_EXPORT_DATA_MESSAGE)
        return agg.export_csv(self.aggregate)


def _decode(data: bytes) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise UnreadableInputError(UNREADABLE_MESSAGE) from exc


def _read(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise UnreadableInputError(UNREADABLE_MESSAGE) from exc


def _require_csv(filename: str | None, content_type: str | None = None) -> None:
    if filename is None and content_type is None:
        return
    if not is_csv_source(filename, content_type):
        raise WrongInputTypeError(WRONG_TYPE_MESSAGE)

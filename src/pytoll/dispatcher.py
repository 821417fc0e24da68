"""Line dispatcher.

Feeds input lines to the classifier and routes each result to the ledger
or the query engine.  Report lines go to ``out``, diagnostics to ``err``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TextIO

from pytoll.config import TollConfig
from pytoll.exceptions import ConflictingCrossingError, TollInputError, TollLineError
from pytoll.ingestion.lines import Command, Crossing, classify_line
from pytoll.models.line import LineRef
from pytoll.report import format_error, format_report, format_road_total, format_vehicle_totals
from pytoll.state.ledger import Ledger
from pytoll.state.query import QueryEngine

_logger = logging.getLogger(__name__)


def _strip_newline(raw: str) -> str:
    return raw[:-1] if raw.endswith("\n") else raw


class LineDispatcher:
    """Processes input one line at a time against a single ledger."""

    def __init__(
        self,
        ledger: Ledger,
        *,
        out: TextIO,
        err: TextIO,
        config: TollConfig | None = None,
    ) -> None:
        self._ledger = ledger
        self._queries = QueryEngine(ledger)
        self._out = out
        self._err = err
        self._config = config or TollConfig()
        self._line_count = 0

    @property
    def line_count(self) -> int:
        """Number of lines consumed so far."""
        return self._line_count

    def handle_line(self, text: str) -> None:
        """Process the next input line (without its trailing newline)."""
        self._line_count += 1
        line = LineRef(number=self._line_count, text=text)
        try:
            parsed = classify_line(line)
            if isinstance(parsed, Command):
                self._answer(parsed)
            elif isinstance(parsed, Crossing):
                self._record(parsed, line)
        except TollLineError as exc:
            self._report_error(exc)

    def run(self, lines: Iterable[str]) -> int:
        """Consume *lines* until exhausted and return the number processed.

        Raises
        ------
        TollInputError
            When reading from *lines* fails.
        """
        iterator = iter(lines)
        while True:
            try:
                raw = next(iterator)
            except StopIteration:
                break
            except (OSError, UnicodeDecodeError) as exc:
                raise TollInputError(f"failed to read line {self._line_count + 1}: {exc}") from exc
            self.handle_line(_strip_newline(raw))
        self.finish()
        return self._line_count

    def finish(self) -> None:
        """End of input.  Open crossings are dropped unless configured otherwise."""
        pending = self._ledger.pending_entries()
        if not pending:
            return
        if not self._config.report_unfinished:
            _logger.debug("Discarding %d unfinished crossing(s) at end of input", len(pending))
            return
        for _vehicle, entry in pending:
            self._write_err(format_error(entry.origin))

    def _record(self, crossing: Crossing, line: LineRef) -> None:
        superseded = self._ledger.record_crossing(crossing.vehicle, crossing.road, crossing.distance, line)
        if superseded is not None:
            raise ConflictingCrossingError(
                f"{crossing.vehicle} entered {crossing.road} without leaving its previous road",
                line=superseded,
            )

    def _answer(self, command: Command) -> None:
        if command.is_dump_all:
            for text in format_report(self._queries.query_all()):
                self._write_out(text)
            return
        if command.vehicle is not None:
            vehicle_totals = self._queries.query_vehicle(command.vehicle)
            if vehicle_totals is not None:
                self._write_out(format_vehicle_totals(vehicle_totals))
        if command.road is not None:
            road_total = self._queries.query_road(command.road)
            if road_total is not None:
                self._write_out(format_road_total(road_total))

    def _report_error(self, exc: TollLineError) -> None:
        _logger.debug("Rejected line %d: %s", exc.line.number, exc)
        self._write_err(format_error(exc.line))

    def _write_out(self, text: str) -> None:
        print(text, file=self._out)

    def _write_err(self, text: str) -> None:
        print(text, file=self._err)

"""Channel table generator.

Turns lines of channel numbers into a spreadsheet of carrier frequencies:
- Each input line becomes one row.
- The row keeps the original tokens, one per column.
- Two extra cells hold all tokens joined by newlines and, in the same order,
  one "downlink/uplink" string per token (or an error marker).
- In the xlsx output, cells containing newlines are moved to a block of
  wrapped columns (column 15 onwards by default) so they render as stacked
  lines next to the token columns.

Each token is converted independently: a malformed or unclassified token only
affects its own line in the stacked cell.
"""

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List

import pandas as pd
from openpyxl.styles import Alignment

from .loaders import parse_channel_token
from .pipeline import (
	ERR_MALFORMED_INPUT,
	ConversionResult,
	classify_and_convert,
	malformed_result,
)
from .settings import DEFAULT_SETTINGS, OutputSettings

logger = logging.getLogger(__name__)


@dataclass
class ChannelRow:
	"""One input line and the conversion of each of its tokens."""
	tokens: List[str]
	results: List[ConversionResult] = field(default_factory=list)

	@property
	def failures(self) -> int:
		return sum(1 for r in self.results if not r.ok)


def build_channel_row(tokens: Iterable[str]) -> ChannelRow:
	row = ChannelRow(tokens=list(tokens))
	for token in row.tokens:
		channel = parse_channel_token(token)
		if channel is None:
			logger.warning(f"Token {token!r} is not a channel number")
			row.results.append(malformed_result())
		else:
			row.results.append(classify_and_convert(channel))
	return row


def build_channel_rows(lines: Iterable[Iterable[str]]) -> List[ChannelRow]:
	rows = [build_channel_row(tokens) for tokens in lines]
	failed = sum(r.failures for r in rows)
	if failed:
		logger.warning(f"{failed} channel tokens could not be converted")
	return rows


def format_frequency(value: float, settings: OutputSettings = DEFAULT_SETTINGS) -> str:
	return f"{float(value):.{settings.significant_digits}g}"


def format_result(result: ConversionResult, settings: OutputSettings = DEFAULT_SETTINGS) -> str:
	"""Render one result as "downlink/uplink" or its error marker."""
	if result.frequencies is None:
		if result.error == ERR_MALFORMED_INPUT:
			return settings.malformed_marker
		return settings.unclassified_marker
	return (
		format_frequency(result.frequencies.downlink_mhz, settings)
		+ settings.link_separator
		+ format_frequency(result.frequencies.uplink_mhz, settings)
	)


def channel_rows_to_table(rows: Iterable[ChannelRow], settings: OutputSettings = DEFAULT_SETTINGS) -> List[List[str]]:
	"""Convert channel rows to a table of strings (no header)."""
	sep = settings.cell_line_separator
	table: List[List[str]] = []
	for r in rows:
		cells = list(r.tokens)
		cells.append(sep.join(r.tokens))
		cells.append(sep.join(format_result(res, settings) for res in r.results))
		table.append(cells)
	return table


def layout_cells(table: List[List[str]], settings: OutputSettings = DEFAULT_SETTINGS) -> List[Dict[int, str]]:
	"""Place table cells on 1-based spreadsheet columns.

	Cells containing the line separator go to the next wrapped column
	(starting at settings.wrapped_column_start for every row); the others keep
	their positional column.
	"""
	placed: List[Dict[int, str]] = []
	for cells in table:
		row: Dict[int, str] = {}
		forward_col = settings.wrapped_column_start
		for col, text in enumerate(cells):
			if settings.cell_line_separator in text:
				row[forward_col] = text
				forward_col += 1
			else:
				row[col + 1] = text
		placed.append(row)
	return placed


def save_channel_table_xlsx(rows: Iterable[ChannelRow], path: str | Path, settings: OutputSettings = DEFAULT_SETTINGS) -> None:
	"""Save channel rows to an xlsx workbook (single sheet, no header)."""
	placed = layout_cells(channel_rows_to_table(rows, settings), settings)
	n_cols = max((max(r) for r in placed if r), default=0)
	data = [[r.get(c) for c in range(1, n_cols + 1)] for r in placed]
	df = pd.DataFrame(data, columns=list(range(1, n_cols + 1)))
	p = Path(path)
	with pd.ExcelWriter(p, engine="openpyxl") as writer:
		df.to_excel(writer, sheet_name=settings.sheet_name, header=False, index=False)
		ws = writer.sheets[settings.sheet_name]
		wrap = Alignment(wrap_text=True)
		for row_idx, r in enumerate(placed, start=1):
			for col_idx, text in r.items():
				if settings.cell_line_separator in text:
					ws.cell(row=row_idx, column=col_idx).alignment = wrap
	logger.info(f"Saved {len(placed)} rows to {p}")


def save_channel_table_csv(rows: Iterable[ChannelRow], path: str | Path, settings: OutputSettings = DEFAULT_SETTINGS) -> None:
	"""Save channel rows to CSV using the plain table layout (no column relocation)."""
	table = channel_rows_to_table(rows, settings)
	p = Path(path)
	with p.open("w", newline="", encoding="utf-8") as f:
		writer = csv.writer(f)
		writer.writerows(table)
	logger.info(f"Saved {len(table)} rows to {p}")

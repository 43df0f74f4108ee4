"""Output settings for channel tables.

Defaults give the classic ARFCN sheet layout: multi-line cells are
moved to a block of wrapped columns starting at column 15, frequencies are
printed with 6 significant digits as "downlink/uplink", and the workbook is
saved as result.xlsx unless an output name is given.
"""

from dataclasses import dataclass
from pathlib import Path

from .pipeline import ERR_MALFORMED_INPUT, ERR_UNCLASSIFIED_BAND


@dataclass(frozen=True)
class OutputSettings:
    wrapped_column_start: int = 15  # 1-based spreadsheet column
    significant_digits: int = 6
    link_separator: str = "/"
    cell_line_separator: str = "\n"
    unclassified_marker: str = ERR_UNCLASSIFIED_BAND
    malformed_marker: str = ERR_MALFORMED_INPUT
    sheet_name: str = "Sheet1"
    default_output_stem: str = "result"
    output_extension: str = ".xlsx"

    def __post_init__(self):
        if self.wrapped_column_start < 1:
            raise ValueError("wrapped_column_start must be >= 1")
        if self.significant_digits < 1:
            raise ValueError("significant_digits must be >= 1")


DEFAULT_SETTINGS = OutputSettings()


def output_path_from_arg(name: str | None, settings: OutputSettings = DEFAULT_SETTINGS) -> Path:
    """Output file path: `<name><ext>` if a name is given, else `<default stem><ext>`.

    The extension is always appended to the name given on the command line
    (`gsm-arfcn input.txt report` -> report.xlsx).
    """
    stem = name if name else settings.default_output_stem
    return Path(stem + settings.output_extension)

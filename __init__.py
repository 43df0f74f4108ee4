from .bands import (
	Band,
	ChannelRange,
	RANGE_TABLE,
	classify,
	ranges_for_band,
	overlapping_ranges,
	band_from_name,
)
from .formulas import (
	FrequencyPair,
	UnclassifiedBandError,
	UPLINK_FORMULAS,
	DOWNLINK_FORMULAS,
	DUPLEX_OFFSETS_MHZ,
	uplink_mhz,
	downlink_mhz,
	duplex_offset_mhz,
	convert,
)
from .pipeline import (
	ERR_UNCLASSIFIED_BAND,
	ERR_MALFORMED_INPUT,
	ConversionResult,
	classify_and_convert,
	convert_batch,
)
from .settings import OutputSettings, DEFAULT_SETTINGS, output_path_from_arg
from .loaders import load_channel_lines, split_channel_lines, parse_channel_token
from .channel_table import (
    ChannelRow,
    build_channel_row,
    build_channel_rows,
    format_result,
    channel_rows_to_table,
    layout_cells,
    save_channel_table_xlsx,
    save_channel_table_csv,
)

__version__ = "0.1.0"

__all__ = [
	"Band",
	"ChannelRange",
	"RANGE_TABLE",
	"classify",
	"ranges_for_band",
	"overlapping_ranges",
	"band_from_name",
	"FrequencyPair",
	"UnclassifiedBandError",
	"UPLINK_FORMULAS",
	"DOWNLINK_FORMULAS",
	"DUPLEX_OFFSETS_MHZ",
	"uplink_mhz",
	"downlink_mhz",
	"duplex_offset_mhz",
	"convert",
	"ERR_UNCLASSIFIED_BAND",
	"ERR_MALFORMED_INPUT",
	"ConversionResult",
	"classify_and_convert",
	"convert_batch",
	"OutputSettings",
	"DEFAULT_SETTINGS",
	"output_path_from_arg",
	"load_channel_lines",
	"split_channel_lines",
	"parse_channel_token",
    "ChannelRow",
    "build_channel_row",
    "build_channel_rows",
    "format_result",
    "channel_rows_to_table",
    "layout_cells",
    "save_channel_table_xlsx",
    "save_channel_table_csv",
]

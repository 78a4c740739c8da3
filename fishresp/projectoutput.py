from pathlib import Path
from typing import *

import pandas
from loguru import logger

from fishresp import utilities
from fishresp.errors import UnsupportedExportFormat

UNSUPPORTED_FORMAT_MESSAGE = "Please, check: the file should be in .txt or .csv format"

# Maps the file extension to the column delimiter.
DELIMITERS = {
	'.txt': '\t',
	'.csv': ','
}


def get_delimiter(filename: Union[str, Path]) -> str:
	suffix = Path(filename).suffix.lower() if filename else ''
	try:
		return DELIMITERS[suffix]
	except KeyError:
		raise UnsupportedExportFormat(UNSUPPORTED_FORMAT_MESSAGE)


def save_results_table(table: pandas.DataFrame, filename: Union[str, Path]) -> Path:
	"""
		Writes the table as tab-delimited (`.txt`) or comma-delimited (`.csv`) text without the row index.
	Raises
	------
	UnsupportedExportFormat
		If the extension is neither `.txt` nor `.csv`. Nothing is written.
	OSError
		If the file cannot be written.
	"""
	delimiter = get_delimiter(filename)
	filename = Path(filename)
	table.to_csv(filename, sep = delimiter, index = False)
	logger.info(f"Saved {len(table)} rows to '{filename}'")
	return filename


def get_figure_filename(folder: Optional[Path], name: str, figure_format: str = '.png') -> Optional[Path]:
	""" Returns `None` when no folder is given, meaning the figure should be displayed rather than saved."""
	if folder is None:
		return None
	folder = utilities.checkdir(folder)
	return folder / f"{name}{figure_format}"

"""
	Exports the final metabolic rate tables.

	With a single table the rows are returned (and written) with either the full or the simplified set of columns.
	With two tables (ex. standard and active metabolic rate) the tables are merged on the chamber/individual columns,
	the metabolic scope is optionally calculated and plotted, and the merged table is returned and written.
"""
from pathlib import Path
from typing import *

import pandas
from loguru import logger

from fishresp import projectoutput, table_schema, utilities
from fishresp.analysis import metabolicscope
from fishresp.errors import MissingArgument, UnsupportedExportFormat
from fishresp.graphics import ScopePlot
from fishresp.validation import ValidateTable


class ResultExporter:
	def __init__(self, simplify: bool = True, metabolic_scope: bool = True, plot_ms_abs: bool = True, plot_ms_mass: bool = True,
			plot_ms_fact: bool = True, figure_folder: Optional[Path] = None, figure_format: str = '.png'):
		"""
		Parameters
		----------
		simplify: bool
			Reduces the number of columns in the returned/exported table.
		metabolic_scope: bool
			Whether to calculate the metabolic scope when two tables are given.
		plot_ms_abs, plot_ms_mass, plot_ms_fact: bool
			Whether to plot the absolute, mass-specific and factorial metabolic scope.
		figure_folder: Optional[Path]
			Where the figures are saved. If not given, the figures are displayed.
		figure_format: str
			The file extension of the saved figures. Ex. '.png', '.pdf', '.svg'
		"""
		self.simplify = simplify
		self.metabolic_scope = metabolic_scope
		self.plots = {
			'MS.abs':  plot_ms_abs,
			'MS.mass': plot_ms_mass,
			'MS.fact': plot_ms_fact
		}
		self.figure_folder = figure_folder

		self.validator = ValidateTable()
		self.plotter = ScopePlot(figure_format = figure_format)

	def _check_arguments(self, table_1: Optional[pandas.DataFrame], table_2: Optional[pandas.DataFrame], label_1: Optional[str],
			label_2: Optional[str]) -> None:
		if table_1 is None:
			message = "The first metabolic rate table is required."
			raise MissingArgument(message)
		if table_2 is None:
			return
		for name, label in [('label_1', label_1), ('label_2', label_2)]:
			if not utilities.validate_label(label):
				message = f"`{name}` is required when two tables are exported, got {label!r}. Ex. 'SMR', 'AMR'"
				raise MissingArgument(message)
		if label_1 == label_2:
			message = f"The labels of the two tables should be different, got '{label_1}' for both."
			raise ValueError(message)

	def run(self, table_1: pandas.DataFrame, table_2: Optional[pandas.DataFrame] = None, filename: Union[str, Path] = "",
			label_1: Optional[str] = None, label_2: Optional[str] = None) -> pandas.DataFrame:
		"""
			Builds, writes and returns the final table.
		Parameters
		----------
		table_1: pandas.DataFrame
			Metabolic rate table of the first trait (ex. standard metabolic rate).
		table_2: Optional[pandas.DataFrame]
			Metabolic rate table of the second trait (ex. active metabolic rate).
		filename: Union[str, Path]
			A `.txt` (tab-delimited) or `.csv` (comma-delimited) file. Any other extension skips the write.
		label_1, label_2: Optional[str]
			Prefixes of the measurement columns of each table. Required when `table_2` is given.

		Returns
		-------
		pandas.DataFrame
		"""
		self._check_arguments(table_1, table_2, label_1, label_2)

		table_1 = self.validator.check_table(table_1, f"'{label_1}' table" if label_1 else 'first table')
		if table_2 is None:
			return self.export_single(table_1, filename)

		table_2 = self.validator.check_table(table_2, f"'{label_2}' table")
		return self.export_merged(table_1, table_2, filename, label_1, label_2)

	def export_single(self, table: pandas.DataFrame, filename: Union[str, Path]) -> pandas.DataFrame:
		result = table[table_schema.FULL_COLUMNS]
		if self.simplify:
			result = result[table_schema.SIMPLIFIED_COLUMNS]
			# A simplified single table is only returned.
			logger.info("A simplified table of a single trait is not written to a file.")
			return result.reset_index(drop = True)
		result = result.reset_index(drop = True)
		self.write(result, filename)
		return result

	def export_merged(self, table_1: pandas.DataFrame, table_2: pandas.DataFrame, filename: Union[str, Path], label_1: str,
			label_2: str) -> pandas.DataFrame:
		result = metabolicscope.merge_results(table_1, table_2, label_1, label_2)

		if self.metabolic_scope:
			result = metabolicscope.calculate_metabolic_scope(result, label_1, label_2)
			self.plot(result, label_2)

		if self.simplify:
			result = result[table_schema.simplified_merged_columns(label_1, label_2, self.metabolic_scope)]

		self.write(result, filename)
		return result

	def plot(self, table: pandas.DataFrame, label: str) -> None:
		requested = [column for column, wanted in self.plots.items() if wanted]
		if not requested:
			return
		if table.empty:
			logger.warning("The merged table is empty. Skipping the metabolic scope plots.")
			return
		for column, grid in self.plotter.plot(table, label, requested).items():
			filename = projectoutput.get_figure_filename(self.figure_folder, column, self.plotter.figure_format)
			self.plotter.render(grid, filename)

	@staticmethod
	def write(table: pandas.DataFrame, filename: Union[str, Path]) -> Optional[Path]:
		""" Writes the table. An unsupported extension is reported and the table is not written."""
		try:
			return projectoutput.save_results_table(table, filename)
		except UnsupportedExportFormat as exception:
			logger.warning(str(exception))
			return None


def export_mr(table_1: pandas.DataFrame, table_2: Optional[pandas.DataFrame] = None, filename: Union[str, Path] = "",
		simplify: bool = True, metabolic_scope: bool = True, plot_ms_abs: bool = True, plot_ms_mass: bool = True,
		plot_ms_fact: bool = True, label_1: Optional[str] = None, label_2: Optional[str] = None,
		figure_folder: Optional[Path] = None) -> pandas.DataFrame:
	"""
		Exports the final table with background respiration, absolute and mass-specific metabolic rates.
		If two tables are given they are merged, and the absolute, mass-specific and factorial metabolic scope
		may be calculated, where `table_1` is the standard (resting) and `table_2` the active (maximum) metabolic rate.

		See `ResultExporter` for a description of the parameters.
	"""
	exporter = ResultExporter(
		simplify = simplify,
		metabolic_scope = metabolic_scope,
		plot_ms_abs = plot_ms_abs,
		plot_ms_mass = plot_ms_mass,
		plot_ms_fact = plot_ms_fact,
		figure_folder = figure_folder
	)
	return exporter.run(table_1, table_2, filename, label_1 = label_1, label_2 = label_2)

from typing import *

import pandas
import seaborn
from loguru import logger

from fishresp import table_schema
from fishresp.graphics.facetplot import FacetPlot


class ScopePlot(FacetPlot):
	""" Box plots of absolute, mass-specific and factorial metabolic scope. One panel per individual."""

	def __init__(self, **kwargs):
		super().__init__(**kwargs)
		self.labelx = 'Phase'
		self.titles = {
			'MS.abs':  "Absolute metabolic scope",
			'MS.mass': "Mass-specific metabolic scope",
			'MS.fact': "Factorial metabolic scope"
		}

	@staticmethod
	def get_labels_y(do_unit: Any) -> Dict[str, str]:
		""" The y-axis labels depend on the unit of the dissolved oxygen concentration."""
		return {
			'MS.abs':  f"Absolute MS ({do_unit}/h)",
			'MS.mass': f"Mass-specific MS ({do_unit}/kg/h)",
			'MS.fact': "Factorial MS (coefficient)"
		}

	def boxplot(self, table: pandas.DataFrame, x: str, y: str, ylabel: str, title: str) -> seaborn.FacetGrid:
		logger.trace(f"ScopePlot.boxplot(x = {x}, y = {y})")
		grid = seaborn.catplot(
			data = table,
			x = x, y = y,
			col = self.panel_column,
			col_wrap = self._col_wrap(table),
			kind = 'box',
			color = seaborn.color_palette(self.color_palette_key)[0],
			height = self.height,
			aspect = self.aspect,
			sharex = False
		)
		return self.formatplot(grid, self.labelx, ylabel, title)

	def plot(self, table: pandas.DataFrame, label: str, columns: Optional[List[str]] = None) -> Dict[str, seaborn.FacetGrid]:
		"""
			Builds the metabolic scope plots.
		Parameters
		----------
		table: pandas.DataFrame
			The merged table with the `MS.abs`, `MS.mass` and `MS.fact` columns.
		label: str
			The label of the second (active) trait. Its phase column is used for the x-axis.
		columns: Optional[List[str]]
			The scope columns to plot. Defaults to all three.

		Returns
		-------
		Dict[str, seaborn.FacetGrid]
			Maps each metabolic scope column to its figure, in the order abs, mass, fact.
		"""
		if columns is None:
			columns = table_schema.SCOPE_COLUMNS
		x = table_schema.prefix_column(label, 'Phase')
		labels_y = self.get_labels_y(table['DO.unit'].iloc[0])

		plots = dict()
		for column in table_schema.SCOPE_COLUMNS:
			if column not in columns: continue
			plots[column] = self.boxplot(table, x, column, labels_y[column], self.titles[column])
		return plots

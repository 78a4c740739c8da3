from typing import *

import pandas
import seaborn

from fishresp.graphics.facetplot import FacetPlot


class MetabolicRatePlot(FacetPlot):
	""" Plots background respiration and metabolic rate against temperature for each individual."""

	def __init__(self, **kwargs):
		super().__init__(**kwargs)
		self.labelx = "Temperature (C)"
		self.marker_point_size = 30
		self.marker_point_alpha = 0.80

		self.labels_y = {
			'BR':      "Background respiration (%)",
			'MR.abs':  "Absolute MR (mgO2/h)",
			'MR.mass': "Mass-specific MR (mgO2/kg/h)"
		}
		self.titles = {
			'BR':      "Percentage rate of background respiration",
			'MR.abs':  "Absolute metabolic rate",
			'MR.mass': "Mass-specific metabolic rate"
		}

	def scatterplot(self, table: pandas.DataFrame, y: str) -> seaborn.FacetGrid:
		grid = seaborn.relplot(
			data = table,
			x = 'Temp', y = y,
			col = self.panel_column,
			col_wrap = self._col_wrap(table),
			kind = 'scatter',
			s = self.marker_point_size,
			alpha = self.marker_point_alpha,
			height = self.height,
			aspect = self.aspect
		)
		return self.formatplot(grid, self.labelx, self.labels_y[y], self.titles[y])

	def plot(self, table: pandas.DataFrame) -> Dict[str, seaborn.FacetGrid]:
		""" Returns the BR, MR.abs and MR.mass figures, in that order."""
		return {column: self.scatterplot(table, column) for column in ['BR', 'MR.abs', 'MR.mass']}

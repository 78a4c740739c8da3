from pathlib import Path
from typing import *

import matplotlib.pyplot as plt
import pandas
import seaborn
from loguru import logger


class FacetPlot:
	""" Shared settings for the plots drawn with one panel per individual."""

	def __init__(self, panel_column: str = 'Ind', col_wrap: int = 2, figure_format: str = '.png'):
		self.panel_column = panel_column
		# Number of panels in each row. Panels are filled left-to-right, top-to-bottom.
		self.col_wrap = col_wrap
		self.figure_format = figure_format

		self.height = 3
		self.aspect = 1.2
		self.color_background = "#f0f0f0"  # Slightly grey
		self.color_palette_key = 'tab10'
		self.dpi = 300

	def _col_wrap(self, table: pandas.DataFrame) -> Optional[int]:
		panels = table[self.panel_column].nunique()
		return self.col_wrap if panels > 1 else None

	def formatplot(self, grid: seaborn.FacetGrid, xlabel: str, ylabel: str, title: str) -> seaborn.FacetGrid:
		""" Adds labels to each axis and a title to the figure."""
		grid.set_axis_labels(xlabel, ylabel)
		grid.set_titles(col_template = "{col_name}")
		for ax in grid.axes.flat:
			ax.set_facecolor(self.color_background)
		grid.figure.suptitle(title)
		grid.figure.tight_layout()
		return grid

	def render(self, grid: seaborn.FacetGrid, filename: Optional[Path] = None) -> seaborn.FacetGrid:
		"""
			Saves the figure when a filename is given, otherwise displays it.
			The figure is closed afterwards in both cases.
		"""
		if filename is not None:
			filename = Path(filename)
			if not filename.suffix:
				filename = filename.with_suffix(self.figure_format)
			logger.info(f"Saving figure to '{filename}'")
			grid.savefig(filename, dpi = self.dpi)
		else:
			plt.show()
		plt.close(grid.figure)
		return grid

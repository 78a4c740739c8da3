from pathlib import Path

from fishresp import utilities


class Filenames:
	""" Holds the filenames of the exported tables and figures.

		Output File Structure
		folder/
			data/results.txt
			figures/MS.abs.png, MS.mass.png, MS.fact.png
	"""

	def __init__(self, folder: Path, table_format: str = '.txt', figure_format: str = '.png'):
		self.table_format = table_format
		self.figure_format = figure_format
		folder = utilities.checkdir(folder)
		self.folder = folder
		self.folder_data = utilities.checkdir(folder / "data")
		self.folder_figure = utilities.checkdir(folder / "figures")

		# Tables
		# Either a single trait or both traits merged, with the metabolic scope when requested.
		self.filename_table_results = self.folder_data / ("results" + self.table_format)

		# Figures
		self.filename_figure_ms_abs = self.folder_figure / ("MS.abs" + self.figure_format)
		self.filename_figure_ms_mass = self.folder_figure / ("MS.mass" + self.figure_format)
		self.filename_figure_ms_fact = self.folder_figure / ("MS.fact" + self.figure_format)

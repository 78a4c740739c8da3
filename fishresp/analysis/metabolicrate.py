from pathlib import Path
from typing import *

import pandas
from loguru import logger

from fishresp import projectoutput
from fishresp.graphics import MetabolicRatePlot
from fishresp.validation import ValidateTable

REQUIRED_COLUMNS = ['Chamber.No', 'Ind', 'Mass', 'Volume', 'Temp', 'Slope.with.BR', 'Slope']


def calculate_mr(slope_table: pandas.DataFrame, density: float = 1000, plot_br: bool = True, plot_mr_abs: bool = True,
		plot_mr_mass: bool = True, figure_folder: Optional[Path] = None) -> pandas.DataFrame:
	"""
		Calculates background respiration, absolute and mass-specific metabolic rates from the extracted slopes.
	Parameters
	----------
	slope_table: pandas.DataFrame
		One row per measurement period with the slopes of oxygen concentration over time.
	density: float
		The density of the animal body (kg/m^3). Used to subtract the volume of the animal from the chamber volume.
	plot_br, plot_mr_abs, plot_mr_mass: bool
		Whether to plot background respiration, absolute MR and mass-specific MR against temperature.
	figure_folder: Optional[Path]
		Where the figures are saved. If not given, the figures are displayed.

	Returns
	-------
	pandas.DataFrame
		The slope table with the `MR.abs.with.BR`, `BR`, `MR.abs` and `MR.mass` columns added.
	"""
	if density <= 0:
		message = f"The body density should be positive, got {density}"
		raise ValueError(message)

	validator = ValidateTable(REQUIRED_COLUMNS)
	table = validator.check_table(slope_table, 'slope table')

	volume = table['Volume'] - (table['Mass'] / density / 1000)
	body_mass = table['Mass'] / 1000

	table['MR.abs.with.BR'] = -(table['Slope.with.BR'] * volume)
	table['BR'] = (table['Slope.with.BR'] - table['Slope']) / table['Slope.with.BR'] * 100
	table['MR.abs'] = -(table['Slope'] * volume)
	table['MR.mass'] = -(table['Slope'] * volume / body_mass)
	logger.debug(f"Calculated metabolic rates for {len(table)} periods.")

	requested = {'BR': plot_br, 'MR.abs': plot_mr_abs, 'MR.mass': plot_mr_mass}
	plotter = MetabolicRatePlot()
	for column, wanted in requested.items():
		if not wanted: continue
		grid = plotter.scatterplot(table, column)
		plotter.render(grid, projectoutput.get_figure_filename(figure_folder, column, plotter.figure_format))

	return table

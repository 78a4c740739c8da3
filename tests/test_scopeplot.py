import matplotlib.pyplot as plt
import pytest

from fishresp.analysis import metabolicscope
from fishresp.graphics import MetabolicRatePlot, ScopePlot


@pytest.fixture
def scope_table(smr, amr):
	merged = metabolicscope.merge_results(smr, amr, 'SMR', 'AMR')
	return metabolicscope.calculate_metabolic_scope(merged, 'SMR', 'AMR')


def test_get_labels_y():
	labels = ScopePlot.get_labels_y('mg/L')

	assert labels['MS.abs'] == "Absolute MS (mg/L/h)"
	assert labels['MS.mass'] == "Mass-specific MS (mg/L/kg/h)"
	assert labels['MS.fact'] == "Factorial MS (coefficient)"


def test_scope_plot(scope_table):
	plotter = ScopePlot()
	plots = plotter.plot(scope_table, 'AMR')

	assert list(plots.keys()) == ['MS.abs', 'MS.mass', 'MS.fact']
	grid = plots['MS.abs']
	# One panel per individual.
	assert len(grid.axes.flat) == 3
	assert grid.figure._suptitle.get_text() == "Absolute metabolic scope"
	assert grid.axes.flat[0].get_ylabel() == "Absolute MS (mg/L/h)"
	plt.close('all')


def test_scope_plot_selected_columns(scope_table):
	plots = ScopePlot().plot(scope_table, 'AMR', ['MS.fact', 'MS.abs'])
	# Always in the order abs, mass, fact.
	assert list(plots.keys()) == ['MS.abs', 'MS.fact']
	plt.close('all')


def test_render_saves_figure(tmp_path, scope_table):
	plotter = ScopePlot(figure_format = '.pdf')
	grid = plotter.plot(scope_table, 'AMR', ['MS.mass'])['MS.mass']

	plotter.render(grid, tmp_path / "scope")

	assert (tmp_path / "scope.pdf").exists()


def test_metabolic_rate_plot(smr):
	plots = MetabolicRatePlot().plot(smr)

	assert list(plots.keys()) == ['BR', 'MR.abs', 'MR.mass']
	assert len(plots['BR'].axes.flat) == 4
	assert plots['MR.mass'].axes.flat[-1].get_xlabel() == "Temperature (C)"
	plt.close('all')

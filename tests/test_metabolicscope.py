import numpy
import pandas
import pytest

from fishresp import table_schema
from fishresp.analysis import metabolicscope
from fishresp.errors import SchemaMismatch


def test_prefix_measurements(smr):
	result = metabolicscope.prefix_measurements(smr, 'SMR')

	expected = table_schema.KEY_COLUMNS + [f"SMR_{i}" for i in table_schema.MERGED_MEASUREMENT_COLUMNS]
	assert list(result.columns) == expected
	assert result['SMR_MR.abs'].tolist() == smr['MR.abs'].tolist()
	assert result['SMR_MR.mass.with.BR'].tolist() == smr['MR.abs.with.BR'].tolist()


def test_merge_results_columns(smr, amr):
	result = metabolicscope.merge_results(smr, amr, 'SMR', 'AMR')

	assert list(result.columns) == table_schema.merged_columns('SMR', 'AMR')
	assert len(result.columns) == 27


def test_merge_results_is_an_inner_join(smr, amr, log_messages):
	result = metabolicscope.merge_results(smr, amr, 'SMR', 'AMR')

	# CH4 was not measured during the active trial.
	assert sorted(result['Chamber.No'].unique()) == ['CH1', 'CH2', 'CH3']
	# Every SMR period is paired with every AMR period of the same individual.
	assert len(result) == 3 * 2 * 2
	assert any("Dropping 2 rows from 'SMR' and 0 rows from 'AMR'" in message for message in log_messages)


def test_merge_results_with_unique_keys(make_table):
	table_1 = make_table([('CH1', 1, 10, 2), ('CH2', 2, 11, 2), ('CH3', 3, 12, 2)])
	table_2 = make_table([('CH2', 2, 20, 4), ('CH3', 3, 21, 4), ('CH5', 5, 22, 4), ('CH6', 6, 23, 4)])

	result = metabolicscope.merge_results(table_1, table_2, 'SMR', 'AMR')

	assert result['Ind'].tolist() == [2, 3]
	assert len(result) <= min(len(table_1), len(table_2))


def test_merge_results_requires_every_key_column(make_table):
	table_1 = make_table([('CH1', 1, 10, 2)])
	table_2 = make_table([('CH1', 1, 25, 5)])
	# Same chamber and individual, but a different volume.
	table_2['Volume'] = 0.5

	result = metabolicscope.merge_results(table_1, table_2, 'SMR', 'AMR')

	assert result.empty


def test_calculate_metabolic_scope(make_table):
	table_1 = make_table([('CH1', 1, 10, 2)])
	table_2 = make_table([('CH1', 1, 25, 5)])
	merged = metabolicscope.merge_results(table_1, table_2, 'SMR', 'AMR')

	result = metabolicscope.calculate_metabolic_scope(merged, 'SMR', 'AMR')
	row = result.iloc[0]

	assert row['MS.abs'] == pytest.approx(15, abs = 1E-9)
	assert row['MS.mass'] == pytest.approx(3, abs = 1E-9)
	assert row['MS.fact'] == pytest.approx(2.5, abs = 1E-9)
	# The input table is left unchanged.
	assert 'MS.abs' not in merged.columns


def test_calculate_metabolic_scope_formulas(smr, amr):
	merged = metabolicscope.merge_results(smr, amr, 'SMR', 'AMR')
	result = metabolicscope.calculate_metabolic_scope(merged, 'SMR', 'AMR')

	assert numpy.allclose(result['MS.abs'], result['AMR_MR.abs'] - result['SMR_MR.abs'], atol = 1E-9)
	assert numpy.allclose(result['MS.mass'], result['AMR_MR.mass'] - result['SMR_MR.mass'], atol = 1E-9)
	assert numpy.allclose(result['MS.fact'], result['AMR_MR.abs'] / result['SMR_MR.abs'], atol = 1E-9)


def test_calculate_metabolic_scope_zero_rate(make_table, log_messages):
	table_1 = make_table([('CH1', 1, 0, 0)])
	table_2 = make_table([('CH1', 1, 25, 5)])
	merged = metabolicscope.merge_results(table_1, table_2, 'SMR', 'AMR')

	result = metabolicscope.calculate_metabolic_scope(merged, 'SMR', 'AMR')

	assert numpy.isinf(result['MS.fact'].iloc[0])
	assert any("absolute metabolic rates are zero" in message for message in log_messages)


@pytest.mark.parametrize("column", ['Ind', 'Chamber.No', 'Mass'])
def test_merge_results_key_types_differ(smr, amr, column):
	if column == 'Chamber.No':
		amr[column] = amr[column].str.replace('CH', '').astype(int)
	else:
		amr[column] = amr[column].astype(str)

	with pytest.raises(SchemaMismatch) as exception:
		metabolicscope.merge_results(smr, amr, 'SMR', 'AMR')
	assert exception.value.missing == [column]
	assert f"'{column}'" in str(exception.value)


def test_merge_results_int_and_float_keys_match(smr, amr):
	amr['Ind'] = amr['Ind'].astype(float)
	result = metabolicscope.merge_results(smr, amr, 'SMR', 'AMR')
	assert len(result) == 12

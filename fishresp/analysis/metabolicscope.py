"""
	Merges the results of two metabolic rate traits and derives the metabolic scope.
	The first trait is the standard (resting) metabolic rate, the second is the active (maximum) metabolic rate.
"""
from typing import *

import numpy
import pandas
from loguru import logger

from fishresp import table_schema
from fishresp.errors import SchemaMismatch


def prefix_measurements(table: pandas.DataFrame, label: str) -> pandas.DataFrame:
	""" Prefixes each measurement column with `label`. Ex. `MR.abs` -> `SMR_MR.abs`. The key columns are unchanged."""
	columnmap = {
		column: table_schema.prefix_column(label, merged_column)
		for column, merged_column in zip(table_schema.MEASUREMENT_COLUMNS, table_schema.MERGED_MEASUREMENT_COLUMNS)
	}
	return table[table_schema.FULL_COLUMNS].rename(columns = columnmap)


def _is_numeric(series: pandas.Series) -> bool:
	return pandas.api.types.is_numeric_dtype(series) and not pandas.api.types.is_bool_dtype(series)


def check_key_types(table_1: pandas.DataFrame, table_2: pandas.DataFrame, label_1: str, label_2: str) -> None:
	""" Both tables must store each key column as numbers, or both as text, for the rows to be matched."""
	for column in table_schema.KEY_COLUMNS:
		series_1 = table_1[column]
		series_2 = table_2[column]
		if series_1.isna().all() or series_2.isna().all():
			continue
		if _is_numeric(series_1) != _is_numeric(series_2):
			message = f"The key column '{column}' is '{series_1.dtype}' in the '{label_1}' table and '{series_2.dtype}' in the '{label_2}' table."
			raise SchemaMismatch(message, [column])


def _count_unmatched(left: pandas.DataFrame, right: pandas.DataFrame) -> int:
	keys = table_schema.KEY_COLUMNS
	matched = left[keys].merge(right[keys].drop_duplicates(), on = keys, how = 'left', indicator = True)
	return int((matched['_merge'] == 'left_only').sum())


def merge_results(table_1: pandas.DataFrame, table_2: pandas.DataFrame, label_1: str, label_2: str) -> pandas.DataFrame:
	"""
		Joins two metabolic rate tables on the key columns (chamber, individual, mass, volume, DO unit).
	Parameters
	----------
	table_1, table_2: pandas.DataFrame
		Validated metabolic rate tables.
	label_1, label_2: str
		Prefixes applied to the measurement columns of each table.

	Returns
	-------
	pandas.DataFrame
		Only rows with matching keys in both tables are kept. A key repeated in both tables yields every pairing.
	"""
	check_key_types(table_1, table_2, label_1, label_2)

	left = prefix_measurements(table_1, label_1)
	right = prefix_measurements(table_2, label_2)

	unmatched_left = _count_unmatched(left, right)
	unmatched_right = _count_unmatched(right, left)
	if unmatched_left or unmatched_right:
		logger.warning(
			f"Dropping {unmatched_left} rows from '{label_1}' and {unmatched_right} rows from '{label_2}' without a match in the other table."
		)

	merged = left.merge(right, on = table_schema.KEY_COLUMNS, how = 'inner')
	merged = merged[table_schema.merged_columns(label_1, label_2)].reset_index(drop = True)
	logger.debug(f"Merged {len(table_1)} '{label_1}' rows and {len(table_2)} '{label_2}' rows into {len(merged)} rows.")
	return merged


def calculate_metabolic_scope(table: pandas.DataFrame, label_1: str, label_2: str) -> pandas.DataFrame:
	""" Adds the absolute (`MS.abs`), mass-specific (`MS.mass`) and factorial (`MS.fact`) metabolic scope."""
	table = table.copy()
	mr_abs_1 = table[table_schema.prefix_column(label_1, 'MR.abs')]
	mr_abs_2 = table[table_schema.prefix_column(label_2, 'MR.abs')]
	mr_mass_1 = table[table_schema.prefix_column(label_1, 'MR.mass')]
	mr_mass_2 = table[table_schema.prefix_column(label_2, 'MR.mass')]

	table['MS.abs'] = mr_abs_2 - mr_abs_1
	table['MS.mass'] = mr_mass_2 - mr_mass_1
	table['MS.fact'] = mr_abs_2 / mr_abs_1

	zero_rates = numpy.count_nonzero(mr_abs_1 == 0)
	if zero_rates:
		logger.warning(f"{zero_rates} '{label_1}' absolute metabolic rates are zero. The factorial scope of those rows is infinite or undefined.")
	return table

from pathlib import Path
from typing import List, Optional, Union

import pandas
from loguru import logger

from fishresp import table_schema
from fishresp.errors import SchemaMismatch


class ValidateTable:
	# makes sure a metabolic rate table is formatted correctly.
	def __init__(self, required_columns: Optional[List[str]] = None):
		if required_columns is None:
			required_columns = table_schema.FULL_COLUMNS
		self.required_columns = list(required_columns)
		self.numeric_columns = [i for i in table_schema.NUMERIC_COLUMNS if i in self.required_columns]
		self.aliases = dict(table_schema.COLUMN_ALIASES)

		# Slopes with a lower coefficient of determination are reported, but still exported.
		self.minimum_r2 = 0.95

	@staticmethod
	def read_table(filename: Union[str, Path]) -> pandas.DataFrame:
		filename = Path(filename)
		suffix = filename.suffix.lower()
		if suffix == '.csv':
			table = pandas.read_csv(filename)
		elif suffix == '.tsv' or suffix == '.txt':
			table = pandas.read_csv(filename, sep = '\t')
		elif suffix == '.xlsx' or suffix == '.xls':
			table = pandas.read_excel(filename)
		else:
			message = f"Cannot determine the filetype of '{filename}'"
			raise ValueError(message)
		return table

	def check_table(self, table: Union[Path, str, pandas.DataFrame], name: str = 'table') -> pandas.DataFrame:
		"""
			Validates a metabolic rate table and returns a copy with the canonical column names.
		Parameters
		----------
		table: Union[Path, str, pandas.DataFrame]
			The table, or the path to a file containing it.
		name: str
			Used to identify the table in error messages.
		Raises
		------
		SchemaMismatch
			If a required column is missing or a numeric column holds non-numeric values.
		"""
		if not isinstance(table, pandas.DataFrame):
			# Assume it is a Pathlike object
			table = self.read_table(table)
		else:
			table = table.copy()

		table = self._rename_aliases(table)
		self._check_required_columns(table, name)
		self._check_numeric_columns(table, name)
		self._check_r2(table, name)

		return table

	def _rename_aliases(self, table: pandas.DataFrame) -> pandas.DataFrame:
		rename = dict()
		for alias, column in self.aliases.items():
			if alias in table.columns and column not in table.columns:
				logger.debug(f"Renaming column '{alias}' to '{column}'")
				rename[alias] = column
		if rename:
			table = table.rename(columns = rename)
		return table

	def _check_required_columns(self, table: pandas.DataFrame, name: str) -> None:
		missing = [i for i in self.required_columns if i not in table.columns]
		if missing:
			message = f"The {name} is missing the required columns {missing}. Got {list(table.columns)}"
			raise SchemaMismatch(message, missing)

	def _check_numeric_columns(self, table: pandas.DataFrame, name: str) -> None:
		for column in self.numeric_columns:
			series = table[column]
			# Columns such as `SE` are left empty by some slope extraction methods.
			if series.isna().all():
				continue
			if not pandas.api.types.is_numeric_dtype(series):
				message = f"The column '{column}' in the {name} should be numeric, got '{series.dtype}'"
				raise SchemaMismatch(message, [column])

	def _check_r2(self, table: pandas.DataFrame, name: str) -> None:
		if 'R2' not in table.columns or table['R2'].isna().all():
			return
		low_quality = table[table['R2'] < self.minimum_r2]
		if len(low_quality) > 0:
			logger.warning(f"{len(low_quality)} rows in the {name} have R2 < {self.minimum_r2}")

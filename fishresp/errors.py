"""
	Errors raised while preparing and exporting metabolic rate tables.
"""


class MissingArgument(ValueError):
	""" A required table or label was not supplied."""


class SchemaMismatch(ValueError):
	""" A table does not contain the expected columns, or a column has the wrong type."""

	def __init__(self, message: str, missing = None):
		super().__init__(message)
		self.missing = list(missing) if missing else []


class UnsupportedExportFormat(ValueError):
	# Not fatal. The exporter logs it and still returns the table.
	pass

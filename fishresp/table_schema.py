"""
	Column layouts of the metabolic rate tables.
	The classes are a reminder of how each table is formatted, the lists below are what the code actually uses.
"""
from typing import *


# Reminder of the format of each table.
class TableSchemaMetabolicRate:
	# One row per measurement period of a single trait (SMR, AMR, ...)
	Chamber_No: Union[str, int]  # The actual field name is `Chamber.No`
	Ind: Union[str, int]
	Mass: float  # Wet mass of the animal (g). Older tables call it `Weight`
	Volume: float  # Volume of the chamber
	DO_unit: str  # The actual field name is `DO.unit`. Ex. 'mg/L'
	Date_Time: str
	Phase: str  # Ex. 'M1', 'F3'
	Temp: float
	Slope_with_BR: float  # Slope of oxygen consumption including background respiration
	Slope: float
	SE: float
	R2: float
	MR_abs_with_BR: float
	BR: float  # Percentage of the slope attributed to background respiration
	MR_abs: float
	MR_mass: float


class TableSchemaMergedResults:
	# Key columns followed by the measurement columns of each trait, prefixed with the trait label.
	# Ex. `SMR_MR.abs`, `AMR_MR.abs`
	MS_abs: float  # AMR_MR.abs - SMR_MR.abs
	MS_mass: float  # AMR_MR.mass - SMR_MR.mass
	MS_fact: float  # AMR_MR.abs / SMR_MR.abs


KEY_COLUMNS = ['Chamber.No', 'Ind', 'Mass', 'Volume', 'DO.unit']

MEASUREMENT_COLUMNS = [
	'Date.Time', 'Phase', 'Temp', 'Slope.with.BR', 'Slope', 'SE', 'R2', 'MR.abs.with.BR', 'BR', 'MR.abs', 'MR.mass'
]

# Per-trait field names in the merged table. `MR.abs.with.BR` is exported as `<label>_MR.mass.with.BR`.
MERGED_MEASUREMENT_COLUMNS = [
	'Date.Time', 'Phase', 'Temp', 'Slope.with.BR', 'Slope', 'SE', 'R2', 'MR.mass.with.BR', 'BR', 'MR.abs', 'MR.mass'
]

NUMERIC_COLUMNS = ['Mass', 'Volume', 'Temp', 'Slope.with.BR', 'Slope', 'SE', 'R2', 'MR.abs.with.BR', 'BR', 'MR.abs', 'MR.mass']

# Older names for the same fields.
COLUMN_ALIASES = {
	'Weight':          'Mass',
	'MR.mass.with.BR': 'MR.abs.with.BR'
}

SCOPE_COLUMNS = ['MS.abs', 'MS.mass', 'MS.fact']

# The measurement columns kept when a table is simplified.
SIMPLIFIED_MEASUREMENT_COLUMNS = ['Temp', 'R2', 'BR', 'MR.abs', 'MR.mass']

FULL_COLUMNS = KEY_COLUMNS + MEASUREMENT_COLUMNS
SIMPLIFIED_COLUMNS = KEY_COLUMNS + SIMPLIFIED_MEASUREMENT_COLUMNS


def prefix_column(label: str, column: str) -> str:
	return f"{label}_{column}"


def merged_columns(label_1: str, label_2: str) -> List[str]:
	columns = list(KEY_COLUMNS)
	for label in [label_1, label_2]:
		columns += [prefix_column(label, column) for column in MERGED_MEASUREMENT_COLUMNS]
	return columns


def simplified_merged_columns(label_1: str, label_2: str, metabolic_scope: bool = False) -> List[str]:
	columns = list(KEY_COLUMNS)
	for label in [label_1, label_2]:
		columns += [prefix_column(label, column) for column in SIMPLIFIED_MEASUREMENT_COLUMNS]
	if metabolic_scope:
		columns += SCOPE_COLUMNS
	return columns

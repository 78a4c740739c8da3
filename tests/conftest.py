from pathlib import Path
from typing import *

import matplotlib

matplotlib.use('Agg')

import pandas
import pytest
from loguru import logger

folder_data = Path(__file__).parent / "data"


@pytest.fixture
def smr() -> pandas.DataFrame:
	return pandas.read_csv(folder_data / "SMR.tsv", sep = "\t")


@pytest.fixture
def amr() -> pandas.DataFrame:
	return pandas.read_csv(folder_data / "AMR.tsv", sep = "\t")


@pytest.fixture
def log_messages() -> List[str]:
	messages = list()
	handler_id = logger.add(lambda message: messages.append(message.record['message']), level = "DEBUG")
	yield messages
	logger.remove(handler_id)


def _make_row(chamber: str, ind: int, mr_abs: float, mr_mass: float, phase: str = 'M1') -> Dict[str, Any]:
	return {
		'Chamber.No':     chamber,
		'Ind':            ind,
		'Mass':           10.0,
		'Volume':         0.25,
		'Date.Time':      '2019-02-19 20:13:40',
		'Phase':          phase,
		'Temp':           16.0,
		'Slope.with.BR':  -1.0,
		'Slope':          -0.9,
		'SE':             0.01,
		'R2':             0.99,
		'MR.abs.with.BR': 0.25,
		'BR':             10.0,
		'MR.abs':         mr_abs,
		'MR.mass':        mr_mass,
		'DO.unit':        'mg/L'
	}


@pytest.fixture
def make_table() -> Callable[..., pandas.DataFrame]:
	""" Builds a metabolic rate table from (Chamber.No, Ind, MR.abs, MR.mass) tuples."""

	def _make_table(rows: List[Tuple[str, int, float, float]]) -> pandas.DataFrame:
		return pandas.DataFrame([_make_row(*row) for row in rows])

	return _make_table

from pathlib import Path
from typing import *


def checkdir(path: Union[str, Path]) -> Path:
	path = Path(path)
	if not path.exists():
		path.mkdir(parents = True)
	return path


def validate_label(label: Optional[str]) -> bool:
	""" Checks that a trait label can be used as a column prefix. Ex. 'SMR', 'AMR'"""
	return isinstance(label, str) and len(label.strip()) > 0


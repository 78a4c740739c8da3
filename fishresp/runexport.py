import sys
from pathlib import Path
from typing import *

import pandas
from loguru import logger

from fishresp import startup
from fishresp.exportmr import ResultExporter
from fishresp.projectpaths import Filenames
from fishresp.validation import ValidateTable


def create_parser(args: List[str] = None):
	import argparse
	parser = argparse.ArgumentParser(
		prog = "fishresp-export",
		description = "Exports metabolic rate tables and, given two traits, the metabolic scope."
	)

	parser.add_argument(
		"table1",
		help = "The metabolic rate table of the first trait (ex. standard metabolic rate). A .csv, .tsv, .txt or .xlsx file.",
		type = Path
	)
	parser.add_argument(
		"table2",
		help = "The metabolic rate table of the second trait (ex. active metabolic rate).",
		type = Path,
		nargs = '?',
		default = None
	)
	parser.add_argument(
		"--label1",
		help = "The prefix applied to the columns of the first table.",
		type = str,
		default = 'SMR'
	)
	parser.add_argument(
		"--label2",
		help = "The prefix applied to the columns of the second table.",
		type = str,
		default = 'AMR'
	)
	parser.add_argument(
		"--output",
		help = "The folder to save all of the output files. The table is saved as data/results.txt and the figures to figures/",
		type = Path,
		default = None
	)
	parser.add_argument(
		"--file",
		help = "The file to save the table to. Should be a .txt or .csv file. Ignored if `--output` is given.",
		type = str,
		default = ""
	)
	parser.add_argument(
		"--figure-format",
		help = "The file extension of the figures saved to `--output`. Ex. .png, .pdf, .svg",
		type = str,
		default = '.png'
	)
	parser.add_argument(
		"--full",
		help = "Keep all of the columns rather than the simplified table.",
		action = "store_true"
	)
	parser.add_argument(
		"--no-scope",
		help = "Do not calculate the metabolic scope.",
		action = "store_false",
		dest = "scope"
	)
	parser.add_argument(
		"--no-plots",
		help = "Do not plot the metabolic scope.",
		action = "store_false",
		dest = "plots"
	)
	parser.add_argument(
		"--banner",
		help = "Print the version and citation before running.",
		action = "store_true"
	)
	parser.add_argument(
		"--verbose",
		help = "Show all log messages.",
		action = "store_true"
	)
	if args:
		args = parser.parse_args(args)
	else:
		args = parser.parse_args()
	return args


def run(args: List[str] = None) -> pandas.DataFrame:
	args = create_parser(args)

	if args.verbose:
		logger.remove()  # Need to remove the default sink so that the logger doesn't print messages twice.
		logger.add(sys.stderr, level = "TRACE")
	if args.banner:
		startup.print_version_banner()

	if args.output:
		filenames = Filenames(args.output, figure_format = args.figure_format)
		filename = filenames.filename_table_results
		figure_folder = filenames.folder_figure
	else:
		filename = args.file
		figure_folder = None

	table_1 = ValidateTable.read_table(args.table1)
	table_2 = ValidateTable.read_table(args.table2) if args.table2 else None

	exporter = ResultExporter(
		simplify = not args.full,
		metabolic_scope = args.scope,
		plot_ms_abs = args.plots,
		plot_ms_mass = args.plots,
		plot_ms_fact = args.plots,
		figure_folder = figure_folder,
		figure_format = args.figure_format
	)
	return exporter.run(table_1, table_2, filename, label_1 = args.label1, label_2 = args.label2)


def main():
	run()


if __name__ == "__main__":
	main()

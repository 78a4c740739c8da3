__version__ = "0.1.0"

from .analysis import calculate_mr
from .errors import MissingArgument, SchemaMismatch, UnsupportedExportFormat
from .exportmr import ResultExporter, export_mr
from .startup import print_version_banner

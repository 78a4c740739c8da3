from .metabolicrate import calculate_mr
from .metabolicscope import calculate_metabolic_scope, merge_results, prefix_measurements

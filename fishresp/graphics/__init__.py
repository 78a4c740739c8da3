from .facetplot import FacetPlot
from .rateplot import MetabolicRatePlot
from .scopeplot import ScopePlot

from fishresp import __version__

CITATION = (
	"Morozov, S., McCairns, R.J.S., Merila, J. (2019) FishResp: R package\n"
	"and GUI application for analysis of aquatic respirometry data.\n"
	"Conserv Physiol 7(1): coz003; https://doi.org/10.1093/conphys/coz003"
)


def get_version_banner() -> str:
	rule = "=" * 70
	lines = [
		rule,
		f"fishresp {__version__} is loaded",
		rule,
		"For a description of the metabolic rate calculations",
		"& to cite the method please refer to:",
		"",
		CITATION,
		rule
	]
	return "\n".join(lines)


def print_version_banner() -> None:
	""" Prints the version and citation. Never called on import."""
	print(get_version_banner())

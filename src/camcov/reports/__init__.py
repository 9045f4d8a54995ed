from .json_report import JSONReporter
from .terminal_report import print_lattice_summary, print_terminal_summary

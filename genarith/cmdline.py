"""
Generic arithmetic at the command line.

{0}

For example:

    genarith "(add (rational 1 2) (rational 1 3))"

prints 5/6. With no expressions given, each line of standard input is one.

Numbers are ordinary numbers. (rational n d), (rectangular x y) and (polar r a)
make the other kinds. The operations are add, sub, mul, div, equ?, =zero?,
real-part, imag-part, magnitude and angle.
"""
import sys, argparse
from typing import Optional, Sequence
from boozetools.support.failureprone import SourceText

from .diagnostics import Report, TooManyIssues
from .evaluator import Evaluator, Mishap
from .generic import NoMethodForTypes, standard_arithmetic
from .reader import read, ReaderError
from .render import render

def _positive(text:str) -> int:
	value = int(text)
	if value < 1:
		raise argparse.ArgumentTypeError("must be at least 1, not %d" % value)
	return value

parser = argparse.ArgumentParser(
	prog="genarith",
	description="Evaluate generic-arithmetic expressions.",
)
parser.add_argument("expr", nargs="*", help='try "(magnitude (rectangular 3 4))" for example.')
parser.add_argument('-v', "--verbose", action="count", help="Trace package installation to stderr.")
parser.add_argument("--max-issues", type=_positive, default=10, help="Give up after this many failed expressions.")

def evaluate_line(text:str, evaluator:Evaluator, report:Report):
	source = SourceText(text)
	try:
		value = evaluator.evaluate(read(text))
	except ReaderError as ex:
		report.malformed_expression(source, ex.where, ex.hint)
	except Mishap as ex:
		cause, where = ex.__cause__, ex.combination.slice
		if isinstance(cause, NoMethodForTypes):
			report.no_applicable_method(source, where, cause.operation, cause.type_tags)
		else:
			report.mishap(source, where, cause)
	else:
		print(render(value))

def run(args) -> int:
	report = Report(verbose=args.verbose, max_issues=args.max_issues)
	evaluator = Evaluator(standard_arithmetic(report))
	lines = args.expr or [line.rstrip("\n") for line in sys.stdin if line.strip()]
	try:
		for text in lines:
			evaluate_line(text, evaluator, report)
	except TooManyIssues:
		report.complain_to_console()
		print(" *"*35, file=sys.stderr)
		print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
		return 1
	if report.sick():
		report.complain_to_console()
		return 1
	return 0

def main(argv:Optional[Sequence[str]]=None) -> int:
	args = parser.parse_args(argv)
	if not args.expr and sys.stdin.isatty():
		print(__doc__.strip().format(parser.format_usage()))
		return 0
	return run(args)

"""
Every value that flows through the generic operations wears a tag naming
the package which made it. Tags nest: a complex number is a "complex" tag
around a "rectangular" or "polar" tag around a plain pair of reals.

Tags are plain strings. The set is open: a new package brings its own.
"""
from typing import Any, NamedTuple

SCHEME_NUMBER = "scheme-number"
RATIONAL = "rational"
COMPLEX = "complex"
RECTANGULAR = "rectangular"
POLAR = "polar"

class BadTaggedDatum(TypeError):
	""" Something without a tag showed up where a tagged datum belongs. """
	def __init__(self, datum):
		super().__init__("Bad tagged datum: %r" % (datum,))
		self.datum = datum

class Tagged(NamedTuple):
	tag: str
	contents: Any
	
	def __repr__(self):
		return "<%s %r>" % (self.tag, self.contents)

def attach_tag(tag:str, contents) -> Tagged:
	return Tagged(tag, contents)

def type_tag(datum) -> str:
	if isinstance(datum, Tagged): return datum.tag
	raise BadTaggedDatum(datum)

def contents(datum):
	""" Strip exactly one level of tag. """
	if isinstance(datum, Tagged): return datum.contents
	raise BadTaggedDatum(datum)

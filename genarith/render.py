"""
Text for values, for the benefit of the command-line driver.
Dispatches on tags the same way the arithmetic does, one level at a time.
"""
from .tagging import Tagged, type_tag, contents, SCHEME_NUMBER, RATIONAL, COMPLEX, RECTANGULAR, POLAR

def _number(x) -> str:
	if isinstance(x, float) and x.is_integer(): return str(int(x))
	return str(x)

def _rational(pair) -> str:
	n, d = pair
	return str(n) if d == 1 else "%d/%d" % (n, d)

def _rectangular(pair) -> str:
	x, y = pair
	sign = "-" if y < 0 else "+"
	return "%s%s%si" % (_number(x), sign, _number(abs(y)))

def _polar(pair) -> str:
	r, a = pair
	return "%s@%s" % (_number(r), _number(a))

RENDER = {
	SCHEME_NUMBER: _number,
	RATIONAL: _rational,
	COMPLEX: lambda z: render(z),
	RECTANGULAR: _rectangular,
	POLAR: _polar,
}

def render(value) -> str:
	if isinstance(value, bool): return "true" if value else "false"
	if not isinstance(value, Tagged): return _number(value)
	try: fn = RENDER[type_tag(value)]
	except KeyError: return repr(value)
	return fn(contents(value))

import sys, random
from typing import Any
from boozetools.support.failureprone import SourceText, illustration

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]
	
	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Confound it', 'Crud', 'Curses', "Crikey",
		'Dag Nabbit', 'Drat', 'Fiddlesticks', 'Good Grief', "Great Scott",
		'Heavens', 'Jeepers', 'Nuts', 'Rats', 'Woe is me',
	]
	
	resignations = [
		'That does not compute.',
		'The numbers refuse to cooperate.',
		'I have no idea what the right answer is.',
		'I need to ask for help.',
	]
	
	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	""" Collects the issues of a run, and the odd trace message when verbose. """
	_issues : list["Pic"]
	
	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues
	
	def sick(self): return bool(self._issues)
	
	def issue(self, it:Any):
		self._issues.append(it)
		if len(self._issues) >= self._max_issues:
			raise TooManyIssues(self)
	
	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)
	
	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)
	
	# Methods the command-line driver calls:
	
	def malformed_expression(self, source:SourceText, where:slice, hint:str):
		intro = "I could not make sense of this expression."
		self.issue(Pic(intro, [Annotation(source, where, hint)]))
	
	def mishap(self, source:SourceText, where:slice, ex:Exception):
		intro = "This combination could not be evaluated:"
		footer = [type(ex).__name__+": "+str(ex)]
		self.issue(Pic(intro, [Annotation(source, where, "This one.")], footer))
	
	def no_applicable_method(self, source:SourceText, where:slice, operation:str, type_tags:tuple):
		intro = "A generic operation goes off the rails. Here's how:"
		footer = [
			"Operation '%s' has no method for %s." % (operation, str(tuple(type_tags))),
			"Mixed types are not coerced. If these are the types you mean to operate on,",
			"then please install a package which defines the operation for them.",
		]
		self.issue(Pic(intro, [Annotation(source, where, "This one.")], footer))

class Annotation:
	source: SourceText
	slice: slice
	caption: str
	def __init__(self, source:SourceText, where:slice, caption:str=""):
		self.source = source
		self.slice = where
		self.caption = caption
	def illustrate(self):
		row, col = self.source.find_row_col(self.slice.start)
		single_line = self.source.line_of_text(row)
		width = max(1, self.slice.stop - self.slice.start)
		return illustration(single_line, col, width, prefix='% 6d |' % row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	def as_text(self):
		lines = [self._intro, ""]
		lines.extend(ann.illustrate() for ann in self._anns)
		lines.extend(self._footer)
		return '\n'.join(lines)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()

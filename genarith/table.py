"""
The operation table maps (operation, signature) to an implementation.

A signature is ordinarily a tuple of type-tags, one per argument, in order.
Constructors have no tagged argument to dispatch on, so they register under
a bare tag instead. The two kinds of key never collide:
("rectangular",) and "rectangular" are different signatures.

The first registration of a key wins. Later attempts are ignored, not refused.
The table only ever grows.
"""
from typing import Callable, Optional, Union
from .diagnostics import Report

SIGNATURE = Union[str, tuple[str, ...]]

ABSENT = object()

def _key(operation:str, signature) -> tuple:
	if not isinstance(signature, str):
		signature = tuple(signature)
	return operation, signature

class OperationTable:
	def __init__(self, report:Optional[Report]=None):
		self._methods : dict[tuple, Callable] = {}
		self._report = report
	
	def __len__(self): return len(self._methods)
	
	def __contains__(self, key) -> bool:
		return _key(*key) in self._methods
	
	def register(self, operation:str, signature:SIGNATURE, implementation:Callable):
		key = _key(operation, signature)
		if key in self._methods:
			self._trace("Ignoring second registration of %s %s", key)
		else:
			self._methods[key] = implementation
			self._trace("Registered %s %s", key)
	
	def lookup(self, operation:str, signature:SIGNATURE):
		""" Returns the implementation, or ABSENT. """
		return self._methods.get(_key(operation, signature), ABSENT)
	
	def _trace(self, pattern, key):
		if self._report is not None:
			self._report.info(pattern % key)

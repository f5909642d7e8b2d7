"""
Interface definitions shared by every part of the engine.

A parser is any callable taking a `View` and returning either a `Success` or a `Failure`.
Failure is an ordinary return value: backtracking control (the commit point) rides along
as a flag on the `Failure`, so every combinator's contract says exactly what it does with it.
Exceptions only appear at the outer surface, where `runtime.parse` turns a failure into a
rendered `ParseError`.
"""

from typing import Any, Callable, NamedTuple, Optional, Union

WHITESPACE = ' \t\r\n'
BOUNDARY = ' \t\r\n()[]{};' # No bare token may contain any of these.

OPEN_CLOSE = {'(': ')', '[': ']', '{': '}'}


class LanguageError(ValueError):
	""" Base class of all exceptions arising from the language machinery. """

class MetaError(LanguageError):
	""" This gets raised if there's something wrong in the definition of a grammar. """

class ParseError(LanguageError):
	"""
	Raised by the top-level entry points when input does not match.
	The message is the rendered diagnostic; the structured `ErrorStack` is kept as `errors`.
	"""
	def __init__(self, message:str, errors, text:str, committed:bool):
		super().__init__(message)
		self.errors, self.text, self.committed = errors, text, committed

	def __str__(self): return self.args[0]


class View(NamedTuple):
	"""
	A suffix of the source text, starting at `pos`. Nothing is ever copied:
	every view of a parse shares the same `text`, so `pos` is all it takes
	to find the line and column of a view later on.
	"""
	text: str
	pos: int = 0

	def peek(self) -> Optional[str]:
		""" The next character, or None at end of text. """
		return self.text[self.pos] if self.pos < len(self.text) else None

	def at_end(self) -> bool: return self.pos >= len(self.text)

	def advance(self, n:int) -> 'View': return View(self.text, self.pos + n)

	def __repr__(self):
		snippet = self.text[self.pos:self.pos+10]
		return 'View(%d, %r%s)'%(self.pos, snippet, '...' if self.pos+10 < len(self.text) else '')


class Success(NamedTuple):
	rest: View
	value: Any = None


class Failure(NamedTuple):
	"""
	`committed` is False for a recoverable failure, which an enclosing alternation may discard
	in favor of trying another candidate. Once True, nobody may backtrack past it.
	"""
	errors: Any # an error.ErrorStack
	committed: bool = False

	def commit(self) -> 'Failure':
		return self if self.committed else Failure(self.errors, True)


Result = Union[Success, Failure]
Parser = Callable[[View], Result]

"""
The error model: what went wrong, where, and in what context.

A failed parse returns an `ErrorStack`. It starts life holding one entry at the deepest point
of failure. As the failure unwinds through enclosing combinators, each may append one more
entry (a context label such as "closing paren") describing where we were when it happened.
Entry 0 is therefore always the most specific complaint, and it is the one shown by default.
"""

from enum import Enum
from typing import Any, NamedTuple

from .interface import View, Failure, Parser
from .support.failureprone import SourceText, illustration


class Kind(Enum):
	CHAR = 'char'
	WORD = 'word'
	NUMBER = 'number'
	CONTEXT = 'context'
	PRIMITIVE = 'primitive'


class Primitive(Enum):
	""" Failures of the generic combinators, with what each was looking for. """
	ALPHA = 'a letter'
	DIGIT = 'a digit'
	ONE_OF = 'one of a set of characters'
	NONE_OF = 'a character outside a set'
	MANY0 = 'input to be consumed by a repetition'
	MANY1 = 'at least one repetition'
	ALT = 'one of several alternatives'
	EOF = 'end of input'
	MULTISPACE = 'whitespace'
	NESTING = 'shallower nesting'


class Diagnostic(NamedTuple):
	kind: Kind
	detail: Any = None # char, word, context label, or Primitive member, according to `kind`.


class ErrorStack:
	""" Ordered (view, diagnostic) pairs: deepest first, then progressively more context. """

	def __init__(self, entries=()):
		self.entries = list(entries)

	@classmethod
	def from_char(cls, view:View, c:str) -> 'ErrorStack':
		return cls([(view, Diagnostic(Kind.CHAR, c))])

	@classmethod
	def from_word(cls, view:View, text:str) -> 'ErrorStack':
		""" `text` is the word actually found, not the one that was wanted. """
		return cls([(view, Diagnostic(Kind.WORD, text))])

	@classmethod
	def number(cls, view:View) -> 'ErrorStack':
		return cls([(view, Diagnostic(Kind.NUMBER))])

	@classmethod
	def from_primitive(cls, view:View, kind:Primitive) -> 'ErrorStack':
		return cls([(view, Diagnostic(Kind.PRIMITIVE, kind))])

	def add_context(self, view:View, label:str) -> 'ErrorStack':
		self.entries.append((view, Diagnostic(Kind.CONTEXT, label)))
		return self

	def append(self, view:View, kind:Primitive) -> 'ErrorStack':
		self.entries.append((view, Diagnostic(Kind.PRIMITIVE, kind)))
		return self

	def __len__(self): return len(self.entries)
	def __getitem__(self, index): return self.entries[index]
	def __iter__(self): return iter(self.entries)

	def __repr__(self):
		return 'ErrorStack(%r)'%[(view.pos, diagnostic) for view, diagnostic in self.entries]

	@property
	def top(self) -> Diagnostic:
		return self.entries[0][1]

	def render_top(self, text:str) -> str:
		"""
		Format only the deepest entry as text for humans.
		Use `render_all` to get the whole stack.
		"""
		if not self.entries: raise ValueError("No errors found")
		return format_entry(SourceText(text), 0, *self.entries[0])

	def render_all(self, text:str) -> str:
		""" Format every entry, deepest first. """
		if not self.entries: raise ValueError("No errors found")
		source = SourceText(text)
		return ''.join(format_entry(source, i, view, diagnostic) for i, (view, diagnostic) in enumerate(self.entries))


def context(label:str, parser:Parser) -> Parser:
	"""
	Attach a human-friendly label to whatever goes wrong inside `parser`.
	The label is associated with the view where `parser` started, and it
	never changes whether the failure is recoverable or committed.
	"""
	def parse(view:View):
		result = parser(view)
		if isinstance(result, Failure): result.errors.add_context(view, label)
		return result
	return parse


def _expectation(diagnostic:Diagnostic):
	kind, detail = diagnostic
	if kind is Kind.CHAR: return "'%s'"%detail
	if kind is Kind.WORD: return 'a keyword'
	if kind is Kind.NUMBER: return 'a number'
	if kind is Kind.PRIMITIVE: return detail.value
	return None

def _label(diagnostic:Diagnostic) -> str:
	kind, detail = diagnostic
	if kind is Kind.CONTEXT: return detail
	return detail.name.lower()


def format_entry(source:SourceText, num:int, view:View, diagnostic:Diagnostic) -> str:
	expected = _expectation(diagnostic)
	if not source.content:
		if expected is None: return "%d: in %s, got empty input\n\n"%(num, _label(diagnostic))
		return "%d: expected %s, got empty input\n\n"%(num, expected)

	row, col = source.find_row_col(view.pos)
	if diagnostic.kind in (Kind.CONTEXT, Kind.PRIMITIVE):
		header = "%d: at line %d, in %s:"%(num, row, _label(diagnostic))
	else:
		header = "%d: at line %d:"%(num, row)
	lines = [header, illustration(source.line_of_text(row), col)]
	if diagnostic.kind is Kind.WORD:
		lines.append('expected a keyword, found "%s"'%diagnostic.detail)
	elif expected is not None:
		lines.append("expected %s, found %s"%(expected, source.char_at(view.pos)))
	return '\n'.join(lines) + '\n\n'

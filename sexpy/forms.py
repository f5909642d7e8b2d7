"""
Glue for the two shapes that grammars keep asking for:

	form(tag, *fields)       ~ a record: (tag field field ...)
	variants(tag, *cases)    ~ a tagged union: (tag <one of the cases>)

These compose the primitives the same way for every rule, so a grammar reads like the
data types it builds. For instance:

	port = form('port', field('name', leaves.text), field('width', leaves.u64), build=Port)
	port_list = form('ports', leaves.repeated(port))

A tag of None means "no head": just the arguments. Nothing here checks two rules for
ambiguity; if two cases parse the same text, the first one listed wins.
"""

from .interface import BOUNDARY, MetaError, Parser, View, Success, Failure
from .error import ErrorStack, Primitive, context
from .combinators import alt, mapped, preceded, sequence
from . import primitives
from .primitives import head, wordbreak0
from .leaves import allow_absent, may_be_absent


def _check_tag(tag):
	if tag is None: return
	if not tag or any(c in BOUNDARY for c in tag):
		raise MetaError("%r cannot be used as a keyword: it must be non-empty and contain no space, comment or bracket."%tag)

def _tupled(*values): return values

def _follows_boundary(view:View) -> bool:
	return view.pos == 0 or view.text[view.pos-1] in BOUNDARY

def _separated(parser:Parser) -> Parser:
	"""
	A field must not be glued onto the token before it: either a word break comes first,
	or the previous character is already a space or a bracket. Fields that may be absent
	only skip whatever word break happens to be there.
	"""
	if may_be_absent(parser): return preceded(wordbreak0, parser)
	def parse(view:View):
		start, view = view, wordbreak0(view).rest
		result = parser(view)
		if isinstance(result, Failure) or view.pos > start.pos or _follows_boundary(start): return result
		return Failure(ErrorStack.from_primitive(start, Primitive.MULTISPACE))
	return parse


def field(name:str, parser:Parser) -> Parser:
	""" Failures inside `parser` get a note saying which field was being parsed. """
	labelled = context("field `%s`"%name, parser)
	return allow_absent(labelled) if may_be_absent(parser) else labelled


def form(tag, *fields:Parser, build=None, surround=True) -> Parser:
	"""
	Head pattern `tag field field ...`, with whitespace or comments between the parts.
	The value is `build(*field_values)`, or the tuple of field values if `build` is None.
	With `surround`, the whole pattern must sit inside parens, brackets or braces.
	"""
	_check_tag(tag)
	build = build or _tupled
	if fields:
		arguments = mapped(sequence(*[_separated(f) for f in fields]), lambda values: build(*values))
	else:
		arguments = lambda view: Success(view, build())
	pattern = arguments if tag is None else head(tag, arguments)
	return primitives.surround(pattern) if surround else pattern


def variants(tag, *cases:Parser, surround=True) -> Parser:
	"""
	One of several `cases`, normally each a `form(..., surround=False)`, tried in order.
	A case whose own head matched is committed: its errors are not papered over by
	trying the remaining cases.
	"""
	_check_tag(tag)
	if not cases: raise MetaError("variants(%r) needs at least one case."%tag)
	choice = alt(*[preceded(wordbreak0, case) for case in cases])
	pattern = choice if tag is None else head(tag, choice)
	return primitives.surround(pattern) if surround else pattern

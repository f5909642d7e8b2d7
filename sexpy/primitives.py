"""
The primitives of the head-pattern grammar: insignificant space, keywords, delimiters.

The interesting one is `head`. Once its keyword matches we have strong evidence that the
right rule was chosen, so whatever goes wrong in the arguments is committed: an enclosing
alternation reports it as-is instead of wandering off to try a sibling rule and coming back
with some vague "nothing matched" complaint.
"""

from .interface import View, Success, Failure, Parser, WHITESPACE, BOUNDARY, OPEN_CLOSE
from .error import ErrorStack, Primitive, context
from .combinators import char, one_of, none_of, take_till, many0, many1, alt, cut, preceded, sequence, mapped

CLOSING_CONTEXT = {')': 'closing paren', ']': 'closing bracket', '}': 'closing brace'}


def ignore(parser:Parser) -> Parser:
	""" The `parser`, but the value is thrown away. """
	return mapped(parser, lambda _: None)

comment = ignore(preceded(char(';'), many0(none_of('\r\n'))))

_gap = alt(ignore(one_of(WHITESPACE)), comment)
wordbreak0 = ignore(many0(_gap))
wordbreak1 = ignore(many1(_gap))

_token = take_till(BOUNDARY)


def word(expected:str) -> Parser:
	""" Matches exactly the token `expected`; on a mismatch, the complaint names what was found. """
	def parse(view:View):
		rest, found = _token(view)
		if found == expected: return Success(rest, None)
		return Failure(ErrorStack.from_word(view, found))
	return parse


def _delimited_by(opener:str, inner:Parser) -> Parser:
	closer = OPEN_CLOSE[opener]
	closing = cut(context(CLOSING_CONTEXT[closer], preceded(wordbreak0, char(closer))))
	body = sequence(char(opener), wordbreak0, cut(inner), closing)
	return mapped(body, lambda parts: parts[2])

def surround(inner:Parser) -> Parser:
	"""
	`inner` between parens, brackets or braces. Past the opening delimiter, everything is
	committed, including the closing delimiter. With no opening delimiter at all, the
	recoverable complaint is always about '('. Nesting too deep for the interpreter's stack
	is a committed failure at the innermost opening delimiter that can still report it.
	"""
	table = {opener: _delimited_by(opener, inner) for opener in OPEN_CLOSE}
	def parse(view:View):
		try: delimited = table[view.peek()]
		except KeyError: return Failure(ErrorStack.from_char(view, '('))
		try: return delimited(view)
		except RecursionError: return Failure(ErrorStack.from_primitive(view, Primitive.NESTING), True)
	return parse


def head(tag:str, inner:Parser) -> Parser:
	""" The keyword `tag`, a commit point, then `inner`. """
	return preceded(context("incorrect head", word(tag)), cut(inner))

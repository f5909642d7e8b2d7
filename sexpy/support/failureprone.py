"""
This module is all about showing where things went wrong.

The engine never tracks line numbers while parsing. A `View` is just an offset into the
source text, so the work of turning an offset into a (row, column) pair happens only
once something fails and somebody wants to read about it. The `SourceText` does that work,
lazily, and hands back the offending line so the error display can draw a caret under it.

Line breaks: the Unix, old-Apple and DOS conventions all count. A text with no line
breaks at all is a single line. Rows and columns are both zero-based here because the
rendered diagnostics report them that way.
"""

import bisect, re

LINEBREAK = re.compile(r'\r\n?|\n')

class SourceText:
	""" Wrapper for source text: finds rows, columns and whole lines for error display. """
	def __init__(self, content:str):
		self.content = content
		self.__bounds = None
		self.__breaks = None

	def __make_bounds(self):
		""" Lazily only find line breaks if it turns out to be necessary for a particular text. """
		if self.__bounds is None:
			matches = list(LINEBREAK.finditer(self.content))
			self.__bounds = [0] + [m.end() for m in matches] + [len(self.content)]
			self.__breaks = [m.start() for m in matches] + [len(self.content)]

	def find_row_col(self, index:int):
		""" Based on a character index offset from the start of text. """
		self.__make_bounds()
		row = bisect.bisect_right(self.__bounds, index, hi=len(self.__bounds) - 1) - 1
		col = index - self.__bounds[row]
		return row, col

	def line_of_text(self, row) -> str:
		""" The text of a row, without its line break. """
		self.__make_bounds()
		return self.content[self.__bounds[row]:self.__breaks[row]]

	def char_at(self, index:int) -> str:
		""" Quoted character at `index`, or the end-of-input marker. """
		return "'%s'"%self.content[index] if index < len(self.content) else '<eof>'


def illustration(single_line:str, column:int) -> str:
	""" The offending line with a caret under `column`. Tabs are kept so the caret lines up. """
	blanks = ''.join(c if c == '\t' else ' ' for c in single_line[:column])
	return single_line + '\n' + blanks + '^'

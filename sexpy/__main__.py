"""
Check files written in the head-pattern syntax:

	(keyword argument ...)   ; comments run to the end of the line

Each file must contain nothing but atoms and surrounded forms. Problems are reported
on STDERR with the offending line and a caret under the spot where parsing gave up.
"""

import sys, argparse

from sexpy import runtime, tree
from sexpy.interface import ParseError

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m sexpy', description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
	parser.add_argument('source_paths', nargs='+', metavar='source_path', help='path to input file')
	parser.add_argument('-v', '--verbose', action='store_true', help="Show the whole chain of context for each error, not just the deepest complaint.")
	parser.add_argument('--echo', action='store_true', help='Print each datum back out in canonical form.')
	return parser.parse_args(argv)

def main(args) -> int:
	if args.verbose: runtime.VERBOSE = True
	status = 0
	for path in args.source_paths:
		with open(path) as fh: document = fh.read()
		try: data = tree.load(document)
		except ParseError as e:
			print(path+':', file=sys.stderr)
			print(e, file=sys.stderr, end='')
			status = 1
		else:
			if args.echo:
				for datum in data: print(datum)
	return status

if __name__ == '__main__': exit(main(parse_arguments()))

"""
Show the generic representation that a type has been given.

{0}

For example:

    deriving builtins:list -m

shows the representation of Python lists along with their metadata, and

    deriving builtins:list -p

shows how lists look as a type-constructor.

    deriving -h

will explain all the arguments.
"""
import sys, argparse
from importlib import import_module
from pathlib import Path
from traceback import TracebackException
from .diagnostics import Report, TooManyIssues
from .shapes import ShapeVisitor, Meta, Void, Unit, Field, Sum, Product, Composition, Parameter, Recursive
from . import metadata

parser = argparse.ArgumentParser(
	prog="deriving",
	description="Describe the generic representation of a datatype.",
)
parser.add_argument("subject", help="module:name of a type with a registered instance, e.g. builtins:list")
parser.add_argument('-p', "--parameter", action="store_true", help="Show the type-constructor representation instead.")
parser.add_argument('-m', "--metadata", action="store_true", help="Also outline datatype, constructor, and selector metadata.")
parser.add_argument('-v', "--verbose", action="count", help="Mention what's going on along the way.")

def run(args) -> int:
	from . import instances  # Built-in instances are always available.
	from .representable import representable, representable1, NotRepresentable
	report = Report(verbose=args.verbose)
	try:
		subject = _find_subject(args.subject, report)
		if report.sick():
			report.complain_to_console()
			return 1
		try:
			if args.parameter: shape = representable1(subject).rep1
			else: shape = representable(subject).rep
		except NotRepresentable:
			report.not_representable(subject, args.parameter)
			report.complain_to_console()
			return 1
	except TooManyIssues:
		report.complain_to_console()
		return 1
	report.info("Found an instance for %r." % (subject,))
	print(shape)
	if args.metadata:
		for line in shape.visit(Outline(), 0):
			print(line)
	return 0

def _find_subject(text:str, report:Report):
	module_name, colon, name = text.partition(":")
	if not (colon and module_name and name):
		report.malformed_subject(text)
		return
	if str(Path.cwd()) not in sys.path:
		sys.path.insert(0, str(Path.cwd()))
	report.info("Importing %s" % module_name)
	try:
		module = import_module(module_name)
	except ModuleNotFoundError as ex:
		if ex.name != module_name: report.broken_module(module_name, TracebackException.from_exception(ex))
		else: report.no_such_module(module_name)
		return
	except Exception as ex:
		report.broken_module(module_name, TracebackException.from_exception(ex))
		return
	subject = module
	for part in name.split("."):
		try: subject = getattr(subject, part)
		except AttributeError:
			report.no_such_name(module_name, name)
			return
	return subject

class Outline(ShapeVisitor):
	""" Lines of text, indented by depth, naming every tag in a shape. """
	def on_void(self, v:Void, depth): return ["  "*depth + "(no constructors)"]
	def on_unit(self, u:Unit, depth): return []
	def on_parameter(self, p:Parameter, depth): return []
	def on_recursive(self, r:Recursive, depth): return []
	def on_field(self, f:Field, depth): return []
	def on_composition(self, c:Composition, depth): return c.inner.visit(self, depth)
	def on_sum(self, s:Sum, depth): return s.left.visit(self, depth) + s.right.visit(self, depth)
	def on_product(self, p:Product, depth): return p.left.visit(self, depth) + p.right.visit(self, depth)
	def on_meta(self, m:Meta, depth):
		indent = "  "*depth
		if m.is_datatype():
			line = "datatype %s (module %s)" % (metadata.datatype_name(m), metadata.module_name(m))
		elif m.is_constructor():
			line = "constructor %s: %s" % (metadata.con_name(m), _describe_fixity(metadata.con_fixity(m)))
			if metadata.con_is_record(m): line += ", record"
		else:
			line = "selector %s" % (metadata.sel_name(m) or "(positional)")
		return [indent + line] + m.inner.visit(self, depth+1)

def _describe_fixity(fixity) -> str:
	if fixity is metadata.PREFIX: return "prefix"
	glyph = {
		metadata.LEFT_ASSOCIATIVE: "infixl",
		metadata.RIGHT_ASSOCIATIVE: "infixr",
		metadata.NOT_ASSOCIATIVE: "infix",
	}[fixity.associativity]
	return "%s %d" % (glyph, metadata.precedence_of(fixity))

def main(argv=None):
	argv = sys.argv[1:] if argv is None else argv
	if argv:
		exit(run(parser.parse_args(argv)))
	else:
		print(__doc__.strip().format(parser.format_usage()))

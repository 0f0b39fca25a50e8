import sys, random
from traceback import TracebackException

class TooManyIssues(Exception):
	pass

class Absurd(AssertionError):
	"""
	Something reached a place that cannot be reached.
	In practice that means a hand-written or generated instance disagrees
	with the datatype it claims to represent. Nothing should catch this.
	"""
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Blasted Thing',
		'Confound it', 'Crud', 'Curses', "Crikey",
		'Dag Nabbit', 'Drat',
		'Fiddlesticks', 'Flaming Flamingos',
		'Gack', 'Good Grief', 'Great Googly Moogly', "Great Scott",
		'SNAP', "Sweet Cheese and Crackers",
		'Jeepers', 'Heavens', "Mercy", 'Nuts', 'Rats',
	]

	resignations = [
		'I am undone.',
		'I cannot continue.',
		'I have no idea what the right answer is.',
		'I need to ask for help.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	""" Collects whatever went wrong, so it can all be told at once. """
	_issues : list["Pic"]

	def __init__(self, *, verbose:int, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	@property
	def issues(self): return tuple(self._issues)

	def issue(self, it:"Pic"):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

	# Methods the command-line front end calls:

	def malformed_subject(self, subject:str):
		intro = "I expected something like module:name but got %r." % subject
		self.issue(Pic(intro, ["For example: builtins:list"]))

	def no_such_module(self, module_name:str):
		self.issue(Pic("I see no module called %s." % module_name))

	def broken_module(self, module_name:str, tbx:TracebackException):
		intro = "Attempting to import %s threw an exception." % module_name
		self.issue(Pic(intro, [''.join(tbx.format())]))

	def no_such_name(self, module_name:str, name:str):
		self.issue(Pic("Module %s has nothing called %r." % (module_name, name)))

	def not_representable(self, subject, constructor_level:bool):
		if constructor_level:
			intro = "No type-constructor representation is registered for %r." % (subject,)
			footer = ["Perhaps drop the -p flag?"]
		else:
			intro = "No representation is registered for %r." % (subject,)
			footer = ["Register one with @instance(...) in the module that defines it."]
		self.issue(Pic(intro, footer))

class Pic:
	def __init__(self, intro:str, footer=()):
		self._intro, self._footer = intro, footer
	@property
	def description(self): return self._intro
	def as_text(self):
		lines = [self._intro]
		lines.extend(self._footer)
		return '\n'.join(lines)

def trace_absurdity(where:str):
	intro = "Absurd thing happened:"
	footer = [
		"  "+where,
		"An uninhabited representation was reached at run-time.",
		"The instance for this datatype does not match its structure.",
	]
	_bemoan([Pic(intro, footer)])

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()

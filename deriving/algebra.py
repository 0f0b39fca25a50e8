"""
Representation values: the terms that `from_` produces and `to` consumes.

Each class here is a lifted version of something familiar:

	VoidRep         an empty type (no values whatsoever)
	UnitRep         the unit type ()
	FieldRep        a container for one field's contents
	MetaRep         a wrapper; the metadata lives on the shape, not in here
	SumRep          a binary choice, like Either
	ProductRep      a binary pair, like (,)
	CompositionRep  an outer container of inner representation values
	ParameterRep    the parameter itself, for type-constructor representations
	RecursiveRep    an application of the type-constructor to the parameter

None of them knows its own shape. Generic functions walk the shape
(see `deriving.shapes`) and carry these values along for the ride.

Equality is structural, but respects the combinator:
A FieldRep(5) is not a ParameterRep(5), even though both hold a 5.
"""
from typing import Any, NoReturn
from .diagnostics import Absurd, trace_absurdity

class Rep:
	__slots__ = ()
	def payload(self) -> tuple: raise NotImplementedError(type(self))
	def __eq__(self, other): return type(self) is type(other) and self.payload() == other.payload()
	def __hash__(self): return hash((type(self),) + self.payload())
	def __repr__(self): return "%s(%s)" % (type(self).__name__, ", ".join(map(repr, self.payload())))

class VoidRep(Rep):
	""" Representation of a datatype with no alternatives. There is no such value. """
	__slots__ = ()
	def __new__(cls, *args, **kwargs):
		_fatal("something tried to construct a VoidRep")

def absurd(rep:Any=None) -> NoReturn:
	"""
	Call this from a generic function's Void case.
	Reaching it means an instance handed over a value of an uninhabited type,
	which means the instance is broken. That is fatal.
	"""
	_fatal("dispatch reached VoidRep with %r" % (rep,))

def _fatal(where:str) -> NoReturn:
	trace_absurdity(where)
	raise Absurd(where)

class UnitRep(Rep):
	""" An alternative with no fields. There is exactly one. """
	__slots__ = ()
	_it = None
	def __new__(cls):
		if cls._it is None: cls._it = super().__new__(cls)
		return cls._it
	def payload(self) -> tuple: return ()
	def __repr__(self): return "UNIT"

UNIT = UnitRep()

class FieldRep(Rep):
	__slots__ = ("value",)
	def __init__(self, value): self.value = value
	def payload(self) -> tuple: return (self.value,)

class MetaRep(Rep):
	__slots__ = ("inner",)
	def __init__(self, inner:Rep):
		assert isinstance(inner, Rep), inner
		self.inner = inner
	def payload(self) -> tuple: return (self.inner,)

class SumRep(Rep):
	"""
	Tagged union of two sub-representations.
	Use `SumRep.left` and `SumRep.right` rather than the constructor.
	"""
	__slots__ = ("is_right", "inner")
	def __init__(self, is_right:bool, inner:Rep):
		assert isinstance(inner, Rep), inner
		self.is_right = bool(is_right)
		self.inner = inner
	@classmethod
	def left(cls, inner:Rep) -> "SumRep": return cls(False, inner)
	@classmethod
	def right(cls, inner:Rep) -> "SumRep": return cls(True, inner)
	def payload(self) -> tuple: return self.is_right, self.inner
	def __repr__(self): return "%s(%r)" % ("R1" if self.is_right else "L1", self.inner)

class ProductRep(Rep):
	__slots__ = ("first", "second")
	def __init__(self, first:Rep, second:Rep):
		assert isinstance(first, Rep) and isinstance(second, Rep), (first, second)
		self.first, self.second = first, second
	def payload(self) -> tuple: return self.first, self.second
	def __iter__(self):
		# So that `a, b = product` reads naturally.
		yield self.first
		yield self.second

class CompositionRep(Rep):
	""" Holds an outer container (e.g. a list) whose elements are representation values. """
	__slots__ = ("inner",)
	def __init__(self, inner): self.inner = inner
	def payload(self) -> tuple: return (self.inner,)

class ParameterRep(Rep):
	__slots__ = ("value",)
	def __init__(self, value): self.value = value
	def payload(self) -> tuple: return (self.value,)

class RecursiveRep(Rep):
	__slots__ = ("value",)
	def __init__(self, value): self.value = value
	def payload(self) -> tuple: return (self.value,)

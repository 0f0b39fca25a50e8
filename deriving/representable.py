"""
The two conversion capabilities, and the thin wrapper every generic function needs.

Representable[T] is for ordinary types. Each instance binds exactly one shape
(its `rep`) and converts faithfully in both directions:

	to(from_(x)) == x   and   from_(to(r)) == r

Representable1[T] is the same idea for a type-constructor with one
distinguished parameter position. Its shape (`rep1`) uses Parameter, Recursive,
and Composition where the parameter occurs. A class may implement one,
the other, both, or neither.

Instances are ordinarily generated rather than written by hand. Either way,
register one for its Python type with the `instance` decorator:

	@instance(Tree)
	class TreeInstance(Representable[Tree], Representable1[Tree]):
		rep = ...
		rep1 = ...

Lookup follows the MRO, so registering the base class of a family of
alternatives covers each of them.
"""
from abc import ABC, abstractmethod
from typing import Generic, TypeVar
from .algebra import Rep, absurd
from .shapes import Shape, ShapeVisitor, Void

T = TypeVar("T")

class NotRepresentable(TypeError):
	pass

class Representable(ABC, Generic[T]):
	rep: Shape

	@abstractmethod
	def from_(self, value:T) -> Rep:
		""" Convert from the datatype to its representation """

	@abstractmethod
	def to(self, rep:Rep) -> T:
		""" Convert from the representation to the datatype """

class Representable1(ABC, Generic[T]):
	rep1: Shape

	@abstractmethod
	def from1(self, value:T) -> Rep:
		""" Convert from the type-constructor's application to its representation """

	@abstractmethod
	def to1(self, rep:Rep) -> T:
		""" Convert from the representation back to the type-constructor's application """

#########################

_instances: dict[type, Representable] = {}
_instances1: dict[type, Representable1] = {}

def instance(typ:type):
	"""
	Class decorator: instantiate the class once and register it for `typ`.
	The binding is fixed here, not chosen by callers.
	"""
	def register(cls):
		it = cls()
		assert isinstance(it, (Representable, Representable1)), cls
		if isinstance(it, Representable):
			assert isinstance(it.rep, Shape), cls
			_instances[typ] = it
		if isinstance(it, Representable1):
			assert isinstance(it.rep1, Shape), cls
			_instances1[typ] = it
		return cls
	return register

def _lookup(registry:dict, typ:type, what:str):
	if not isinstance(typ, type):
		raise NotRepresentable("%r is not a type, so it has no %s instance" % (typ, what))
	for cls in typ.__mro__:
		if cls in registry: return registry[cls]
	raise NotRepresentable("%s has no registered %s instance" % (typ.__name__, what))

def representable(typ:type) -> Representable:
	return _lookup(_instances, typ, "Representable")

def representable1(typ:type) -> Representable1:
	return _lookup(_instances1, typ, "Representable1")

def is_representable(typ:type) -> bool:
	return isinstance(typ, type) and any(cls in _instances for cls in typ.__mro__)

def is_representable1(typ:type) -> bool:
	return isinstance(typ, type) and any(cls in _instances1 for cls in typ.__mro__)

def from_(value) -> Rep:
	return representable(type(value)).from_(value)

def to(typ:type, rep:Rep):
	return representable(typ).to(rep)

def from1(value) -> Rep:
	return representable1(type(value)).from1(value)

def to1(typ:type, rep:Rep):
	return representable1(typ).to1(rep)

#########################

class GenericFunction(ShapeVisitor):
	"""
	Write one `on_*` method per combinator, each taking the shape, the
	representation value, and whatever extra arguments the function needs.
	Then call the function on any value whose type is Representable.

	The wrapper is the only place that touches concrete datatypes.
	"""
	def __call__(self, value, *args):
		return self.apply(representable(type(value)), value, *args)

	def apply(self, it:Representable, value, *args):
		return it.rep.visit(self, it.from_(value), *args)

	def on_void(self, v:Void, rep, *args): absurd(rep)

class GenericTransform(GenericFunction):
	""" For generic functions that produce a new value of the same shape. """
	def apply(self, it:Representable, value, *args):
		return it.to(super().apply(it, value, *args))

class GenericFunction1(ShapeVisitor):
	""" As GenericFunction, but over the type-constructor representation. """
	def __call__(self, value, *args):
		return self.apply(representable1(type(value)), value, *args)

	def apply(self, it:Representable1, value, *args):
		return it.rep1.visit(self, it.from1(value), *args)

	def on_void(self, v:Void, rep, *args): absurd(rep)

class GenericTransform1(GenericFunction1):
	def apply(self, it:Representable1, value, *args):
		return it.to1(super().apply(it, value, *args))

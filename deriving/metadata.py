"""
Meta-information about datatypes, constructors, and record selectors.

A tag is a class, never an instance. It stands for one datatype,
constructor, or selector, and it answers questions about that thing
through class attributes. The `Meta` shape is where tags attach.

	class TreeType(Datatype):
		name = "Tree"
		module = "forestry"

	class Leaf(Constructor):
		name = "Leaf"

	class Node(Constructor):
		name = "Node"
		fixity = Infix(LEFT_ASSOCIATIVE, 6)

The query functions take the tag (or a Meta shape holding one) and never a
representation value. They are constant lookups: same tag, same answer.
"""
from functools import lru_cache, total_ordering
from typing import NamedTuple, Union

# The value types order the way their declarations read:
# by constructor first, then by fields.

@total_ordering
class Associativity:
	def __init__(self, name:str, ordinal:int):
		self._name, self._ordinal = name, ordinal
	def __repr__(self): return self._name
	def __lt__(self, other):
		if not isinstance(other, Associativity): return NotImplemented
		return self._ordinal < other._ordinal

LEFT_ASSOCIATIVE = Associativity("LeftAssociative", 0)
RIGHT_ASSOCIATIVE = Associativity("RightAssociative", 1)
NOT_ASSOCIATIVE = Associativity("NotAssociative", 2)

@total_ordering
class _Prefix:
	def __repr__(self): return "Prefix"
	def __lt__(self, other):
		if isinstance(other, Infix): return True
		if isinstance(other, _Prefix): return False
		return NotImplemented

PREFIX = _Prefix()

class Infix(NamedTuple):
	""" An infix declaration corresponds directly to one of these. """
	associativity: Associativity
	precedence: int

Fixity = Union[_Prefix, Infix]

PREFIX_PRECEDENCE = 10

def precedence_of(fixity:Fixity) -> int:
	"""
	Prefix application binds tighter than any infix operator,
	so a pretty-printer can treat both kinds the same way.
	"""
	if isinstance(fixity, Infix): return fixity.precedence
	assert fixity is PREFIX, fixity
	return PREFIX_PRECEDENCE

@total_ordering
class _NoArity:
	def __repr__(self): return "NoArity"
	def __lt__(self, other):
		if isinstance(other, Arity): return True
		if isinstance(other, _NoArity): return False
		return NotImplemented

NO_ARITY = _NoArity()

class Arity(NamedTuple):
	""" The arity of a tuple constructor. """
	n: int

#########################

class Tag:
	""" Tags are static: use the class itself. """
	def __new__(cls, *args, **kwargs):
		raise TypeError("%s is a metadata tag; use the class, not an instance." % cls.__name__)

class Datatype(Tag):
	name: str
	module: str

class Constructor(Tag):
	name: str
	fixity: Fixity = PREFIX
	is_record: bool = False

class Selector(Tag):
	name: str

class NoSelector(Selector):
	""" Used for constructor fields without a name. """
	name = ""

def is_tag(it) -> bool:
	return isinstance(it, type) and issubclass(it, Tag) and it not in (Tag, Datatype, Constructor, Selector)

def _tag_of(it, kind:type) -> type:
	# Accept a Meta shape as readily as the tag it carries.
	tag = getattr(it, "tag", it)
	assert isinstance(tag, type) and issubclass(tag, kind), (it, kind)
	return tag

def datatype_name(it) -> str:
	""" The name of the datatype """
	return _tag_of(it, Datatype).name

def module_name(it) -> str:
	""" The module (or other name-space) where the datatype was declared """
	return _tag_of(it, Datatype).module

def con_name(it) -> str:
	return _tag_of(it, Constructor).name

def con_fixity(it) -> Fixity:
	return _tag_of(it, Constructor).fixity

def con_is_record(it) -> bool:
	return _tag_of(it, Constructor).is_record

def sel_name(it) -> str:
	""" The empty string means a positional field. """
	return _tag_of(it, Selector).name

#########################
# Sometimes a class statement per tag is more ceremony than the situation needs.
# The factories remember what they made, so the same arguments give the same tag
# and the shapes built around it stay equal.

def datatype(name:str, module:str) -> type:
	return _datatype(name, module)

@lru_cache(None)
def _datatype(name, module):
	return type(name, (Datatype,), {"name": name, "module": module})

def constructor(name:str, fixity:Fixity=PREFIX, is_record:bool=False) -> type:
	assert fixity is PREFIX or isinstance(fixity, Infix), fixity
	return _constructor(name, fixity, bool(is_record))

@lru_cache(None)
def _constructor(name, fixity, is_record):
	return type(_identifier(name), (Constructor,), {"name": name, "fixity": fixity, "is_record": is_record})

@lru_cache(None)
def selector(name:str) -> type:
	if not name: return NoSelector
	return type(name, (Selector,), {"name": name})

def _identifier(name:str) -> str:
	# Operator constructors like ":" still deserve a sensible class name.
	return name if name.isidentifier() else "Constructor_" + "_".join("%x" % ord(c) for c in name)

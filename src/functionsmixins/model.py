#!/usr/bin/env python
# encoding=utf8 ---------------------------------------------------------------
# Project           : Functions & Mixins
# -----------------------------------------------------------------------------
# Author            : FFunction
# License           : BSD License
# -----------------------------------------------------------------------------
# Creation date     : 02-Sep-2026
# Last modification : 18-Oct-2026
# -----------------------------------------------------------------------------

import types
from typing import List, Optional, Dict, Tuple, Mapping

__doc__ = """
Defines the model shared by the extraction and resolution passes: parameters,
function and mixin definitions, the registries holding them and the
expansion context that owns the registries.
"""

# A span is a half-open `(start, end)` offset range into a source text.
Span = Tuple[int, int]

MAX_RECURSION_DEPTH = 10

# -----------------------------------------------------------------------------
#
# ERRORS
#
# -----------------------------------------------------------------------------

class ExpansionError(Exception):
	pass

class ParseError(ExpansionError):
	"""Raised when the scanner cannot find the bracket closing the one
	opened right before `offset`."""

	def __init__( self, message:str, offset:Optional[int]=None ):
		super().__init__(message if offset is None else "{0} at position {1}".format(message, offset))
		self.offset = offset

class MissingResultClause(ParseError):

	def __init__( self, name:str ):
		super().__init__("Missing \"result:\" in function body of `{0}`".format(name))
		self.name = name

class ExpansionCycleError(ExpansionError):
	"""Raised in strict mode when the expansion did not reach a fixed point
	within the iteration ceiling."""

	def __init__( self, kind:str, names:List[str], depth:int ):
		super().__init__("{0} expansion did not settle after {1} iterations, residual: {2}".format(
			kind, depth, ", ".join(names) or "?"))
		self.kind  = kind
		self.names = names
		self.depth = depth

# -----------------------------------------------------------------------------
#
# DEFINITIONS
#
# -----------------------------------------------------------------------------

class Parameter:

	def __init__( self, name:str, defaultValue:Optional[str]=None ):
		self.name         = name
		self.defaultValue = defaultValue

	def __eq__( self, other ):
		return isinstance(other, Parameter) and other.name == self.name and other.defaultValue == self.defaultValue

	def __repr__( self ):
		if self.defaultValue is None:
			return "<Parameter:{0}>".format(self.name)
		else:
			return "<Parameter:{0}={1}>".format(self.name, self.defaultValue)

class Definition:
	"""The common part of function and mixin definitions: a sigil-prefixed
	name, an ordered list of parameters and the raw body text."""

	def __init__( self, name:str, params:List[Parameter], body:str ):
		self.name   = name
		self.params = params
		self.body   = body

	def bind( self, args:List[str] ) -> Dict[str,Optional[str]]:
		"""Maps each parameter name to the positional argument at the same
		index, or to the parameter's default value. Parameters with neither
		are mapped to `None`."""
		return dict(
			(p.name, args[i] if i < len(args) else p.defaultValue)
			for i, p in enumerate(self.params)
		)

	def __eq__( self, other ):
		return type(other) is type(self) and other.name == self.name and other.params == self.params and other.body == self.body

	def __repr__( self ):
		return "<{0}:{1}({2})>".format(self.__class__.__name__, self.name, ", ".join(_.name for _ in self.params))

class FunctionDefinition(Definition):
	pass

class MixinDefinition(Definition):

	def __init__( self, name:str, params:List[Parameter], body:str, hasContents:bool=False ):
		super().__init__(name, params, body)
		self.hasContents = hasContents

	def __eq__( self, other ):
		return super().__eq__(other) and other.hasContents == self.hasContents

# -----------------------------------------------------------------------------
#
# REGISTRY
#
# -----------------------------------------------------------------------------

class Registry:
	"""A name-keyed collection of definitions. Registering a name that is
	already present overwrites the previous definition."""

	def __init__( self ):
		self._definitions:Dict[str,Definition] = {}

	def register( self, definition:Definition ) -> Definition:
		self._definitions[definition.name] = definition
		return definition

	def get( self, name:str ) -> Optional[Definition]:
		return self._definitions.get(name)

	def snapshot( self ) -> Mapping[str,Definition]:
		"""Returns a read-only copy of the registry as it is now."""
		return types.MappingProxyType(dict(self._definitions))

	def __contains__( self, name ):
		return name in self._definitions

	def __len__( self ):
		return len(self._definitions)

	def __iter__( self ):
		return iter(self._definitions.values())

	def __repr__( self ):
		return "<Registry:{0}>".format(", ".join(self._definitions.keys()))

# -----------------------------------------------------------------------------
#
# CONTEXT
#
# -----------------------------------------------------------------------------

class ExpansionContext:
	"""Owns the function and mixin registries for the duration of a run.
	Registries are populated by the extraction pass and read through
	the `Resolver` returned by `resolver()`."""

	def __init__( self, maxDepth:int=MAX_RECURSION_DEPTH, strict:bool=False ):
		self.functions = Registry()
		self.mixins    = Registry()
		self.maxDepth  = maxDepth
		self.strict    = strict

	def resolver( self ):
		# NOTE: Imported here as the resolver module depends on this one
		from .resolver import Resolver
		return Resolver(self.functions.snapshot(), self.mixins.snapshot(), maxDepth=self.maxDepth, strict=self.strict)

	def __repr__( self ):
		return "<ExpansionContext:{0} functions, {1} mixins>".format(len(self.functions), len(self.mixins))

# EOF - vim: ts=4 sw=4 noet

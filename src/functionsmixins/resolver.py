#!/usr/bin/env python
# encoding=utf8 ---------------------------------------------------------------
# Project           : Functions & Mixins
# -----------------------------------------------------------------------------
# Author            : FFunction
# License           : BSD License
# -----------------------------------------------------------------------------
# Creation date     : 03-Sep-2026
# Last modification : 18-Oct-2026
# -----------------------------------------------------------------------------

from typing import List, Mapping, Callable
from .grammar import RE_CALL, RE_APPLY, findMatchingBrace, splitByComma, \
                     extractResult, matchApplySite, replaceContents, substituteReferences
from .model   import Definition, ExpansionCycleError, MAX_RECURSION_DEPTH

try:
	import reporter
	logging = reporter.bind("functionsmixins.resolver")
except ImportError:
	import logging

__doc__ = """
Resolves function calls and mixin applications against a snapshot of the
registries. Both resolutions are re-run on their own output until the text
does not change anymore, or until `maxDepth` iterations have been done.
The ceiling is what stops cyclic definitions: the residual call syntax is
then left in the output.
"""

UNKNOWN_MIXIN = "/* Unknown mixin: {0} */"

class Resolver:

	def __init__( self, functions:Mapping[str,Definition], mixins:Mapping[str,Definition], maxDepth:int=MAX_RECURSION_DEPTH, strict:bool=False ):
		self.functions = functions
		self.mixins    = mixins
		self.maxDepth  = maxDepth
		self.strict    = strict

	def expand( self, text:str ) -> str:
		"""Expands a text that contains no declaration. Mixins go first, as
		their bodies may call functions."""
		return self.resolveFunctionCalls(self.resolveMixinApplications(text))

	# =========================================================================
	# FUNCTIONS
	# =========================================================================

	def resolveFunctionCalls( self, text:str ) -> str:
		return self._settle("function", self.resolveCallsOnce, text, self.residualCalls)

	def resolveCallsOnce( self, text:str ) -> str:
		"""Replaces each call to a registered function by the function's
		result expression, where the `var()` references to parameters are
		substituted. Calls to unknown functions are kept, as they may well be
		native CSS functions, but their arguments are still scanned."""
		result = []
		offset = 0
		while True:
			m = RE_CALL.search(text, offset)
			if not m:
				break
			result.append(text[offset:m.start()])
			definition = self.functions.get(m.group(1))
			if not definition:
				result.append(m.group(0))
				offset = m.end()
				continue
			args_end = findMatchingBrace(text, m.end())
			args     = splitByComma(text[m.end():args_end])
			value    = extractResult(definition.body, definition.name)
			result.append(substituteReferences(value, definition.bind(args), "var", parametersOnly=True))
			offset = args_end + 1
		result.append(text[offset:])
		return "".join(result)

	def residualCalls( self, text:str ) -> List[str]:
		return sorted(set(_.group(1) for _ in RE_CALL.finditer(text) if _.group(1) in self.functions))

	# =========================================================================
	# MIXINS
	# =========================================================================

	def resolveMixinApplications( self, text:str ) -> str:
		return self._settle("mixin", self.resolveMixinsOnce, text, self.residualApplications)

	def resolveMixinsOnce( self, text:str ) -> str:
		"""Replaces each apply site by the mixin body, where `env()`
		references are substituted and `@contents` placeholders are filled.
		Apply sites of unknown mixins are replaced by a comment."""
		result = []
		offset = 0
		while True:
			site, next_offset = matchApplySite(text, offset)
			if next_offset < 0:
				break
			elif site is None:
				result.append(text[offset:next_offset])
				offset = next_offset
				continue
			result.append(text[offset:site.start])
			definition = self.mixins.get(site.name)
			if not definition:
				logging.warning("Unknown mixin: {0}".format(site.name))
				result.append(UNKNOWN_MIXIN.format(site.name))
			else:
				body = substituteReferences(definition.body, definition.bind(site.args), "env", parametersOnly=False)
				# NOTE: A block given to a mixin that does not declare
				# `@contents` still fills its placeholders, if any.
				if definition.hasContents or site.contents is not None:
					body = replaceContents(body, site.contents)
				result.append(body)
			offset = site.end
		result.append(text[offset:])
		return "".join(result)

	def residualApplications( self, text:str ) -> List[str]:
		return sorted(set(_.group(1) for _ in RE_APPLY.finditer(text) if _.group(1) in self.mixins))

	# =========================================================================
	# FIXED POINT
	# =========================================================================

	def _settle( self, kind:str, step:Callable[[str],str], text:str, residual:Callable[[str],List[str]] ) -> str:
		for _ in range(self.maxDepth):
			updated = step(text)
			if updated == text:
				return text
			text = updated
		names = residual(text)
		if names:
			if self.strict:
				raise ExpansionCycleError(kind, names, self.maxDepth)
			logging.warning("{0} expansion stopped after {1} iterations, leaving: {2}".format(
				kind.capitalize(), self.maxDepth, ", ".join(names)))
		return text

	def __repr__( self ):
		return "<Resolver:{0} functions, {1} mixins>".format(len(self.functions), len(self.mixins))

# EOF - vim: ts=4 sw=4 noet

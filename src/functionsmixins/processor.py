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

from typing import List
from .grammar import iterFunctions, iterMixins, parseParameters
from .model   import FunctionDefinition, MixinDefinition, Registry, ExpansionContext, Span

try:
	import reporter
	logging = reporter.bind("functionsmixins.processor")
except ImportError:
	import logging

__doc__ = """
Extracts the `@function` and `@mixin` declarations of a source text into
the registries, and returns the spans they occupy so that the expansion
can leave them untouched.
"""

# -----------------------------------------------------------------------------
#
# EXTRACTION
#
# -----------------------------------------------------------------------------

def extractFunctions( text:str, registry:Registry ) -> List[Span]:
	"""Registers the functions declared in the text, returning the span of
	each declaration. A later declaration with the same name wins."""
	spans = []
	for d in iterFunctions(text):
		params, _ = parseParameters(d.params)
		registry.register(FunctionDefinition(d.name, params, d.body(text)))
		spans.append(d.span)
	return spans

def extractMixins( text:str, registry:Registry ) -> List[Span]:
	"""Registers the mixins declared in the text, returning the span of
	each declaration."""
	spans = []
	for d in iterMixins(text):
		params, has_contents = parseParameters(d.params)
		registry.register(MixinDefinition(d.name, params, d.body(text), has_contents))
		spans.append(d.span)
	return spans

def extractDefinitions( text:str, context:ExpansionContext ) -> List[Span]:
	"""Runs both extraction passes, populating the context's registries.
	The returned spans are not merged."""
	functions = extractFunctions(text, context.functions)
	mixins    = extractMixins(text, context.mixins)
	if functions or mixins:
		logging.debug("Extracted {0} function(s) and {1} mixin(s)".format(len(functions), len(mixins)))
	return functions + mixins

def findDeclarationSpans( text:str ) -> List[Span]:
	"""Returns the spans of all declarations in the text without registering
	anything."""
	return [_.span for _ in iterFunctions(text)] + [_.span for _ in iterMixins(text)]

# -----------------------------------------------------------------------------
#
# SPANS
#
# -----------------------------------------------------------------------------

def mergeSpans( spans:List[Span] ) -> List[Span]:
	"""Sorts the spans and coalesces the ones that overlap or touch, so that
	the result is a sorted list of disjoint spans."""
	merged:List[Span] = []
	for start, end in sorted(spans):
		if merged and start <= merged[-1][1]:
			merged[-1] = (merged[-1][0], max(merged[-1][1], end))
		else:
			merged.append((start, end))
	return merged

# EOF - vim: ts=4 sw=4 noet

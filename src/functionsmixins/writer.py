#!/usr/bin/env python
# encoding=utf8 ---------------------------------------------------------------
# Project           : Functions & Mixins
# -----------------------------------------------------------------------------
# Author            : FFunction
# License           : BSD License
# -----------------------------------------------------------------------------
# Creation date     : 04-Sep-2026
# Last modification : 18-Oct-2026
# -----------------------------------------------------------------------------

import re, sys, io
from typing import List, Optional, Iterator, Union
from .model     import ExpansionContext, Span
from .processor import extractDefinitions, findDeclarationSpans, mergeSpans
from .resolver  import Resolver

__doc__ = """
Writes the expanded version of a source text. The text is cut into the
declaration spans, which are copied as-is (or blanked when stripping), and
the gaps between them, which are expanded.
"""

RE_NOT_NEWLINE = re.compile("[^\n]")

def blank( text:str ) -> str:
	"""Returns only the newlines of the given text."""
	return RE_NOT_NEWLINE.sub("", text)

# -----------------------------------------------------------------------------
#
# CSS WRITER
#
# -----------------------------------------------------------------------------

class CSSWriter( object ):

	def __init__( self, resolver:Optional[Resolver]=None, output=sys.stdout, strip:bool=False ):
		self.resolver = resolver
		self.output   = output
		self.strip    = strip

	def write( self, text:str, spans:List[Span] ):
		for _ in self.on(text, spans):
			self._write(_)
		self.output.flush()
		return self

	def render( self, text:str, spans:List[Span] ) -> str:
		return "".join(self.on(text, spans))

	def _write( self, value ):
		if isinstance(self.output, io.TextIOBase):
			self.output.write(value)
		else:
			self.output.write(value.encode("utf-8"))

	def on( self, text:str, spans:List[Span] ) -> Iterator[str]:
		"""Yields the chunks of output for the text, where `spans` are the
		declaration spans, merged or not."""
		offset = 0
		for start, end in mergeSpans(spans):
			yield self.onCode(text[offset:start])
			yield self.onDeclaration(text[start:end])
			offset = end
		yield self.onCode(text[offset:])

	def onCode( self, code:str ) -> str:
		return self.resolver.expand(code) if self.resolver and code else code

	def onDeclaration( self, declaration:str ) -> str:
		# NOTE: Newlines are kept so that line numbers don't change
		return blank(declaration) if self.strip else declaration

# -----------------------------------------------------------------------------
#
# API
#
# -----------------------------------------------------------------------------

def stripSpans( text:str, spans:List[Span] ) -> str:
	"""Blanks the given spans of the text, keeping their newlines."""
	return CSSWriter(strip=True).render(text, spans)

def expand( text:str, resolver:Union[Resolver,ExpansionContext], spans:Optional[List[Span]]=None ) -> str:
	"""Expands the text outside of its declarations, which are kept as they
	are. The registries are only read."""
	if isinstance(resolver, ExpansionContext):
		resolver = resolver.resolver()
	spans = findDeclarationSpans(text) if spans is None else spans
	return CSSWriter(resolver).render(text, spans)

def process( text:str, context:ExpansionContext, strip:bool=True ) -> str:
	"""Registers the definitions of the text and then expands it, blanking
	the declarations when `strip` is set."""
	spans = extractDefinitions(text, context)
	return CSSWriter(context.resolver(), strip=strip).render(text, spans)

# EOF - vim: ts=4 sw=4 noet

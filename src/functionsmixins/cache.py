#!/usr/bin/env python
# encoding=utf8 ---------------------------------------------------------------
# Project           : Functions & Mixins
# -----------------------------------------------------------------------------
# Author            : FFunction
# License           : BSD License
# -----------------------------------------------------------------------------
# Creation date     : 05-Sep-2026
# Last modification : 18-Oct-2026
# -----------------------------------------------------------------------------

import os, time
from typing      import List, Optional, Dict, TypeVar, Generic, Callable, Iterator
from .model      import ExpansionContext, Span
from .processor  import extractDefinitions
from .writer     import CSSWriter

try:
	import reporter
	logging = reporter.bind("functionsmixins.cache")
except ImportError:
	import logging

__doc__ = """
Discovers the style sources of a project and keeps track of the
definitions they declare. Extraction is memoized on the modification time
of each file, so that scanning again only extracts the files that changed.
"""

T = TypeVar('T')

SOURCE_EXTENSIONS = ("css", "scss", "sass", "less", "styl", "stylus")
IGNORED_DIRS      = (".git", "dist")
NODE_MODULES      = "node_modules"

# -----------------------------------------------------------------------------
#
# DISCOVERY
#
# -----------------------------------------------------------------------------

def isStyleSource( path:str ) -> bool:
	return os.path.splitext(path)[1][1:] in SOURCE_EXTENSIONS

def findStyleFiles( root:str, skipNodeModules:bool=True ) -> Iterator[str]:
	"""Yields the style sources found in the `root` directory and its
	subdirectories, in sorted order. Symbolic links to directories are not
	followed."""
	for entry in sorted(os.scandir(root), key=lambda _:_.name):
		if entry.name in IGNORED_DIRS: continue
		if skipNodeModules and entry.name == NODE_MODULES: continue
		if entry.is_dir(follow_symlinks=False):
			yield from findStyleFiles(entry.path, skipNodeModules)
		elif entry.is_file() and isStyleSource(entry.name):
			yield entry.path

def listSources( root:str ) -> Optional[List[str]]:
	"""Returns the style sources designated by `root`, which is either a
	file or a directory, or `None` when `root` does not exist."""
	if os.path.isdir(root):
		return list(findStyleFiles(root))
	elif os.path.isfile(root):
		return [root]
	else:
		return None

# -----------------------------------------------------------------------------
#
# MEMOIZED
#
# -----------------------------------------------------------------------------

class Memoized(Generic[T]):
	"""A value produced by `updater`, produced again whenever the `changed`
	timestamp is past the moment it was last produced."""

	def __init__( self, updater:Callable[[],T], changed:Callable[[],float] ):
		self.updated = 0.0
		self._value:Optional[T] = None
		self._updater = updater
		self._changed = changed

	@property
	def hasExpired( self ) -> bool:
		return self.updated < self._changed()

	@property
	def value( self ) -> T:
		if self.hasExpired:
			self._value  = self._updater()
			self.updated = time.time()
		return self._value

	def __repr__( self ):
		return "<Memoized:{0}>".format(self._value)

# -----------------------------------------------------------------------------
#
# SOURCE
#
# -----------------------------------------------------------------------------

class Source:
	"""A style source file, whose text and declaration spans are memoized."""

	def __init__( self, graph:'Graph', path:str ):
		self.graph  = graph
		self.path   = os.path.abspath(path)
		self._text:Memoized[str]         = Memoized(self.read,    lambda:self.modified)
		self._spans:Memoized[List[Span]] = Memoized(self.extract, lambda:self.modified)

	@property
	def modified( self ) -> float:
		return os.stat(self.path).st_mtime

	@property
	def text( self ) -> str:
		return self._text.value

	@property
	def spans( self ) -> List[Span]:
		"""The declaration spans of the source. Accessing them registers
		the source's definitions, if not already done."""
		return self._spans.value

	def read( self ) -> str:
		with open(self.path, encoding="utf-8") as f:
			return f.read()

	def extract( self ) -> List[Span]:
		return extractDefinitions(self.text, self.graph.context)

	def __repr__( self ):
		return "<Source:{0}>".format(self.path)

# -----------------------------------------------------------------------------
#
# GRAPH
#
# -----------------------------------------------------------------------------

class Graph:
	"""The set of sources of a build. All the sources must be scanned
	before any of them is processed, as definitions can be used across
	files."""

	def __init__( self, context:Optional[ExpansionContext]=None ):
		self.context = context or ExpansionContext()
		self.sources:Dict[str,Source] = {}

	def get( self, path:str ) -> Source:
		path = os.path.abspath(path)
		if path not in self.sources:
			self.sources[path] = Source(self, path)
		return self.sources[path]

	def scan( self, *roots:str ) -> List[Source]:
		"""Registers the definitions of all the style sources found in the
		given files and directories. Missing roots are skipped."""
		sources = []
		for root in roots:
			paths = listSources(root)
			if paths is None:
				logging.warning("Cannot find path: {0}".format(root))
				continue
			for path in paths:
				source = self.get(path)
				# NOTE: Accessing the spans triggers the extraction
				source.spans
				sources.append(source)
		return sources

	def scanProject( self, root:str, deps:Optional[List[str]]=None ) -> List[Source]:
		"""Scans the given dependency packages in `node_modules` and then
		the project root."""
		roots = [os.path.join(root, NODE_MODULES, _) for _ in deps or ()] + [root]
		return self.scan(*roots)

	def process( self, path:str, strip:bool=True ) -> str:
		"""Returns the expanded text of the source at the given path."""
		source = self.get(path)
		spans  = source.spans
		return CSSWriter(self.context.resolver(), strip=strip).render(source.text, spans)

	def __repr__( self ):
		return "<Graph:{0} sources>".format(len(self.sources))

# EOF - vim: ts=4 sw=4 noet

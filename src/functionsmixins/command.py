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

import os, sys, argparse
from typing      import List, Optional
from .model      import ExpansionContext, ExpansionError, MAX_RECURSION_DEPTH
from .writer     import process
from .cache      import Graph, NODE_MODULES, SOURCE_EXTENSIONS, listSources

try:
	import reporter
	logging = reporter.bind("functionsmixins")
except ImportError:
	import logging

COMPONENT_EXTENSIONS = ("svelte", "vue")
STYLE_TAG            = "<style"

# -----------------------------------------------------------------------------
#
# HOST INTEGRATION
#
# -----------------------------------------------------------------------------

def processString( text:str, context:Optional[ExpansionContext]=None, strip:bool=True ) -> str:
	return process(text, context or ExpansionContext(), strip)

def processPath( path:str, context:Optional[ExpansionContext]=None, strip:bool=True ) -> str:
	with open(path, encoding="utf-8") as f:
		return processString(f.read(), context, strip)

def getLanguage( id:str ) -> str:
	"""Returns the language of a module id, taken from its `?lang.<ext>`
	query if any, or from its extension otherwise."""
	path, _, query = id.partition("?")
	if "lang." in query:
		return query.split("lang.", 1)[1]
	return path.rsplit(".", 1)[-1]

def transform( code:str, id:str, context:ExpansionContext, strip:bool=True ) -> Optional[str]:
	"""Transforms a module of the host build tool. Style sources are
	processed whole, components from their first `<style` tag onwards. Any
	other module returns `None`."""
	language = getLanguage(id)
	if language in SOURCE_EXTENSIONS:
		return process(code, context, strip)
	elif language in COMPONENT_EXTENSIONS:
		i = code.find(STYLE_TAG)
		if i == -1:
			return None
		return code[:i] + process(code[i:], context, strip)
	else:
		return None

def preprocessStyle( content:str, filename:str, context:ExpansionContext, deps:List[str], strip:bool=True ) -> Optional[str]:
	"""Processes the style of a component only when it comes from one
	of the given dependency packages."""
	if not any("{0}/{1}/".format(NODE_MODULES, _) in filename.replace(os.sep, "/") for _ in deps):
		return None
	return process(content, context, strip)

# -----------------------------------------------------------------------------
#
# COMMAND-LINE
#
# -----------------------------------------------------------------------------

def run( args ):
	"""Processes the command line arguments."""
	USAGE = "functionsmixins FILE..."
	if type(args) not in (type([]), type(())): args = [args]
	oparser = argparse.ArgumentParser(
		prog        = "functionsmixins",
		description = "Expands @function and @mixin definitions in style sources"
	)
	oparser.add_argument("files", metavar="FILE", type=str, nargs='*', help="The style files or directories to expand")
	oparser.add_argument("-I", "--include",  dest="include", action="append", default=[], help="Directory scanned for definitions only")
	oparser.add_argument("-d", "--dep",      dest="deps",    action="append", default=[], help="Package in node_modules scanned for definitions")
	oparser.add_argument("-o", "--output",   type=str,  dest="output", default=None)
	oparser.add_argument("-v", "--verbose",  dest="verbose",  action="store_true", default=False)
	oparser.add_argument("--keep-definitions", dest="keep", action="store_true", default=False, help="Does not blank the declarations in the output")
	oparser.add_argument("--max-depth", dest="maxDepth", type=int, default=MAX_RECURSION_DEPTH, help="Maximum number of expansion passes")
	oparser.add_argument("--strict",    dest="strict",  action="store_true", default=False, help="Fails when an expansion does not settle")
	args = oparser.parse_args(args=args)
	# NOTE: Only the logging module needs to be configured
	if hasattr(logging, "basicConfig"):
		logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
	if not args.files:
		sys.stderr.write(USAGE + "\n")
		return 1
	graph   = Graph(ExpansionContext(maxDepth=args.maxDepth, strict=args.strict))
	status  = 0
	failed  = set()
	inputs  = []
	# All the definitions need to be registered before anything is expanded
	roots   = [os.path.join(NODE_MODULES, _) for _ in args.deps] + args.include + args.files
	for root in roots:
		paths = listSources(root)
		if paths is None and root in args.files:
			logging.error("Could not find path: {0}".format(root))
			status = 1
			continue
		elif paths is None:
			logging.warning("Could not find path: {0}".format(root))
			continue
		if root in args.files:
			inputs += paths
		for path in paths:
			try:
				graph.scan(path)
			except ExpansionError as e:
				logging.error("Could not extract definitions from `{0}`: {1}".format(path, e))
				failed.add(path)
				status = 1
	output = open(args.output, "w", encoding="utf-8") if args.output else sys.stdout
	try:
		for path in inputs:
			if path in failed: continue
			try:
				output.write(graph.process(path, strip=not args.keep))
			except ExpansionError as e:
				logging.error("Could not expand `{0}`: {1}".format(path, e))
				status = 1
	finally:
		if args.output:
			output.close()
	return status

if __name__ == "__main__":
	sys.exit(run(sys.argv[1:]))

# EOF - vim: ts=4 sw=4 noet

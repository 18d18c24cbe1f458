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

import re
from typing import List, Optional, Dict, Tuple, Iterator
from .model import Parameter, ParseError, MissingResultClause, Span

__doc__ = """
The scanner for the functions & mixins dialect. There is no tokenizer: the
scanner works on the raw text, recognizing declaration headers and call
sites with regular expressions and delimiting bodies and argument lists by
counting bracket depth.

Depth is counted uniformly across the three bracket families `(){}[]`: any
closing bracket closes any opening one. Mismatched families are not
detected, only balanced counts matter. Strings and comments are not
special-cased either.
"""

# -----------------------------------------------------------------------------
#
# TOKENS
#
# -----------------------------------------------------------------------------

SIGIL            = "--"
CONTENTS_MARKER  = "@contents"
OPEN_BRACKETS    = "({["
CLOSE_BRACKETS   = ")}]"

NAME             = SIGIL + r"[\w-]+"
RE_NAME          = re.compile("^(" + NAME + ")")
RE_FUNCTION      = re.compile(r"@function\s+(" + NAME + r")\s*\(")
RE_MIXIN         = re.compile(r"@mixin\s+(" + NAME + r")\s*")
# The return type annotation is accepted and ignored
RE_FUNCTION_BODY = re.compile(r"\s*(?:returns\b[^{;]*)?\{")
RE_MIXIN_BODY    = re.compile(r"\s*\{")
RE_APPLY         = re.compile(r"@apply\s+(" + NAME + ")")
RE_CALL          = re.compile(r"(?<![\w-])(" + NAME + r")\(")
RE_CONTENTS      = re.compile(CONTENTS_MARKER + r"(?![\w-])\s*")
RE_SPACES        = re.compile(r"\s*")
RE_TRAILER       = re.compile(r"\s*;?")
RE_RESULT        = re.compile(r"(?<![\w-])result\s*:\s*([^;]+)(?:;|$)")
RE_REFERENCE     = re.compile(r"\s*(" + NAME + r")\s*(?:,(.*))?$", re.DOTALL)

# -----------------------------------------------------------------------------
#
# BRACKETS
#
# -----------------------------------------------------------------------------

def findMatchingBrace( text:str, start:int, strict:bool=True ) -> int:
	"""Returns the offset of the bracket closing the one that was opened
	right before `start`. Raises a `ParseError` when the end of the text is
	reached first, unless `strict` is false, in which case `-1` is returned."""
	depth = 1
	for i in range(start, len(text)):
		c = text[i]
		if c in OPEN_BRACKETS:
			depth += 1
		elif c in CLOSE_BRACKETS:
			depth -= 1
			if depth == 0:
				return i
	if strict:
		raise ParseError("Unmatched brace", start)
	else:
		return -1

def splitByComma( text:str ) -> List[str]:
	"""Splits the text on the commas that are not nested in brackets,
	trimming each part. A trailing empty part is dropped."""
	parts:List[str] = []
	current         = []
	depth           = 0
	for c in text:
		if c in OPEN_BRACKETS:
			depth += 1
		elif c in CLOSE_BRACKETS:
			depth -= 1
		if c == "," and depth == 0:
			parts.append("".join(current).strip())
			current = []
		else:
			current.append(c)
	last = "".join(current).strip()
	if last:
		parts.append(last)
	return parts

# -----------------------------------------------------------------------------
#
# PARAMETERS
#
# -----------------------------------------------------------------------------

def parseParameters( text:str ) -> Tuple[List[Parameter],bool]:
	"""Parses a raw parameter list like `--a, --b <color>: red, @contents`
	and returns `(parameters, hasContents)`. Type annotations following
	the parameter name are dropped."""
	params:List[Parameter] = []
	hasContents            = False
	for part in splitByComma(text):
		if part == CONTENTS_MARKER:
			hasContents = True
			continue
		if ":" in part:
			name, value = part.split(":", 1)
			name, value = name.strip(), value.strip()
		else:
			name, value = part, None
		m = RE_NAME.match(name)
		name = m.group(1) if m else name
		if name:
			params.append(Parameter(name, value))
	return params, hasContents

def extractResult( body:str, name:str="?" ) -> str:
	"""Returns the expression of the `result:` clause of a function body."""
	m = RE_RESULT.search(body)
	if not m:
		raise MissingResultClause(name)
	return m.group(1).strip()

# -----------------------------------------------------------------------------
#
# DECLARATIONS
#
# -----------------------------------------------------------------------------

class Declaration:
	"""A `@function` or `@mixin` declaration as found in the source text.
	`bodyStart` is the offset right after the opening `{` and `bodyEnd` the
	offset of the matching `}`."""

	def __init__( self, kind:str, name:str, params:str, start:int, bodyStart:int, bodyEnd:int ):
		self.kind      = kind
		self.name      = name
		self.params    = params
		self.start     = start
		self.bodyStart = bodyStart
		self.bodyEnd   = bodyEnd

	@property
	def span( self ) -> Span:
		return (self.start, self.bodyEnd + 1)

	def body( self, text:str ) -> str:
		return text[self.bodyStart:self.bodyEnd]

	def __repr__( self ):
		return "<Declaration:{0} {1} {2}>".format(self.kind, self.name, self.span)

def iterFunctions( text:str ) -> Iterator[Declaration]:
	"""Yields the `@function <name>(<params>) [returns <type>] {...}`
	declarations of the text."""
	offset = 0
	while True:
		m = RE_FUNCTION.search(text, offset)
		if not m:
			break
		params_end = findMatchingBrace(text, m.end())
		b = RE_FUNCTION_BODY.match(text, params_end + 1)
		if not b:
			offset = m.end()
			continue
		body_end = findMatchingBrace(text, b.end())
		yield Declaration("function", m.group(1), text[m.end():params_end], m.start(), b.end(), body_end)
		# NOTE: Scanning resumes inside the body, so that nested
		# declarations are registered as well.
		offset = b.end()

def iterMixins( text:str ) -> Iterator[Declaration]:
	"""Yields the `@mixin <name>[(<params>)] {...}` declarations of the
	text."""
	offset = 0
	while True:
		m = RE_MIXIN.search(text, offset)
		if not m:
			break
		i      = m.end()
		params = ""
		if i < len(text) and text[i] == "(":
			params_end = findMatchingBrace(text, i + 1)
			params     = text[i + 1:params_end]
			i          = params_end + 1
		b = RE_MIXIN_BODY.match(text, i)
		if not b:
			offset = m.end()
			continue
		body_end = findMatchingBrace(text, b.end())
		yield Declaration("mixin", m.group(1), params, m.start(), b.end(), body_end)
		offset = b.end()

# -----------------------------------------------------------------------------
#
# APPLY SITES
#
# -----------------------------------------------------------------------------

class ApplySite:
	"""An `@apply <name>[(<args>)] {<contents>}` or `@apply <name>[(<args>)];`
	occurrence spanning `[start, end)`. `contents` is `None` when no block
	was given."""

	def __init__( self, name:str, args:List[str], contents:Optional[str], start:int, end:int ):
		self.name     = name
		self.args     = args
		self.contents = contents
		self.start    = start
		self.end      = end

	def __repr__( self ):
		return "<ApplySite:{0} {1}:{2}>".format(self.name, self.start, self.end)

def matchApplySite( text:str, offset:int ) -> Tuple[Optional[ApplySite],int]:
	"""Looks for the next apply site from `offset`. Returns `(site, next)`
	where `next` is the offset to resume scanning from. Returns `(None, -1)`
	when there are no more `@apply` in the text. An `@apply` that is neither
	followed by a block nor a semicolon is not a site, and `site` is `None`."""
	m = RE_APPLY.search(text, offset)
	if not m:
		return None, -1
	i    = RE_SPACES.match(text, m.end()).end()
	args = []
	if i < len(text) and text[i] == "(":
		args_end = findMatchingBrace(text, i + 1)
		args     = splitByComma(text[i + 1:args_end])
		i        = RE_SPACES.match(text, args_end + 1).end()
	if i < len(text) and text[i] == "{":
		contents_end = findMatchingBrace(text, i + 1)
		contents     = text[i + 1:contents_end]
		end          = RE_TRAILER.match(text, contents_end + 1).end()
		return ApplySite(m.group(1), args, contents, m.start(), end), end
	elif i < len(text) and text[i] == ";":
		return ApplySite(m.group(1), args, None, m.start(), i + 1), i + 1
	else:
		return None, m.end()

def replaceContents( body:str, contents:Optional[str] ) -> str:
	"""Replaces the `@contents` and `@contents {<default>}` placeholders of
	the mixin body. When `contents` is given, every placeholder is replaced
	by the trimmed contents, otherwise a placeholder is replaced by its
	default block's interior, or removed."""
	result = []
	offset = 0
	while True:
		m = RE_CONTENTS.search(body, offset)
		if not m:
			break
		result.append(body[offset:m.start()])
		i        = m.end()
		fallback = ""
		if i < len(body) and body[i] == "{":
			default_end = findMatchingBrace(body, i + 1)
			fallback    = body[i + 1:default_end]
			i           = default_end + 1
		end = RE_TRAILER.match(body, i).end()
		result.append(contents.strip() if contents is not None else fallback)
		offset = end
	result.append(body[offset:])
	return "".join(result)

# -----------------------------------------------------------------------------
#
# REFERENCES
#
# -----------------------------------------------------------------------------

def substituteReferences( template:str, bindings:Dict[str,Optional[str]], function:str="var", parametersOnly:bool=True ) -> str:
	"""Replaces the `<function>(<name>[, <fallback>])` references in the
	template with the value bound to `<name>`, then with the fallback.
	References that resolve to neither are left as they are.

	When `parametersOnly` is true, references to names that are not in
	`bindings` are left untouched even if they carry a fallback, which is
	what `var()` needs as it also references regular custom properties."""
	opener = re.compile(r"(?<![\w-])" + re.escape(function) + r"\(")
	result = []
	offset = 0
	while True:
		m = opener.search(template, offset)
		if not m:
			break
		end = findMatchingBrace(template, m.end(), strict=False)
		ref = RE_REFERENCE.match(template, m.end(), end) if end >= 0 else None
		if not ref:
			result.append(template[offset:m.end()])
			offset = m.end()
			continue
		name, fallback = ref.group(1), ref.group(2)
		value = bindings.get(name)
		if value is None and fallback is not None and (name in bindings or not parametersOnly):
			value = substituteReferences(fallback.strip(), bindings, function, parametersOnly)
		result.append(template[offset:m.start()])
		result.append(template[m.start():end + 1] if value is None else value)
		offset = end + 1
	result.append(template[offset:])
	return "".join(result)

# EOF - vim: ts=4 sw=4 noet

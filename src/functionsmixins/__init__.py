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

from .model     import Parameter, FunctionDefinition, MixinDefinition, Registry, ExpansionContext, \
                       ExpansionError, ParseError, MissingResultClause, ExpansionCycleError
from .processor import extractDefinitions, mergeSpans
from .resolver  import Resolver
from .writer    import expand, stripSpans, process
from .command   import run, processString, processPath, transform, preprocessStyle

VERSION    = "0.1.0"
LICENSE    = "http://ffctn.com/doc/licenses/bsd"

__doc__ = """
Expands user-declared `@function` and `@mixin` definitions in CSS-like
style sources. Function calls like `--double(3)` are replaced by the
function's `result:` expression and `@apply --mixin(...)` sites by the
mixin's body, leaving standard CSS.
"""

if __name__ == "__main__":
	import sys
	sys.exit(run(sys.argv[1:]))

# EOF

import unittest
from functionsmixins.processor import extractFunctions, extractMixins, extractDefinitions, findDeclarationSpans, mergeSpans
from functionsmixins.model     import Registry, ExpansionContext, FunctionDefinition, Parameter, ParseError

FUNCTIONS = """\
@function --double(--x: 1) { result: calc(var(--x) * 2); }
.a { width: --double(2); }
@function --double(--y) { result: var(--y); }
"""

MIXINS = """\
@mixin --box(--c: red) { color: env(--c); }
@mixin --wrap(@contents) { @media print { @contents; } }
"""

class TestExtraction(unittest.TestCase):

	def test_functions(self):
		registry = Registry()
		spans    = extractFunctions(FUNCTIONS, registry)
		self.assertEqual(len(spans), 2)
		self.assertEqual(FUNCTIONS[spans[0][0]:spans[0][1]], "@function --double(--x: 1) { result: calc(var(--x) * 2); }")
		# The last declaration wins
		self.assertEqual(registry.get("--double"), FunctionDefinition("--double", [Parameter("--y")], " result: var(--y); "))

	def test_mixins(self):
		registry = Registry()
		spans    = extractMixins(MIXINS, registry)
		self.assertEqual(len(spans), 2)
		self.assertFalse(registry.get("--box").hasContents)
		self.assertEqual(registry.get("--box").params, [Parameter("--c", "red")])
		self.assertTrue(registry.get("--wrap").hasContents)
		self.assertEqual(registry.get("--wrap").params, [])

	def test_definitions(self):
		context = ExpansionContext()
		spans   = extractDefinitions(FUNCTIONS + MIXINS, context)
		self.assertEqual(len(spans), 4)
		self.assertIn("--double", context.functions)
		self.assertIn("--wrap", context.mixins)
		self.assertNotIn("--wrap", context.functions)

	def test_extraction_is_idempotent(self):
		context = ExpansionContext()
		first   = extractDefinitions(MIXINS, context)
		before  = context.mixins.get("--box")
		second  = extractDefinitions(MIXINS, context)
		self.assertEqual(first, second)
		self.assertEqual(context.mixins.get("--box"), before)
		self.assertEqual(len(context.mixins), 2)

	def test_unmatched(self):
		with self.assertRaises(ParseError):
			extractDefinitions("@mixin --m { color: red;", ExpansionContext())

	def test_find_does_not_register(self):
		self.assertEqual(len(findDeclarationSpans(FUNCTIONS + MIXINS)), 4)

class TestSpans(unittest.TestCase):

	def test_merge(self):
		self.assertEqual(mergeSpans([(10, 20), (0, 5), (5, 8), (15, 30)]), [(0, 8), (10, 30)])
		self.assertEqual(mergeSpans([(0, 10), (2, 3)]), [(0, 10)])
		self.assertEqual(mergeSpans([]), [])

	def test_merge_is_idempotent(self):
		spans  = [(40, 45), (3, 9), (8, 12), (20, 25), (21, 22)]
		merged = mergeSpans(spans)
		self.assertEqual(mergeSpans(merged), merged)
		for a, b in zip(merged, merged[1:]):
			self.assertLess(a[1], b[0])

if __name__ == "__main__":
	unittest.main()

# EOF

import os
import tempfile
import unittest
from functionsmixins.model   import ExpansionContext
from functionsmixins.command import getLanguage, transform, preprocessStyle, processString, processPath, run

DEFS = "@mixin --box(--c: red) { color: env(--c); }\n"

class TestHost(unittest.TestCase):

	def test_language(self):
		self.assertEqual(getLanguage("/src/a/b.css"), "css")
		self.assertEqual(getLanguage("/src/App.svelte?svelte&type=style&lang.scss"), "scss")
		self.assertEqual(getLanguage("/src/App.vue?vue&type=template"), "vue")

	def test_transform_style(self):
		output = transform(DEFS + ".a { @apply --box(blue); }", "/src/a.css", ExpansionContext())
		self.assertEqual(output, "\n.a {  color: blue;  }")

	def test_transform_component(self):
		code   = "<script>let a = '@apply --box;'</script>\n<style>" + DEFS + ".a { @apply --box; }</style>"
		output = transform(code, "/src/App.svelte", ExpansionContext())
		self.assertTrue(output.startswith("<script>let a = '@apply --box;'</script>\n<style>"))
		self.assertIn(".a {  color: red;  }</style>", output)

	def test_transform_ignored(self):
		self.assertIsNone(transform("<div></div>", "/src/App.vue", ExpansionContext()))
		self.assertIsNone(transform("let a = 1", "/src/main.js", ExpansionContext()))

	def test_preprocess_style(self):
		context = ExpansionContext()
		code    = DEFS + ".a { @apply --box; }"
		self.assertIsNone(preprocessStyle(code, "/p/src/App.svelte", context, ["ui"]))
		self.assertIn("color: red;", preprocessStyle(code, "/p/node_modules/ui/Button.svelte", context, ["ui"]))

	def test_registries_are_shared(self):
		context = ExpansionContext()
		processString(DEFS, context)
		self.assertEqual(processString(".a { @apply --box(green); }", context), ".a {  color: green;  }")

class TestRun(unittest.TestCase):

	def setUp(self):
		self.tmp  = tempfile.TemporaryDirectory()
		self.root = self.tmp.name

	def tearDown(self):
		self.tmp.cleanup()

	def path( self, name, text=None ):
		path = os.path.join(self.root, name)
		if text is not None:
			os.makedirs(os.path.dirname(path), exist_ok=True)
			with open(path, "w", encoding="utf-8") as f:
				f.write(text)
		return path

	def read( self, name ):
		with open(self.path(name), encoding="utf-8") as f:
			return f.read()

	def test_run(self):
		self.path("lib/defs.css", DEFS)
		app = self.path("src/app.css", ".a { @apply --box(blue); }\n")
		self.assertEqual(run(["-I", self.path("lib"), "-o", self.path("out.css"), app]), 0)
		self.assertEqual(self.read("out.css"), ".a {  color: blue;  }\n")
		self.assertEqual(processPath(app, ExpansionContext()), ".a { /* Unknown mixin: --box */ }\n")

	def test_keep_definitions(self):
		app = self.path("app.css", DEFS + ".a { @apply --box; }\n")
		self.assertEqual(run(["--keep-definitions", "-o", self.path("out.css"), app]), 0)
		self.assertEqual(self.read("out.css"), DEFS + ".a {  color: red;  }\n")

	def test_errors(self):
		self.path("src/broken.css", "@mixin --m { color: red;\n")
		self.path("src/ok.css", DEFS + ".a { @apply --box; }\n")
		self.assertEqual(run(["-o", self.path("out.css"), self.path("src")]), 1)
		self.assertEqual(self.read("out.css"), "\n.a {  color: red;  }\n")
		self.assertEqual(run([self.path("missing.css")]), 1)
		self.assertEqual(run([]), 1)

if __name__ == "__main__":
	unittest.main()

# EOF

import io
import unittest
from functionsmixins.model     import ExpansionContext
from functionsmixins.processor import findDeclarationSpans
from functionsmixins.writer    import CSSWriter, blank, stripSpans, expand, process

SOURCE = """\
@function --d(--x) {
	result: calc(var(--x) * 2);
}
@mixin --m {
	width: --d(2);
}
.a {
	@apply --m;
}
"""

class TestStrip(unittest.TestCase):

	def test_blank(self):
		self.assertEqual(blank("a\nb c\n\nd"), "\n\n\n")

	def test_strip_keeps_lines(self):
		spans  = findDeclarationSpans(SOURCE)
		output = stripSpans(SOURCE, spans)
		self.assertEqual(output.count("\n"), SOURCE.count("\n"))
		self.assertNotIn("result", output)
		self.assertNotIn("@mixin", output)
		self.assertIn("@apply --m;", output)
		self.assertEqual(output.split("\n")[6], ".a {")

class TestProcess(unittest.TestCase):

	def test_process(self):
		output = process(SOURCE, ExpansionContext())
		self.assertTrue(output.startswith("\n\n\n\n\n\n.a {"))
		self.assertIn("width: calc(2 * 2);", output)
		self.assertNotIn("@function", output)
		self.assertNotIn("@apply", output)

	def test_declarations_are_untouched(self):
		output = process(SOURCE, ExpansionContext(), strip=False)
		self.assertTrue(output.startswith("@function --d(--x) {\n\tresult: calc(var(--x) * 2);\n}\n@mixin --m {\n\twidth: --d(2);\n}\n"))
		self.assertIn("width: calc(2 * 2);", output)

	def test_expand_does_not_register(self):
		context = ExpansionContext()
		output  = expand(SOURCE, context)
		self.assertEqual(len(context.functions), 0)
		self.assertIn("/* Unknown mixin: --m */", output)
		self.assertTrue(output.startswith("@function --d(--x) {"))

class TestWriter(unittest.TestCase):

	def test_write_text(self):
		context = ExpansionContext()
		spans   = findDeclarationSpans(SOURCE)
		output  = io.StringIO()
		CSSWriter(context.resolver(), output=output, strip=True).write(SOURCE, spans)
		self.assertEqual(output.getvalue(), stripSpans(SOURCE, spans).replace("@apply --m;", "/* Unknown mixin: --m */"))

	def test_write_binary(self):
		output = io.BytesIO()
		CSSWriter(output=output).write(".é { }", [])
		self.assertEqual(output.getvalue(), ".é { }".encode("utf-8"))

if __name__ == "__main__":
	unittest.main()

# EOF

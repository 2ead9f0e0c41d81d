"""Tests for configuration script minification."""

import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from calmjs.parse import es5
from calmjs.parse.unparsers.es5 import pretty_print

from src.errors import MinificationError, TransformError
from src.minifier import MinifyOptions, minify_js


THEME_SOURCE = """// Tailwind CSS Configuration
// This file is loaded once and cached across all SkyCMS pages

tailwind.config = {
  theme: {
    extend: {
      // Custom brand colors
      colors: {
        brand: {
          500: '#00BCD4'  // Primary brand color
        }
      },
      animation: {
        'fade-in': 'fadeIn 0.6s ease-in'
      }
    }
  }
};
"""


class TestMinifyJs(unittest.TestCase):
    def test_keeps_names_and_hex_literals_verbatim(self):
        minified = minify_js(THEME_SOURCE)
        self.assertIn("brand", minified)
        self.assertIn("#00BCD4", minified)
        self.assertIn("tailwind.config", minified)
        self.assertIn("fade-in", minified)

    def test_strips_comments_and_line_breaks(self):
        minified = minify_js(THEME_SOURCE)
        self.assertNotIn("\n", minified.strip())
        self.assertNotIn("//", minified)
        self.assertNotIn("Primary brand color", minified)
        self.assertLess(len(minified), len(THEME_SOURCE))

    def test_output_parses_to_same_program(self):
        minified = minify_js(THEME_SOURCE)
        self.assertEqual(pretty_print(es5(minified)), pretty_print(es5(THEME_SOURCE)))

    def test_debugger_removed_and_console_kept_by_default(self):
        source = "debugger;\nconsole.log('theme loaded');\ntailwind.config = {a: 1};\n"
        minified = minify_js(source)
        self.assertNotIn("debugger", minified)
        self.assertIn("console.log", minified)
        self.assertIn("theme loaded", minified)

    def test_drop_console_option(self):
        source = "console.log('theme loaded');\ntailwind.config = {a: 1};\n"
        minified = minify_js(source, MinifyOptions(drop_console=True))
        self.assertNotIn("console", minified)
        self.assertIn("tailwind.config", minified)

    def test_debugger_kept_when_disabled(self):
        minified = minify_js("debugger;\nvar a = 1;\n", MinifyOptions(drop_debugger=False))
        self.assertIn("debugger", minified)

    def test_literal_if_reduced_to_taken_branch(self):
        source = "if (false) { deadValue = 1; } else { liveValue = 2; }\nif (true) { alsoLive = 3; }\n"
        minified = minify_js(source)
        self.assertNotIn("deadValue", minified)
        self.assertIn("liveValue", minified)
        self.assertIn("alsoLive", minified)
        self.assertNotIn("if", minified)

    def test_dead_branch_keeps_hoisted_var_declarations(self):
        source = (
            "if (false) {\n"
            "  var hiddenShade = '#00BCD4';\n"
            "  for (var step = 0; step < 2; step++) {}\n"
            "  var build = function () { var innerOnly = 1; return innerOnly; };\n"
            "}\n"
            "tailwind.config = {v: typeof hiddenShade === 'undefined' ? hiddenShade : 0};\n"
        )
        minified = minify_js(source)
        self.assertTrue(minified.startswith("var "))
        self.assertNotIn("#00BCD4", minified)
        self.assertNotIn("innerOnly", minified)
        self.assertEqual(
            pretty_print(es5(minified)),
            pretty_print(es5(
                "var hiddenShade, step, build;\n"
                "tailwind.config = {v: typeof hiddenShade === 'undefined' ? hiddenShade : 0};\n"
            )),
        )

    def test_dead_branch_without_declarations_leaves_no_var(self):
        minified = minify_js("if (true) { liveValue = 2; } else { deadValue = 1; }\n")
        self.assertNotIn("var", minified)
        self.assertIn("liveValue", minified)

    def test_statements_after_return_removed(self):
        source = (
            "function keepName(themeValue) {\n"
            "  return themeValue;\n"
            "  unreachableCall();\n"
            "}\n"
            "tailwind.config = {value: keepName(1)};\n"
        )
        minified = minify_js(source)
        self.assertIn("keepName", minified)
        self.assertIn("themeValue", minified)
        self.assertNotIn("unreachableCall", minified)

    def test_dead_code_kept_when_disabled(self):
        source = "if (false) { deadValue = 1; }\n"
        minified = minify_js(source, MinifyOptions(dead_code=False))
        self.assertIn("deadValue", minified)

    def test_invalid_source_raises(self):
        with self.assertRaises(MinificationError) as ctx:
            minify_js("tailwind.config = { theme: {\n")
        self.assertIsInstance(ctx.exception, TransformError)
        self.assertIn("Could not parse JavaScript", str(ctx.exception))


class TestMinifyOptions(unittest.TestCase):
    def test_defaults_match_distribution_settings(self):
        options = MinifyOptions()
        self.assertTrue(options.dead_code)
        self.assertFalse(options.drop_console)
        self.assertTrue(options.drop_debugger)
        self.assertFalse(options.mangle)

    def test_from_config(self):
        options = MinifyOptions.from_config({"drop_console": True, "dead_code": False})
        self.assertTrue(options.drop_console)
        self.assertFalse(options.dead_code)
        self.assertTrue(options.drop_debugger)

    def test_from_config_ignores_non_mapping(self):
        self.assertEqual(MinifyOptions.from_config(None), MinifyOptions())


if __name__ == "__main__":
    unittest.main()

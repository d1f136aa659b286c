import unittest

from sitesync.util.glob import expand_braces, is_match, validate_pattern


class TestGlob(unittest.TestCase):
    def test_globstar_matches_top_level_and_nested(self) -> None:
        self.assertTrue(is_match("index.html", "**/*.html"))
        self.assertTrue(is_match("docs/guide/index.html", "**/*.html"))
        self.assertFalse(is_match("index.htm", "**/*.html"))

    def test_star_does_not_cross_slash(self) -> None:
        self.assertTrue(is_match("index.html", "*.html"))
        self.assertFalse(is_match("docs/index.html", "*.html"))

    def test_trailing_globstar(self) -> None:
        self.assertTrue(is_match("assets/app.js", "assets/**"))
        self.assertTrue(is_match("assets/img/logo.png", "assets/**"))
        self.assertFalse(is_match("static/app.js", "assets/**"))

    def test_middle_globstar(self) -> None:
        self.assertTrue(is_match("a/b.txt", "a/**/b.txt"))
        self.assertTrue(is_match("a/x/y/b.txt", "a/**/b.txt"))
        self.assertFalse(is_match("b.txt", "a/**/b.txt"))

    def test_dotfiles_need_explicit_dot(self) -> None:
        self.assertFalse(is_match(".env", "**"))
        self.assertFalse(is_match(".well-known/x.json", "**/*.json"))
        self.assertTrue(is_match(".env", "**", dot=True))
        self.assertTrue(is_match("sub/.DS_Store", "**/.DS_Store"))

    def test_braces_classes_and_question_mark(self) -> None:
        self.assertTrue(is_match("logo.png", "*.{png,jpg}"))
        self.assertTrue(is_match("logo.jpg", "*.{png,jpg}"))
        self.assertFalse(is_match("logo.gif", "*.{png,jpg}"))
        self.assertTrue(is_match("file1.txt", "file[0-9].txt"))
        self.assertFalse(is_match("filex.txt", "file[0-9].txt"))
        self.assertTrue(is_match("a.txt", "?.txt"))
        self.assertFalse(is_match("ab.txt", "?.txt"))

    def test_any_of_several_patterns(self) -> None:
        self.assertTrue(is_match("robots.txt", ["*.html", "*.txt"]))
        self.assertFalse(is_match("robots.xml", ["*.html", "*.txt"]))
        self.assertFalse(is_match("robots.txt", []))

    def test_expand_braces(self) -> None:
        self.assertEqual(expand_braces("{a,b}.css"), ["a.css", "b.css"])
        self.assertEqual(expand_braces("x{1,{2,3}}"), ["x1", "x2", "x3"])
        self.assertEqual(expand_braces("plain"), ["plain"])

    def test_validate_pattern(self) -> None:
        validate_pattern("**/*.html")
        with self.assertRaises(ValueError):
            validate_pattern("")

    def test_negated_patterns_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            validate_pattern("!**/*.map")

    def test_negated_character_class(self) -> None:
        self.assertTrue(is_match("filex.txt", "file[!0-9].txt"))
        self.assertFalse(is_match("file1.txt", "file[!0-9].txt"))
        self.assertTrue(is_match("a/b", "a/**/b"))

    def test_globstar_does_not_enter_dot_directories(self) -> None:
        self.assertFalse(is_match(".git/config", "**/config"))
        self.assertFalse(is_match("a/.cache/x.js", "a/**/*.js"))
        self.assertTrue(is_match("a/.cache/x.js", "a/.cache/*.js"))
        self.assertTrue(is_match("a/.cache/x.js", "a/**/*.js", dot=True))


if __name__ == "__main__":
    unittest.main()

"""
Tests for the command-line driver.
"""

import io
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from markov_text.cli import main
from markov_text.corpus import load_corpus


class TestCLI(unittest.TestCase):
    """Tests for markov-text main()."""

    def setUp(self):
        """Set up a temporary corpus directory."""
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def write(self, text):
        path = self.dir / "corpus.txt"
        path.write_text(text, encoding="utf-8")
        return str(path)

    def run_main(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(argv)
        return code, out.getvalue()

    def test_generate(self):
        """Test generating a fixed number of tokens."""
        code, out = self.run_main([self.write("solo"), "-n", "4", "--seed", "1"])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip().split("\n"), ["solo", "solo"])

    def test_until_boundary(self):
        """Test stopping at the first line break."""
        code, out = self.run_main([self.write("x y\nz y\n"), "--until-boundary", "--seed", "3"])
        self.assertEqual(code, 0)
        self.assertIn(out.strip(), ("x y", "z y"))

    def test_lowercase(self):
        """Test corpus normalization flags."""
        code, out = self.run_main([self.write("SOLO"), "-n", "1", "--lowercase"])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "solo")

    def test_inspect(self):
        """Test printing the transition tables."""
        code, out = self.run_main([self.write("x y\n"), "--inspect"])
        self.assertEqual(code, 0)
        self.assertIn("-> 'y' probability (1 / 1)", out)

    def test_missing_file(self):
        """Test that a missing corpus is a failure."""
        code, _ = self.run_main([str(self.dir / "nope.txt")])
        self.assertEqual(code, 1)

    def test_invalid_encoding(self):
        """Test that a corpus that is not valid UTF-8 is a failure."""
        path = self.dir / "latin1.txt"
        path.write_bytes(b"caf\xe9 \xff\xfe\n")
        with self.assertRaises(UnicodeDecodeError):
            load_corpus(path)
        code, _ = self.run_main([str(path)])
        self.assertEqual(code, 1)

    def test_explicit_encoding(self):
        """Test reading a corpus in another encoding."""
        path = self.dir / "latin1.txt"
        path.write_bytes(b"caf\xe9\n")
        self.assertEqual(load_corpus(path, encoding="latin-1"), "caf\u00e9\n")
        code, out = self.run_main([str(path), "--encoding", "latin-1", "-n", "1"])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "caf\u00e9")

    def test_empty_corpus(self):
        """Test that an empty corpus cannot generate."""
        code, _ = self.run_main([self.write("")])
        self.assertEqual(code, 1)

    def test_negative_count(self):
        """Test rejecting a negative token count."""
        code, _ = self.run_main([self.write("solo"), "-n", "-1"])
        self.assertEqual(code, 1)


if __name__ == '__main__':
    unittest.main()

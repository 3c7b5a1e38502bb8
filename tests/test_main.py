import unittest
import sys
import os
import io
from contextlib import redirect_stdout, redirect_stderr

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_walker.main import build_parser, main, maze_size

class TestCommandLine(unittest.TestCase):
    def run_main(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(argv)
        return code, out.getvalue()

    def test_generate_prints_maze(self):
        code, out = self.run_main(["generate", "--size", "4", "--algo", "kruskal", "--seed", "1"])
        self.assertEqual(code, 0)
        lines = out.strip().splitlines()
        self.assertEqual(len(lines), 2 * 4 + 1)
        self.assertIn("S", out)
        self.assertIn("E", out)

    def test_run_reaches_exit(self):
        code, out = self.run_main(["run", "--size", "8", "--strategy", "right", "--seed", "3"])
        self.assertEqual(code, 0)
        self.assertIn("Exit reached: True", out)

    def test_run_with_tiny_budget(self):
        code, out = self.run_main(["run", "--size", "20", "--seed", "3", "--max-steps", "1"])
        self.assertEqual(code, 1)
        self.assertIn("Steps: 1", out)

    def test_benchmark(self):
        code, out = self.run_main(["benchmark", "--sizes", "5"])
        self.assertEqual(code, 0)
        for algo in ("prim", "backtracking", "kruskal"):
            self.assertIn(algo, out)

    def test_no_command_prints_help(self):
        code, out = self.run_main([])
        self.assertEqual(code, 0)
        self.assertIn("usage", out)

    def test_size_validation(self):
        self.assertEqual(maze_size("12"), 12)
        parser = build_parser()
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                parser.parse_args(["generate", "--size", "0"])
            with self.assertRaises(SystemExit):
                parser.parse_args(["generate", "--size", "51"])
            with self.assertRaises(SystemExit):
                parser.parse_args(["run", "--strategy", "zigzag"])

if __name__ == '__main__':
    unittest.main()

import contextlib
import io
import unittest

from rawfrac.frac import F

import ratio


class TestRatioScript(unittest.TestCase):

    def run_main(self, *argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            results = ratio.main(list(argv))
        return results, out.getvalue().split()

    def test_reduce(self):
        results, lines = self.run_main('reduce', '1920/1080', '4/-6', '0/5')
        self.assertEqual(results, [F(16, 9), F(-2, 3), F(0, 1)])
        self.assertEqual(lines, ['16/9', '-2/3', '0/1'])

    def test_norm(self):
        _, lines = self.run_main('norm', '12/2', '3/4')
        self.assertEqual(lines, ['24/4', '3/4'])

    def test_norm_to(self):
        _, lines = self.run_main('norm-to', '1/2', '1/3')
        self.assertEqual(lines, ['3/6'])

    def test_align(self):
        _, lines = self.run_main('align', '16/9', '4/3', '3/2')
        self.assertEqual(lines, ['32/18', '24/18', '27/18'])

    def test_calc(self):
        results, lines = self.run_main('calc', '1/2', '+', '1/3')
        self.assertEqual(results, [F(5, 6)])
        _, lines = self.run_main('calc', '1/2', 'x', '2/4')
        self.assertEqual(lines, ['2/8'])
        _, lines = self.run_main('calc', '1/2', 'x', '2/4', '--reduce')
        self.assertEqual(lines, ['1/4'])
        _, lines = self.run_main('calc', '4/3', '/', '3/2')
        self.assertEqual(lines, ['8/9'])

    def test_negative_fraction(self):
        _, lines = self.run_main('reduce', '6/-4', '3/-9')
        self.assertEqual(lines, ['-3/2', '-1/3'])

    def test_zero_denominator(self):
        with self.assertLogs(level='WARNING'):
            _, lines = self.run_main('calc', '1/2', '/', '0')
        self.assertEqual(lines, ['1/0'])

    def test_bad_fraction(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                ratio.main(['reduce', '1/x'])
        self.assertEqual(ctx.exception.code, 2)

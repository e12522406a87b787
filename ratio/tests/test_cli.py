import contextlib
import io
import os
from unittest import TestCase, mock

import plac

import ratio.cli
from ratio.arith import INT_MAX
from ratio.errors import ZeroDenominatorError


class TestFold(TestCase):
    def test_add(self):
        r = ratio.cli.fold('add', [1, 3, 1, 6])
        self.assertEqual((r.numerator, r.denominator), (1, 2))

    def test_single_pair(self):
        r = ratio.cli.fold('mul', [4, -6])
        self.assertEqual((r.numerator, r.denominator), (-2, 3))

    def test_left_to_right(self):
        r = ratio.cli.fold('div', [1, 1, 2, 1, 3, 1])
        self.assertEqual((r.numerator, r.denominator), (1, 6))

    def test_odd_count(self):
        with self.assertRaises(ValueError):
            ratio.cli.fold('add', [1, 2, 3])
        with self.assertRaises(ValueError):
            ratio.cli.fold('add', [])

    def test_zero_denominator(self):
        with self.assertRaises(ZeroDenominatorError):
            ratio.cli.fold('sub', [1, 2, 1, 0])

class TestMain(TestCase):
    def test_prints_result(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            text = ratio.cli.main('sub', None, 1, 2, 3, 4)
        self.assertEqual(text, '-1/4')
        self.assertEqual(out.getvalue(), '-1/4\n')

    def test_command_line(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            plac.call(ratio.cli.main, ['-o', 'mul', '2', '3', '9', '4'])
        self.assertEqual(out.getvalue(), '3/2\n')

    def test_division_by_zero(self):
        with self.assertLogs(level='ERROR') as logs:
            with self.assertRaises(SystemExit) as cm:
                ratio.cli.main('div', None, 3, 4, 0, 1)
        self.assertEqual(cm.exception.code, 1)
        self.assertIn('ZeroDenominatorError', logs.output[0])

    def test_overflow(self):
        with self.assertLogs(level='ERROR') as logs:
            with self.assertRaises(SystemExit) as cm:
                ratio.cli.main('add', None, INT_MAX, 1, 1, 1)
        self.assertEqual(cm.exception.code, 1)
        self.assertIn('RationalOverflowError', logs.output[0])

    def test_unknown_log_level(self):
        with self.assertLogs(level='ERROR') as logs:
            with self.assertRaises(SystemExit) as cm:
                ratio.cli.main('add', 'chatty', 1, 2)
        self.assertEqual(cm.exception.code, 2)
        self.assertIn('chatty', logs.output[0])

    def test_unknown_log_level_from_environment(self):
        with mock.patch.dict(os.environ, {'RATIO_LOG_LEVEL': 'chatty'}):
            with self.assertLogs(level='ERROR'):
                with self.assertRaises(SystemExit) as cm:
                    ratio.cli.main('add', None, 1, 2)
        self.assertEqual(cm.exception.code, 2)

    def test_log_level_from_environment(self):
        out = io.StringIO()
        with mock.patch.dict(os.environ, {'RATIO_LOG_LEVEL': 'debug'}):
            with contextlib.redirect_stdout(out):
                ratio.cli.main('add', None, 1, 2, 1, 2)
        self.assertEqual(out.getvalue(), '1\n')

    def test_bad_operand_count(self):
        with self.assertLogs(level='ERROR'):
            with self.assertRaises(SystemExit) as cm:
                ratio.cli.main('add', None, 1, 2, 3)
        self.assertEqual(cm.exception.code, 2)

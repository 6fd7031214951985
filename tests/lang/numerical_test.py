import math
import unittest

from zipette.lang.numerical import U64_MAX, divide, number, power, shift_left, shift_right, to_float, to_u64


class NumericalTestCase(unittest.TestCase):

    def test_to_float(self):
        should_fail = ["", ".", "abc", "1.2.3"]
        for case in should_fail:
            self.assertRaises(ValueError, to_float, case)

        should_pass = {"5": 5.0, "3.5": 3.5, "3,5": 3.5, "5.": 5.0, "007": 7.0, "0.001": 0.001}
        for case, result in should_pass.items():
            self.assertEqual(result, to_float(case), case)

    def test_number(self):
        cases = {
            15.0: "15",
            3.5: "3.5",
            -2.25: "-2.25",
            -0.0: "-0",
            0.1: "0.1",
            1e20: "100000000000000000000",
            1e-7: "0.0000001",
            math.inf: "inf",
            -math.inf: "-inf",
            math.nan: "NaN",
        }
        for case, result in cases.items():
            self.assertEqual(result, number(case), case)

    def test_divide(self):
        cases = [(7.0, 2.0, 3.5), (1.0, 0.0, math.inf), (-1.0, 0.0, -math.inf), (1.0, -0.0, -math.inf)]
        for left, right, result in cases:
            self.assertEqual(result, divide(left, right), (left, right))

        self.assertTrue(math.isnan(divide(0.0, 0.0)))
        self.assertTrue(math.isnan(divide(math.nan, 0.0)))

    def test_power(self):
        cases = [
            (2.0, 10.0, 1024.0),
            (-2.0, 3.0, -8.0),
            (4.0, 0.5, 2.0),
            (10.0, 1000.0, math.inf),
            (-10.0, 1001.0, -math.inf),
            (0.0, -1.0, math.inf),
            (-0.0, -1.0, -math.inf),
        ]
        for base, exponent, result in cases:
            self.assertEqual(result, power(base, exponent), (base, exponent))

        self.assertTrue(math.isnan(power(-8.0, 1 / 3)))

    def test_to_u64(self):
        cases = {-5.0: 0, 0.0: 0, 3.9: 3, 2.0 ** 40: 2 ** 40, 1e30: U64_MAX, math.inf: U64_MAX, math.nan: 0}
        for case, result in cases.items():
            self.assertEqual(result, to_u64(case), case)

    def test_shift_left(self):
        cases = {
            (1.0, 3.0): 8.0,
            (5.0, -1.0): 5.0,
            (1.0, 63.0): float(2 ** 63),
            (float(2 ** 63), 1.0): 0.0,
            (1.0, 64.0): 0.0,
            (1.0, 100.0): 0.0,
            (1.0, 1e30): 0.0,
        }
        for (left, right), result in cases.items():
            self.assertEqual(result, shift_left(left, right), (left, right))

    def test_shift_right(self):
        cases = {(16.0, 2.0): 4.0, (17.9, 1.0): 8.0, (-16.0, 1.0): 0.0, (16.0, 64.0): 0.0, (16.0, 200.0): 0.0}
        for (left, right), result in cases.items():
            self.assertEqual(result, shift_right(left, right), (left, right))


if __name__ == '__main__':
    unittest.main()

import unittest

from piet_interpreter import Color, Instruction, decode
from piet_interpreter.colors import from_hue_lightness
from piet_interpreter.instructions import INSTRUCTION_TABLE, lookup


class TestInstructionTable(unittest.TestCase):

    def test_row_major_order(self):
        expected = [
            'none', 'push', 'pop',
            'add', 'subtract', 'multiply',
            'divide', 'mod', 'not',
            'greater', 'pointer', 'switch',
            'duplicate', 'roll', 'in(number)',
            'in(char)', 'out(number)', 'out(char)',
        ]
        actual = [str(lookup(h, l)) for h in range(6) for l in range(3)]
        self.assertEqual(actual, expected)

    def test_every_instruction_appears_once(self):
        flat = [op for row in INSTRUCTION_TABLE for op in row]
        self.assertEqual(len(flat), 18)
        self.assertEqual(set(flat), set(Instruction))

    def test_out_of_range(self):
        with self.assertRaises(ValueError):
            lookup(6, 0)
        with self.assertRaises(ValueError):
            lookup(0, -1)

    def test_decode_uses_target_minus_source(self):
        self.assertIs(decode(Color.LIGHT_RED, Color.RED), Instruction.PUSH)
        self.assertIs(decode(Color.RED, Color.LIGHT_RED), Instruction.POP)
        self.assertIs(decode(Color.DARK_BLUE, Color.RED), Instruction.NOT)
        self.assertIs(decode(Color.RED, Color.DARK_BLUE), Instruction.ROLL)

    def test_decode_all_chromatic_pairs(self):
        for h1 in range(6):
            for l1 in range(3):
                for h2 in range(6):
                    for l2 in range(3):
                        a = from_hue_lightness(h1, l1)
                        b = from_hue_lightness(h2, l2)
                        self.assertIs(decode(a, b), INSTRUCTION_TABLE[(h2 - h1) % 6][(l2 - l1) % 3])

    def test_white_and_black_never_decode(self):
        self.assertIsNone(decode(Color.RED, Color.WHITE))
        self.assertIsNone(decode(Color.WHITE, Color.RED))
        self.assertIsNone(decode(Color.BLACK, Color.RED))


if __name__ == '__main__':
    unittest.main()

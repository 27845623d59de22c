import io
import unittest

from piet_interpreter import BufferedOutput, Interpreter
from piet_interpreter.trace import TraceWriter, format_event, format_stack

from piet_fixtures import PRINT_TWO, make_grid


class TestFormatStack(unittest.TestCase):

    def test_short_stack(self):
        self.assertEqual(format_stack(()), '[]')
        self.assertEqual(format_stack((1, -2, 3)), '[1, -2, 3]')

    def test_long_stack_is_elided(self):
        self.assertEqual(format_stack(tuple(range(20)), limit=3), '[...17 more, 17, 18, 19]')


class TestFormatEvent(unittest.TestCase):

    def setUp(self):
        self.events = []
        Interpreter(make_grid(PRINT_TWO), sink=self.events.append,
                    stdout=BufferedOutput()).run()

    def test_transition(self):
        self.assertEqual(format_event(self.events[0]),
                         'step 1  (1, 0) -> (2, 0) right|left push ok stack=[2]')

    def test_blocked(self):
        self.assertEqual(format_event(self.events[2]),
                         'step 3  (3, 0) blocked -> right|right')

    def test_noop(self):
        self.assertEqual(format_event(self.events[4]),
                         'step 5  (3, 1) -> (3, 2) down|right pop '
                         'no-op (pop failed: stack underflow) stack=[]')

    def test_exhausted(self):
        self.assertTrue(format_event(self.events[-1]).startswith('step 13  '))
        self.assertIn(' exhausted -> ', format_event(self.events[-1]))

    def test_slide(self):
        events = []
        Interpreter(make_grid("lr w w r"), sink=events.append).step()
        self.assertEqual(format_event(events[0]),
                         'step 1  (2, 0) -> (3, 0) right|left (white) stack=[]')

    def test_deadlock(self):
        events = []
        Interpreter(make_grid("w"), sink=events.append).run()
        self.assertEqual(format_event(events[0]), 'step 1  (0, 0) white deadlock right|left')


class TestTraceWriter(unittest.TestCase):

    def run_with(self, **kwargs):
        stream = io.StringIO()
        Interpreter(make_grid(PRINT_TWO), sink=TraceWriter(stream, **kwargs),
                    stdout=BufferedOutput()).run()
        return stream.getvalue().splitlines()

    def test_every_step(self):
        lines = self.run_with()
        self.assertEqual(len(lines), 13)
        self.assertTrue(lines[0].startswith('step 1  '))

    def test_noops_only(self):
        lines = self.run_with(steps=False)
        self.assertEqual(lines, ['step 5: pop failed: stack underflow'])

    def test_silent(self):
        self.assertEqual(self.run_with(steps=False, noops=False), [])


if __name__ == '__main__':
    unittest.main()

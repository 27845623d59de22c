"""
Shared grid builders for the test suite.

Grids are written as whitespace separated color codes, one row per line:
    lr r dr   light/normal/dark red
    ly y dy   yellow      lg g dg   green      lc c dc   cyan
    lb b db   blue        lm m dm   magenta    w white   k black
"""

from piet_interpreter import Color, ColorGrid


CODES = {
    'lr': Color.LIGHT_RED, 'r': Color.RED, 'dr': Color.DARK_RED,
    'ly': Color.LIGHT_YELLOW, 'y': Color.YELLOW, 'dy': Color.DARK_YELLOW,
    'lg': Color.LIGHT_GREEN, 'g': Color.GREEN, 'dg': Color.DARK_GREEN,
    'lc': Color.LIGHT_CYAN, 'c': Color.CYAN, 'dc': Color.DARK_CYAN,
    'lb': Color.LIGHT_BLUE, 'b': Color.BLUE, 'db': Color.DARK_BLUE,
    'lm': Color.LIGHT_MAGENTA, 'm': Color.MAGENTA, 'dm': Color.DARK_MAGENTA,
    'w': Color.WHITE, 'k': Color.BLACK,
}


def make_grid(text: str) -> ColorGrid:
    rows = [line.split() for line in text.strip().splitlines()]
    return ColorGrid([[CODES[code] for code in row] for row in rows])


# push 2, out(number), then a no-op pop on entering the 3x3 trap block,
# which has no legal exit
PRINT_TWO = """
r  r  dr lm k  k
k  k  k  lm k  k
k  k  dm dm dm k
k  k  dm dm dm k
k  k  dm dm dm k
"""

# push 3, push 2, subtract, out(number), pop (no-op) into the trap
SUBTRACT = """
r  r  r  dr dr lr y  dr k  k
k  k  k  k  k  k  k  dr k  k
k  k  k  k  k  k  r  r  r  k
k  k  k  k  k  k  r  r  r  k
k  k  k  k  k  k  r  r  r  k
"""

# in(char), out(char), pop (no-op) into the trap
ECHO_CHAR = """
r  m  lb k  k
k  k  lb k  k
k  db db db k
k  db db db k
k  db db db k
"""

# red -> dark red pushes 1, dark red -> red pops it, forever
BOUNCE = """
r dr
"""

"""
Exceptions raised before a Piet program starts running.

Once a program is loaded nothing raises: stack faults become no-ops and
halting is reported through a Termination value.
"""


class ProgramError(ValueError):
    """Structurally invalid program (empty/ragged grid, bad codel size, bad image)."""

"""Day 1: Not Quite Lisp."""

from typing import List, Optional

from ...units import Unit

MOVES = {"(": 1, ")": -1}


class Day01(Unit):
    """Santa follows parentheses up and down a building."""

    group = "2015"
    number = 1
    title = "Not Quite Lisp"

    def __init__(self):
        super().__init__()
        self._moves: Optional[List[int]] = None

    def moves(self) -> List[int]:
        # Parsed once; part 2 reuses what part 1 built.
        if self._moves is None:
            self._moves = [MOVES[c] for c in self.input.strip() if c in MOVES]
        return self._moves

    def part1(self) -> int:
        return sum(self.moves())

    def part2(self) -> int:
        floor = 0
        for position, move in enumerate(self.moves(), start=1):
            floor += move
            if floor < 0:
                return position
        raise ValueError("Santa never enters the basement")

    def example_input(self) -> Optional[str]:
        return "()())"

    def example_part1(self) -> Optional[str]:
        return "-1"

    def example_part2(self) -> Optional[str]:
        return "5"

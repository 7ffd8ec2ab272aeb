"""Day 2: I Was Told There Would Be No Math."""

from typing import Iterator, Optional, Tuple

from ...units import Unit


def parse_boxes(text: str) -> Iterator[Tuple[int, int, int]]:
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        length, width, height = sorted(int(x) for x in line.split("x"))
        yield length, width, height


class Day02(Unit):
    group = "2015"
    number = 2
    title = "I Was Told There Would Be No Math"

    def part1(self) -> int:
        total = 0
        for a, b, c in parse_boxes(self.input):
            total += 2 * (a * b + b * c + a * c) + a * b
        return total

    def part2(self) -> int:
        total = 0
        for a, b, c in parse_boxes(self.input):
            total += 2 * (a + b) + a * b * c
        return total

    def example_input(self) -> Optional[str]:
        return "2x3x4\n1x1x10\n"

    def example_part1(self) -> Optional[str]:
        return "101"

    def example_part2(self) -> Optional[str]:
        return "48"

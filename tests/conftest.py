"""Shared fixtures: a fake puzzle site, environments and test units."""

from typing import Dict, List, Optional, Tuple

import pytest
from fastapi import FastAPI, Request, Response
from fastapi.testclient import TestClient

from advent.fetch import ArtifactFetcher, Environment
from advent.units import Unit

HOST = "adventofcode.com"
SESSION = "test-session-token"


class FakeSite:
    """
    Stand-in for the puzzle website.

    Serves ``inputs`` at ``/{year}/day/{day}/input``; missing days answer 404
    like an unreleased day, ``statuses`` forces a status code.
    """

    def __init__(self):
        self.inputs: Dict[Tuple[str, int], str] = {}
        self.statuses: Dict[Tuple[str, int], int] = {}
        self.requests: List[Tuple[str, int]] = []
        self.cookies: List[Optional[str]] = []

        app = FastAPI()

        @app.get("/{year}/day/{day}/input")
        def puzzle_input(year: str, day: int, request: Request):
            self.requests.append((year, day))
            self.cookies.append(request.cookies.get("session"))
            key = (year, day)
            if key in self.statuses:
                return Response(content="error", status_code=self.statuses[key])
            if key not in self.inputs:
                return Response(
                    content="Please don't repeatedly request this endpoint before it unlocks!",
                    status_code=404,
                )
            return Response(content=self.inputs[key], media_type="text/plain")

        self.app = app

    def client(self) -> TestClient:
        return TestClient(self.app, base_url=f"https://{HOST}")


@pytest.fixture
def site():
    return FakeSite()


@pytest.fixture
def env(tmp_path):
    cache_dir = tmp_path / "inputs"
    cache_dir.mkdir()
    return Environment(cache_dir=cache_dir, session=SESSION)


@pytest.fixture
def fetcher(env, site):
    with ArtifactFetcher(env, host=HOST, client=site.client()) as f:
        yield f


@pytest.fixture
def cache(env):
    """Write a cached input: ``cache("2015", 1, "text")``."""
    def write(group: str, unit: int, text: str):
        path = env.cache_dir / f"{group}-{unit}"
        path.write_text(text)
        return path
    return write


class EchoUnit(Unit):
    """Part 1 is the input length, part 2 the reversed input."""

    group = "2015"

    def part1(self):
        return len(self.input)

    def part2(self):
        return self.input[::-1]


@pytest.fixture
def make_unit():
    """Build a Unit subclass for a day: ``make_unit(4, example_input=...)``."""
    def build(number: int, base=EchoUnit, **methods):
        attrs = {"number": number}
        for name, value in methods.items():
            if callable(value):
                attrs[name] = value
            else:
                attrs[name] = (lambda v: lambda self: v)(value)
        return type(f"Day{number:02d}", (base,), attrs)
    return build

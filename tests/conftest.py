"""Shared fixtures: a small two-base map and a fake host bot."""

import logging

import pytest
from sc2.data import Race
from sc2.ids.unit_typeid import UnitTypeId
from sc2.position import Point2

from supplybot.common import EconomySnapshot, LoggerWithFields, OptionsObject
from supplybot.topology import Expansion, MapTopology


def grid(x_range, y_range):
    return [Point2((x + 0.5, y + 0.5)) for x in x_range for y in y_range]


def make_main():
    cells = grid(range(10, 31), range(10, 31))
    return Expansion(
        "main",
        (20.5, 20.5),
        area_fill=cells,
        placement_grid=cells,
        mineral_line=[(x + 0.5, 27.5) for x in range(16, 25)],
        behind_mineral_line=[(x + 0.5, 30.5) for x in range(12, 29)],
        geysers=[(27.5, 17.5)],
    )


def make_natural():
    cells = grid(range(40, 61), range(10, 31))
    return Expansion(
        "natural",
        (50.5, 20.5),
        area_fill=cells,
        placement_grid=cells,
        mineral_line=[(x + 0.5, 27.5) for x in range(46, 55)],
        behind_mineral_line=[(x + 0.5, 30.5) for x in range(42, 59)],
        geysers=[(57.5, 17.5)],
        wall=[(40, 20), (40, 21)],
        front=grid(range(38, 48), range(14, 27)),
    )


@pytest.fixture
def main():
    return make_main()


@pytest.fixture
def natural():
    return make_natural()


@pytest.fixture
def topology(main, natural):
    return MapTopology([main, natural], occupied=["main", "natural"])


class FakeBot:
    """Just enough of the host to drive the planner and the supply module."""

    def __init__(self, topology, economy=None, pylons=None, placeable=True, accept=True):
        self.race = Race.Protoss
        self.shared = OptionsObject()
        self.shared.supply_type = UnitTypeId.PYLON
        self.topology = topology
        self.snapshot = economy or EconomySnapshot(13, 15, can_afford=True, base_count=1)
        self.pylons = [Point2(p) for p in (pylons or [])]
        self.placeable = placeable
        self.accept = accept
        self.oracle_calls = []
        self.builds = []
        self.log = LoggerWithFields(logging.getLogger("supplybot.tests"), {})

    def economy(self, structure_type):
        return self.snapshot

    def supply_positions(self, structure_type):
        return list(self.pylons)

    async def can_place_first(self, structure_type, positions):
        self.oracle_calls.append((structure_type, list(positions)))
        if not self.placeable:
            return None
        return positions[0]

    def build_structure(self, structure_type, position):
        if not self.accept:
            return False
        self.builds.append((structure_type, position))
        return True


@pytest.fixture
def fake_bot(topology):
    return FakeBot(topology)

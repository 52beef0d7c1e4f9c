import pytest

from cluegrid.domain.enums import Category
from cluegrid.domain.models import Entity


def make_entities(category: Category, names: list[str], prefix: str) -> list[Entity]:
    return [
        Entity(id=f"{prefix}{index}", name=name, category=category)
        for index, name in enumerate(names, start=1)
    ]


@pytest.fixture()
def suspects():
    return make_entities(Category.SUSPECT, ["A", "B", "C"], "s")


@pytest.fixture()
def weapons():
    return make_entities(Category.WEAPON, ["X", "Y", "Z"], "w")


@pytest.fixture()
def locations():
    return make_entities(Category.LOCATION, ["P", "Q", "R"], "l")


@pytest.fixture()
def entities(suspects, weapons, locations):
    return suspects, weapons, locations


@pytest.fixture()
def mansion():
    return (
        make_entities(
            Category.SUSPECT,
            ["Mayor Grey", "Chef Red", "Lady Blue", "Professor Plum"],
            "s",
        ),
        make_entities(
            Category.WEAPON,
            ["Rusty Dagger", "Heavy Candlestick", "Poison Vial", "Lead Pipe"],
            "w",
        ),
        make_entities(
            Category.LOCATION,
            ["Library", "Kitchen", "Conservatory", "Cellar"],
            "l",
        ),
    )

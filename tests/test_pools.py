import pytest

from cluegrid.domain.enums import Category
from cluegrid.domain.errors import PuzzleInputError
from cluegrid.entities import load_entity_pools, parse_entity_pools, select_entities
from cluegrid.util.rng import Rng


def test_default_pools_load():
    pools = load_entity_pools()
    assert len(pools.suspects) >= 4
    assert all(entity.category == Category.WEAPON for entity in pools.weapons)
    assert load_entity_pools() is pools


def test_select_entities_is_stable_and_sized():
    pools = load_entity_pools()
    first = select_entities(Rng(2024).fork("entities"), 4, pools)
    second = select_entities(Rng(2024).fork("entities"), 4, pools)
    assert first == second
    for chosen in first:
        assert len(chosen) == 4
        assert len({entity.id for entity in chosen}) == 4


def test_select_entities_rejects_small_pool():
    pools = parse_entity_pools(
        {
            "suspects": [{"id": "s1", "name": "A"}, {"id": "s2", "name": "B"}],
            "weapons": [{"id": "w1", "name": "X"}, {"id": "w2", "name": "Y"}],
            "locations": [{"id": "l1", "name": "P"}, {"id": "l2", "name": "Q"}],
        }
    )
    with pytest.raises(PuzzleInputError):
        select_entities(Rng(1), 3, pools)


def test_empty_pool_is_rejected():
    with pytest.raises(PuzzleInputError):
        parse_entity_pools({"suspects": [], "weapons": [], "locations": []})


def test_duplicate_ids_are_rejected():
    with pytest.raises(PuzzleInputError):
        parse_entity_pools(
            {
                "suspects": [{"id": "s1", "name": "A"}, {"id": "s1", "name": "B"}],
                "weapons": [{"id": "w1", "name": "X"}],
                "locations": [{"id": "l1", "name": "P"}],
            }
        )


def test_load_from_custom_path(tmp_path):
    path = tmp_path / "pools.yml"
    path.write_text(
        "suspects:\n  - {id: a, name: Ann}\n"
        "weapons:\n  - {id: b, name: Bat}\n"
        "locations:\n  - {id: c, name: Cave}\n",
        encoding="utf-8",
    )
    pools = load_entity_pools(path)
    assert [entity.name for entity in pools.locations] == ["Cave"]

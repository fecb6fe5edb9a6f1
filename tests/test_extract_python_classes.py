from __future__ import annotations

from typing import TYPE_CHECKING

from extract import DependencyAccumulator, extract_dependencies
from extract.python_classes import extract_dependencies_from_paths, is_class_like

if TYPE_CHECKING:
    from pathlib import Path

_GAME_SOURCE = '''
class Player:
    def attack(self, enemy):
        Enemy.take_damage(enemy, 10)
        weapon = Weapon()
        return weapon.damage


class Enemy:
    MAX_HEALTH = 100

    def take_damage(self, amount):
        Player.take_damage(self, amount)
        Player.take_damage(self, amount)
        LOGGER.info("hit")
'''


def test_extract_dependencies_records_class_references() -> None:
    table = extract_dependencies(_GAME_SOURCE)

    assert table == {
        "Player": [{"Enemy": ["take_damage"]}, {"Weapon": ["__init__"]}],
        "Enemy": [{"Player": ["take_damage"]}],
    }


def test_extract_dependencies_qualifies_nested_classes() -> None:
    source = """
class Outer:
    class Inner:
        def run(self):
            Helper.assist()

    def go(self):
        Outer.Inner().run()
"""

    table = extract_dependencies(source)

    assert table == {
        "Outer": [{"Outer.Inner": ["__init__"]}],
        "Outer.Inner": [{"Helper": ["assist"]}],
    }


def test_extract_dependencies_dotted_receivers_keep_module_prefix() -> None:
    source = """
class Report:
    def build(self):
        return models.User.objects.all()
"""

    assert extract_dependencies(source) == {"Report": [{"models.User": ["objects"]}]}


def test_extract_dependencies_ignores_module_level_code() -> None:
    source = """
Config.load()


def helper():
    return Player.spawn()


class Empty:
    pass
"""

    assert extract_dependencies(source) == {"Empty": []}


def test_extract_dependencies_self_reference_is_kept() -> None:
    source = """
class Node:
    def clone(self):
        return Node.create()
"""

    assert extract_dependencies(source) == {"Node": [{"Node": ["create"]}]}


def test_extract_dependencies_invalid_syntax_returns_empty_table() -> None:
    assert extract_dependencies("class Broken(:\n    pass\n") == {}


def test_extract_dependencies_from_paths_merges_in_path_order(tmp_path: Path) -> None:
    first = tmp_path / "a.py"
    first.write_text(
        "class Player:\n    def f(self):\n        Enemy.hit()\n", encoding="utf-8"
    )
    second = tmp_path / "b.py"
    second.write_text(
        "class Player:\n    def g(self):\n        Enemy.hit()\n        Enemy.flee()\n",
        encoding="utf-8",
    )
    broken = tmp_path / "c.py"
    broken.write_bytes(b"\xff\xfe\x00garbage")

    table = extract_dependencies_from_paths([first, second, broken])

    assert table == {"Player": [{"Enemy": ["hit", "flee"]}]}


def test_is_class_like() -> None:
    assert is_class_like("Enemy") is True
    assert is_class_like("X") is True
    assert is_class_like("LOGGER") is False
    assert is_class_like("enemy") is False
    assert is_class_like("") is False


def test_accumulator_merges_duplicate_constants() -> None:
    accumulator = DependencyAccumulator()

    accumulator.merge(
        {
            "Player": [
                {"Weapon": ["damage"]},
                {"Weapon": ["damage", "durability"]},
                "garbage",
                {"Armor": []},
            ]
        }
    )

    assert accumulator.to_table() == {
        "Player": [{"Weapon": ["damage", "durability"]}, {"Armor": []}]
    }


def test_accumulator_registers_classes_without_references() -> None:
    accumulator = DependencyAccumulator()
    accumulator.register_class("Standalone")
    accumulator.record("Player", "Enemy", "attack")
    accumulator.record("Player", "Enemy", "attack")

    assert accumulator.to_table() == {
        "Standalone": [],
        "Player": [{"Enemy": ["attack"]}],
    }

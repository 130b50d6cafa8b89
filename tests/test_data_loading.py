from __future__ import annotations

from pathlib import Path

import pytest

from geoquest.data import DataLoadError, InvalidDatasetError
from geoquest.data.repositories import MonstersRepository
from tests.helpers.dataset_builders import raw_monster, raw_quiz, write_dataset


def test_repo_loads_monsters_in_document_order(tmp_path: Path) -> None:
    write_dataset(tmp_path, {"Okinawa": raw_monster("Coralisk"), "Hokkaido": raw_monster("Frostbear")})
    repo = MonstersRepository(base_path=tmp_path)

    assert repo.region_ids() == ["Okinawa", "Hokkaido"]
    assert [monster.id for monster in repo.all()] == ["Hokkaido", "Okinawa"]
    monster = repo.get("Hokkaido")
    assert monster.name == "Frostbear"
    assert monster.quizzes[0].choices == ("North", "South", "East", "West")
    assert monster.quizzes[0].answer_index == 1


def test_repo_get_missing_raises(tmp_path: Path) -> None:
    write_dataset(tmp_path, {"Kyoto": raw_monster()})
    repo = MonstersRepository(base_path=tmp_path)
    with pytest.raises(KeyError):
        repo.get("Atlantis")


def test_repo_dataset_exposes_version(tmp_path: Path) -> None:
    write_dataset(tmp_path, {"Kyoto": raw_monster()}, version=3)
    dataset = MonstersRepository(base_path=tmp_path).dataset()
    assert dataset.version == 3
    assert list(dataset.monsters) == ["Kyoto"]


def test_repo_missing_monsters_field_raises(tmp_path: Path) -> None:
    (tmp_path / "data.json").write_text('{"version": 1}', encoding="utf-8")
    repo = MonstersRepository(base_path=tmp_path)
    with pytest.raises(InvalidDatasetError):
        repo.region_ids()


def test_repo_missing_file_raises(tmp_path: Path) -> None:
    repo = MonstersRepository(base_path=tmp_path)
    with pytest.raises(DataLoadError):
        repo.region_ids()


def test_repo_invalid_json_raises(tmp_path: Path) -> None:
    (tmp_path / "data.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(DataLoadError):
        MonstersRepository(base_path=tmp_path).region_ids()


def test_repo_from_path_reads_custom_filename(tmp_path: Path) -> None:
    path = tmp_path / "custom.json"
    write_dataset(tmp_path, {"Kyoto": raw_monster()}).rename(path)
    repo = MonstersRepository.from_path(path)
    assert repo.region_ids() == ["Kyoto"]


def test_missing_numbers_are_defaulted(tmp_path: Path) -> None:
    payload = raw_monster()
    del payload["difficulty"]
    del payload["hp"]
    write_dataset(tmp_path, {"Kyoto": payload})
    monster = MonstersRepository(base_path=tmp_path).get("Kyoto")
    assert monster.difficulty == 3
    assert monster.hp == 7


@pytest.mark.parametrize(
    ("difficulty", "hp", "expected_difficulty", "expected_hp"),
    [
        (0, 1, 1, 3),
        (9, 99, 5, 30),
        ("hard", "lots", 3, 7),
        (True, False, 3, 7),
        (4.0, 12.0, 4, 12),
    ],
)
def test_out_of_range_numbers_are_clamped(
    tmp_path: Path, difficulty: object, hp: object, expected_difficulty: int, expected_hp: int
) -> None:
    write_dataset(tmp_path, {"Kyoto": raw_monster(difficulty=difficulty, hp=hp)})
    monster = MonstersRepository(base_path=tmp_path).get("Kyoto")
    assert monster.difficulty == expected_difficulty
    assert monster.hp == expected_hp


def test_non_object_monster_uses_defaults(tmp_path: Path) -> None:
    write_dataset(tmp_path, {"Gunma": "coming soon"})
    monster = MonstersRepository(base_path=tmp_path).get("Gunma")
    assert monster.name == "Gunma"
    assert monster.species == ""
    assert monster.difficulty == 3
    assert monster.hp == 7
    assert monster.quizzes == ()


def test_malformed_quizzes_are_dropped(tmp_path: Path) -> None:
    quizzes = [
        raw_quiz(0),
        raw_quiz(4),
        raw_quiz(True),
        raw_quiz(1, c=["only", "three", "choices"]),
        raw_quiz(1, c=["a", "b", "c", 4]),
        raw_quiz(1, q=None),
        "not a quiz",
        raw_quiz(2, hint="Look east."),
    ]
    write_dataset(tmp_path, {"Kyoto": raw_monster(quizzes=quizzes)})
    monster = MonstersRepository(base_path=tmp_path).get("Kyoto")
    assert [quiz.answer_index for quiz in monster.quizzes] == [0, 2]
    assert monster.quizzes[0].hint is None
    assert monster.quizzes[1].hint == "Look east."


def test_non_list_quizzes_become_empty(tmp_path: Path) -> None:
    write_dataset(tmp_path, {"Kyoto": raw_monster(quizzes={"q": "?"})})
    monster = MonstersRepository(base_path=tmp_path).get("Kyoto")
    assert not monster.has_quizzes


def test_bundled_dataset_loads() -> None:
    repo = MonstersRepository()
    assert repo.region_ids()
    assert all(isinstance(monster.name, str) for monster in repo.all())

"""
Tests for level pack encoding, decoding and loading.
"""
import json
import logging

import pytest

from proofofwork.game import (
    AndIntro,
    Assumption,
    BoardState,
    BuildProofTree,
    ConnectNodes,
    ExistsIntro,
    ForallIntro,
    Goal,
    ImpliesIntro,
    Level,
    NotIntro,
    OrIntro,
    ProveFormula,
    Wire,
    validate_level,
)
from proofofwork.levels import (
    LevelPack,
    LevelPackDecodeError,
    LevelPackIOError,
    create_builtin_tutorial_pack,
    load_packs,
    piece_from_dict,
    piece_to_dict,
)
from proofofwork.verification import verify_level_solution


@pytest.fixture
def sample_pack():
    board = BoardState.with_pieces(6, 4, [
        Assumption(formula="P", position=(0, 0)),
        Goal(formula="R", position=(5, 3)),
        AndIntro(position=(1, 1)),
        OrIntro(position=(2, 1)),
        ImpliesIntro(position=(3, 1)),
        NotIntro(position=(4, 1)),
        ForallIntro(position=(1, 2), variable="x"),
        ExistsIntro(position=(2, 2), variable="y"),
        Wire(from_pos=(3, 2), to_pos=(4, 2)),
    ])
    pack = LevelPack(id="sample", name="Sample", author="tests", difficulty=3, tags=["t"])
    pack.add_level(Level(1, "One", "d", "(assert R)", board, ProveFormula("R")))
    pack.add_level(Level(2, "Two", "d", "", BoardState(3, 3), ConnectNodes((0, 0), (2, 2))))
    pack.add_level(Level(3, "Three", "d", "", BoardState(3, 3), BuildProofTree(2)))
    return pack


def test_piece_layout():
    assert piece_to_dict(Assumption(formula="P", position=(2, 5))) == {
        "Assumption": {"formula": "P", "position": [2, 5]}
    }
    assert piece_to_dict(AndIntro(position=(3, 4))) == {"AndIntro": {"position": [3, 4]}}
    assert piece_to_dict(Wire(from_pos=(0, 0), to_pos=(1, 0))) == {
        "Wire": {"from": [0, 0], "to": [1, 0]}
    }


def test_unknown_piece_kind():
    with pytest.raises(TypeError):
        piece_from_dict({"XorIntro": {"position": [0, 0]}})


def test_save_load_round_trip(tmp_path, sample_pack):
    path = tmp_path / "sample.json"
    sample_pack.save(path)

    loaded = LevelPack.load(path)
    assert loaded == sample_pack
    assert loaded.level_count() == 3


def test_save_writes_utf8(tmp_path):
    board = BoardState.with_pieces(4, 4, [
        Assumption(formula="P∧Q", position=(0, 0)),
        ForallIntro(position=(1, 1), variable="α"),
    ])
    pack = LevelPack(id="u", name="Unicode", levels=[Level(1, "L", "d", "", board, ProveFormula("R"))])
    path = tmp_path / "unicode.json"
    pack.save(path)

    assert "P∧Q" in path.read_bytes().decode("utf-8")
    assert LevelPack.load(path) == pack


def test_load_non_utf8_is_decode_error(tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b"\xff\xfe not utf-8")
    with pytest.raises(LevelPackDecodeError):
        LevelPack.load(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(LevelPackIOError):
        LevelPack.load(tmp_path / "absent.json")


@pytest.mark.parametrize("content", [
    "not json",
    json.dumps({"id": "x"}),
    json.dumps({"id": "x", "name": "n", "author": "a", "description": "d",
                "version": "1", "difficulty": 9, "tags": [], "levels": []}),
])
def test_load_malformed(tmp_path, content):
    path = tmp_path / "bad.json"
    path.write_text(content)
    with pytest.raises(LevelPackDecodeError):
        LevelPack.load(path)


def test_tutorial_pack():
    pack = create_builtin_tutorial_pack()
    level = pack.levels[0]

    assert pack.id == "tutorial"
    assert level.name == "First Steps"
    assert validate_level(level).is_valid
    # Unsolved until the player places an AND gate
    assert not verify_level_solution(level, level.initial_state.pieces, solver=None)
    pieces = level.initial_state.pieces + [AndIntro(position=(4, 4))]
    assert not verify_level_solution(level, pieces, solver=None)


def test_load_packs(tmp_path, sample_pack, caplog):
    sample_pack.save(tmp_path / "sample.json")
    (tmp_path / "broken.json").write_text("{")
    (tmp_path / "notes.txt").write_text("ignored")

    with caplog.at_level(logging.WARNING, logger="proofofwork.levels"):
        packs = load_packs(tmp_path)

    assert [p.id for p in packs] == ["tutorial", "sample"]
    assert "broken.json" in caplog.text


def test_load_packs_missing_dir(tmp_path):
    packs = load_packs(tmp_path / "nope")
    assert [p.id for p in packs] == ["tutorial"]

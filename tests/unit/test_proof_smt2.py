"""
Tests for SMT-LIBv2 script generation from boards.
"""
from proofofwork.game import AndIntro, Assumption, BoardState, Goal, OrIntro
from proofofwork.verification import (
    board_to_refutation_smt,
    board_to_smt,
    write_board_smt2,
    write_refutation_smt2,
)


def test_board_to_smt_single_assumption_and_goal():
    board = BoardState.with_pieces(10, 10, [
        Assumption(formula="P", position=(0, 0)),
        Goal(formula="Q", position=(5, 5)),
    ])

    smt = board_to_smt(board)
    lines = smt.splitlines()

    assert lines[0].startswith(";")
    assert lines[1] == "(set-logic QF_UF)"
    assert [l for l in lines if l.startswith("(declare-const")] == [
        "(declare-const P Bool)",
        "(declare-const Q Bool)",
    ]
    assert lines.count("(assert P)") == 1
    assert lines[-1] == "(check-sat)"


def test_board_to_smt_goal_not_asserted():
    board = BoardState.with_pieces(10, 10, [
        Assumption(formula="P", position=(0, 0)),
        Goal(formula="Q", position=(5, 5)),
    ])

    smt = board_to_smt(board)
    assert "(assert Q)" not in smt
    assert "(not Q)" not in smt


def test_board_to_smt_declares_once_in_first_seen_order():
    board = BoardState.with_pieces(10, 10, [
        Goal(formula="R", position=(9, 9)),
        Assumption(formula="Q", position=(0, 0)),
        Assumption(formula="P", position=(1, 0)),
        Assumption(formula="Q", position=(2, 0)),
        AndIntro(position=(3, 3)),
    ])

    smt = board_to_smt(board)
    decls = [l for l in smt.splitlines() if l.startswith("(declare-const")]
    asserts = [l for l in smt.splitlines() if l.startswith("(assert")]

    assert decls == ["(declare-const R Bool)", "(declare-const Q Bool)", "(declare-const P Bool)"]
    # One assert per assumption piece, duplicates included
    assert asserts == ["(assert Q)", "(assert P)", "(assert Q)"]


def test_refutation_script_for_wired_gate(solved_pieces):
    board = BoardState.with_pieces(10, 10, solved_pieces)

    smt = board_to_refutation_smt(board)
    lines = smt.splitlines()

    assert "(assert (=> (and P Q) R))" in lines
    assert "(assert (not R))" in lines
    assert lines.index("(assert (=> (and P Q) R))") < lines.index("(assert (not R))")
    assert lines[-1] == "(check-sat)"


def test_refutation_script_without_wiring(unsolved_pieces):
    board = BoardState.with_pieces(10, 10, unsolved_pieces)

    smt = board_to_refutation_smt(board)
    assert "=>" not in smt
    assert "(assert (not R))" in smt


def test_refutation_script_ignores_other_gates():
    board = BoardState.with_pieces(10, 10, [
        Assumption(formula="P", position=(2, 5)),
        Assumption(formula="Q", position=(2, 3)),
        Goal(formula="R", position=(5, 4)),
        OrIntro(position=(3, 4)),
    ])
    assert "=>" not in board_to_refutation_smt(board)


def test_refutation_script_without_wiring_negates_first_goal():
    board = BoardState.with_pieces(10, 10, [
        Assumption(formula="P", position=(0, 0)),
        Goal(formula="R", position=(5, 5)),
        Goal(formula="S", position=(7, 7)),
    ])
    script = board_to_refutation_smt(board)

    assert "(assert (not R))" in script
    assert "(assert (not S))" not in script


def test_refutation_script_negates_only_wired_goals(solved_pieces):
    board = BoardState.with_pieces(10, 10, solved_pieces)
    board.place_piece(Goal(formula="S", position=(9, 9)))
    script = board_to_refutation_smt(board)

    assert "(assert (not R))" in script
    assert "S))" not in script
    assert "(declare-const S Bool)" in script


def test_write_scripts(tmp_path, solved_pieces):
    board = BoardState.with_pieces(10, 10, solved_pieces)

    proof_path = write_board_smt2(board, tmp_path / "proof.smt2")
    query_path = write_refutation_smt2(board, tmp_path / "query.smt2")

    assert proof_path.read_text() == board_to_smt(board)
    assert query_path.read_text() == board_to_refutation_smt(board)

"""
Pytest configuration and fixtures for proofofwork tests.
"""
import sys
from pathlib import Path

import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from proofofwork.game import (  # noqa: E402
    AndIntro,
    Assumption,
    BoardState,
    Goal,
    Level,
    ProveFormula,
)


@pytest.fixture
def first_steps_board():
    """P and Q on the left, R far right, AND gate in the middle."""
    return BoardState.with_pieces(10, 10, [
        Assumption(formula="P", position=(2, 5)),
        Assumption(formula="Q", position=(2, 3)),
        Goal(formula="R", position=(8, 4)),
        AndIntro(position=(5, 4)),
    ])


@pytest.fixture
def first_steps_level():
    return Level(
        id=1,
        name="Test",
        description="Test level",
        theorem="(assert (=> (and P Q) R))",
        initial_state=BoardState(10, 10),
        goal_state=ProveFormula(formula="R"),
    )


@pytest.fixture
def unsolved_pieces():
    """AND gate touches P and Q but not R at (8, 4)."""
    return [
        Assumption(formula="P", position=(2, 5)),
        Assumption(formula="Q", position=(2, 3)),
        Goal(formula="R", position=(8, 4)),
        AndIntro(position=(4, 4)),
    ]


@pytest.fixture
def solved_pieces():
    """AND gate at (3, 4) is adjacent to P (2, 5), Q (2, 3) and R (5, 4)."""
    return [
        Assumption(formula="P", position=(2, 5)),
        Assumption(formula="Q", position=(2, 3)),
        Goal(formula="R", position=(5, 4)),
        AndIntro(position=(3, 4)),
    ]

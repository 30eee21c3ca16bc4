"""Locate and invoke SMT solver executables on proof scripts.

The solver named by $PROOFOFWORK_SMT_SOLVER wins when it is runnable;
otherwise the first installed solver from a preference list is used. A run
yields the solver's first verdict line. Output without a verdict (syntax
errors, crashes) reads as UNKNOWN, which callers treat as not proven.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple
import logging
import os
import shutil
import subprocess
import time

from ..solver.result import SolverResult

logger = logging.getLogger(__name__)

SOLVER_ENV_VAR = "PROOFOFWORK_SMT_SOLVER"
DEFAULT_PREFERENCE: Tuple[str, ...] = ("z3", "cvc5", "yices-smt2")

_VERDICTS: Dict[str, SolverResult] = {r.value: r for r in SolverResult}


@dataclass(frozen=True)
class SolverSpec:
    """Command line prefix for one SMT solver; the script path is appended."""

    name: str
    argv: Tuple[str, ...]

    @property
    def executable(self) -> str:
        return self.argv[0]


@dataclass(frozen=True)
class SolverRunResult:
    result: SolverResult
    stdout: str
    stderr: str
    returncode: int
    time_ms: float


_KNOWN_SOLVERS: Dict[str, SolverSpec] = {
    spec.name: spec
    for spec in (
        SolverSpec("z3", ("z3", "-smt2")),
        SolverSpec("cvc5", ("cvc5", "--lang", "smt2")),
        SolverSpec("yices", ("yices-smt2",)),
        SolverSpec("yices-smt2", ("yices-smt2",)),
    )
}


def resolve_solver(name_or_path: str) -> SolverSpec:
    """Known solver name, or an executable path run with no extra flags."""
    known = _KNOWN_SOLVERS.get(name_or_path)
    if known is not None:
        return known
    p = Path(name_or_path)
    return SolverSpec(p.name or name_or_path, (name_or_path,))


def is_solver_available(name_or_path: str) -> bool:
    # shutil.which checks a path with a separator directly instead of PATH
    return shutil.which(resolve_solver(name_or_path).executable) is not None


def available_solvers(candidates: Sequence[str] = tuple(_KNOWN_SOLVERS)) -> List[str]:
    return [n for n in candidates if is_solver_available(n)]


def pick_solver(preferred: Sequence[str] = DEFAULT_PREFERENCE) -> Optional[SolverSpec]:
    """Solver from $PROOFOFWORK_SMT_SOLVER, else the first installed preference."""
    override = os.environ.get(SOLVER_ENV_VAR)
    if override:
        if is_solver_available(override):
            return resolve_solver(override)
        logger.warning("%s=%s is not runnable, trying defaults", SOLVER_ENV_VAR, override)

    installed = available_solvers(preferred)
    return resolve_solver(installed[0]) if installed else None


def parse_solver_result(stdout: str) -> SolverResult:
    """First sat/unsat/unknown line of solver output; comments are skipped."""
    for line in stdout.splitlines():
        s = line.strip()
        if not s or s.startswith(";"):
            continue
        if s in _VERDICTS:
            return _VERDICTS[s]
    return SolverResult.UNKNOWN


def run_solver(
    solver: SolverSpec,
    smt2_file: str | Path,
    *,
    timeout_s: Optional[float] = None,
    extra_args: Sequence[str] = (),
) -> SolverRunResult:
    """Run `solver` on a script file and collect its verdict.

    Raises:
        subprocess.TimeoutExpired: if `timeout_s` elapses
        OSError: if the solver cannot be started
    """
    argv = [*solver.argv, *extra_args, str(smt2_file)]
    logger.debug("Running %s", " ".join(argv))

    start = time.perf_counter()
    proc = subprocess.run(argv, capture_output=True, text=True, timeout=timeout_s)
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    verdict = parse_solver_result(proc.stdout)
    if verdict == SolverResult.UNKNOWN and proc.returncode != 0:
        logger.warning("%s exited with %d and no verdict: %s",
                       solver.name, proc.returncode, (proc.stderr or proc.stdout).strip())

    return SolverRunResult(
        result=verdict,
        stdout=proc.stdout,
        stderr=proc.stderr,
        returncode=proc.returncode,
        time_ms=elapsed_ms,
    )

import pytest
from packages.codesets import all_secrets, sample_secrets
from packages.engine import (
    Alphabet,
    FrequencyInconsistencyError,
    LENGTH_MISMATCH,
    LengthExceededError,
    OracleClient,
    SecretOracle,
    Status,
)
from packages.harness import run_case
from packages.solvers import create_solver, get_solver_ids
from packages.solvers.frequency_refine import worst_case_queries


def test_registry():
    assert "frequency_refine" in get_solver_ids()
    with pytest.raises(ValueError):
        create_solver("nope")

def test_abc_scenario():
    solver = create_solver("frequency_refine")
    r = run_case(solver, "ABC")
    assert r["success"] is True
    assert r["discovered"] == "ABC"
    assert r["queries"] == 11
    assert r["queries"] <= worst_case_queries(3, 6)
    assert r["history"][-1] == ("ABC", 3)

@pytest.mark.parametrize("length", [1, 2, 3, 4])
def test_every_short_secret(length):
    solver = create_solver("frequency_refine")
    bound = worst_case_queries(length, 6)
    for secret in all_secrets(length):
        r = run_case(solver, secret)
        assert r["success"] is True, secret
        assert r["queries"] <= bound, secret

def test_sampled_long_secrets():
    solver = create_solver("frequency_refine")
    for secret in sample_secrets(200, min_length=5, max_length=18, seed=7):
        r = run_case(solver, secret)
        assert r["discovered"] == secret
        assert r["queries"] <= worst_case_queries(len(secret), 6)

@pytest.mark.parametrize("secret,queries", [
    ("BBBB", 4),     # found during length detection
    ("AAA", 4),      # N + 1: second symbol's uniform probe
    ("UUU", 3 + 5),  # last symbol in the survey
])
def test_single_symbol_secret_skips_refinement(secret, queries):
    r = run_case(create_solver("frequency_refine"), secret)
    assert r["success"] is True
    assert r["queries"] == queries
    assert all(len(set(g)) == 1 for g, _ in r["history"])

def test_custom_alphabet():
    alphabet = Alphabet("01")
    r = run_case(create_solver("frequency_refine"), "0110100", alphabet=alphabet, max_length=8)
    assert r["discovered"] == "0110100"
    assert r["queries"] <= worst_case_queries(7, 2)

def test_length_exceeded_aborts():
    solver = create_solver("frequency_refine")
    solver.reset(max_length=3)
    client = OracleClient(SecretOracle("ABCAB"))
    outcome = solver.discover(client)
    assert outcome.status is Status.ABORTED
    assert isinstance(outcome.error, LengthExceededError)
    assert client.queries == 3

def test_inconsistent_frequencies_abort():
    solver = create_solver("frequency_refine")
    solver.reset()
    client = OracleClient(lambda g: LENGTH_MISMATCH if len(g) != 2 else 1)
    outcome = solver.discover(client)
    assert outcome.status is Status.ABORTED
    assert outcome.secret is None
    with pytest.raises(FrequencyInconsistencyError):
        outcome.raise_for_status()

def test_impossible_detection_count_aborts_instead_of_found():
    replies = {"BB": 3, "AA": -1}
    solver = create_solver("frequency_refine")
    solver.reset()
    client = OracleClient(lambda g: LENGTH_MISMATCH if len(g) != 2 else replies.get(g, 0))
    outcome = solver.discover(client)
    assert outcome.status is Status.ABORTED
    assert outcome.secret is None
    assert isinstance(outcome.error, FrequencyInconsistencyError)

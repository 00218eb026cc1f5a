import pytest
from packages.engine import (
    DEFAULT_ALPHABET,
    FrequencyInconsistencyError,
    LENGTH_MISMATCH,
    LengthExceededError,
    OracleClient,
    SecretOracle,
    Status,
)
from packages.solvers.detect import detect_length, survey_frequencies
from packages.solvers.candidate import build_candidate, order_by_counts


def _client(secret):
    return OracleClient(SecretOracle(secret))


def test_detect_length_reads_n_and_first_count():
    client = _client("ABC")
    reading = detect_length(client, DEFAULT_ALPHABET, 18)
    assert (reading.length, reading.count) == (3, 1)
    assert reading.outcome.status is Status.CONTINUE
    assert [r for _, r in client.history] == [LENGTH_MISMATCH, LENGTH_MISMATCH, 1]

def test_detect_length_finds_uniform_first_symbol():
    client = _client("BBBB")
    reading = detect_length(client, DEFAULT_ALPHABET, 18)
    assert reading.outcome.status is Status.FOUND
    assert reading.outcome.secret == "BBBB"
    assert client.queries == 4

def test_detect_length_exceeds_maximum():
    client = _client("ABCAB")
    with pytest.raises(LengthExceededError):
        detect_length(client, DEFAULT_ALPHABET, 4)
    assert client.queries == 4

def test_survey_sums_to_length():
    client = _client("ABC")
    reading = detect_length(client, DEFAULT_ALPHABET, 18)
    survey = survey_frequencies(client, DEFAULT_ALPHABET, reading.length, reading.count)
    assert survey.outcome.status is Status.CONTINUE
    assert survey.counts == {"B": 1, "A": 1, "C": 1, "X": 0, "I": 0, "U": 0}
    assert sum(survey.counts.values()) == 3
    assert client.queries == 3 + 5

@pytest.mark.parametrize("secret", ["UXUXIIAB", "CCCCCCCCCCCCCCCCCA", "IB"])
def test_survey_matches_true_frequencies(secret):
    client = _client(secret)
    reading = detect_length(client, DEFAULT_ALPHABET, 18)
    survey = survey_frequencies(client, DEFAULT_ALPHABET, reading.length, reading.count)
    assert survey.counts == {s: secret.count(s) for s in DEFAULT_ALPHABET}

def test_survey_stops_on_uniform_secret():
    client = _client("AAA")
    reading = detect_length(client, DEFAULT_ALPHABET, 18)
    survey = survey_frequencies(client, DEFAULT_ALPHABET, reading.length, reading.count)
    assert survey.outcome.secret == "AAA"
    assert client.queries == 3 + 1

def test_survey_flags_inconsistent_oracle():
    # every full-length probe claims one match: six symbols, N=3
    client = OracleClient(lambda g: LENGTH_MISMATCH if len(g) != 3 else 1)
    reading = detect_length(client, DEFAULT_ALPHABET, 18)
    with pytest.raises(FrequencyInconsistencyError) as exc:
        survey_frequencies(client, DEFAULT_ALPHABET, reading.length, reading.count)
    assert exc.value.length == 3
    assert sum(exc.value.counts.values()) == 6

def test_order_by_counts_is_stable():
    assert order_by_counts({"B": 1, "A": 3, "C": 2}, DEFAULT_ALPHABET) == ["A", "C", "B", "X", "I", "U"]
    assert order_by_counts({"B": 1, "A": 1, "C": 1}, DEFAULT_ALPHABET) == ["B", "A", "C", "X", "I", "U"]
    assert order_by_counts({"U": 2, "X": 2}, DEFAULT_ALPHABET) == ["X", "U", "B", "A", "C", "I"]

def test_build_candidate_blocks():
    assert "".join(build_candidate({"A": 3, "B": 1, "C": 2}, DEFAULT_ALPHABET, 6)) == "AAACCB"
    assert "".join(build_candidate({"B": 1, "A": 1, "C": 1}, DEFAULT_ALPHABET, 3)) == "BAC"

def test_build_candidate_pads_with_first_symbol():
    assert build_candidate({"C": 1}, DEFAULT_ALPHABET, 3) == ["C", "B", "B"]

def test_detect_length_rejects_count_above_probe_length():
    # "BB" scored 3 at length 2
    client = OracleClient(lambda g: LENGTH_MISMATCH if len(g) != 2 else (3 if g == "BB" else 0))
    with pytest.raises(FrequencyInconsistencyError) as exc:
        detect_length(client, DEFAULT_ALPHABET, 18)
    assert exc.value.length == 2
    assert client.queries == 2

def test_survey_rejects_out_of_range_counts_that_cancel_out():
    # B=1, A=4, C=-2 sums to N=3 but A and C are impossible counts
    replies = {"AAA": 4, "CCC": -2}
    client = OracleClient(lambda g: replies.get(g, 0))
    with pytest.raises(FrequencyInconsistencyError) as exc:
        survey_frequencies(client, DEFAULT_ALPHABET, 3, 1)
    assert sum(exc.value.counts.values()) == 3
    assert "outside 0..3" in str(exc.value)

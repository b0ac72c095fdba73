import random

import pytest
from game.ruleset import Ruleset
from game.secret_code import Code, generate_solution


def test_no_duplicates_regular():
    rules = Ruleset.for_variant(True, False, False)
    rng = random.Random(7)
    for _ in range(200):
        seq = generate_solution(rules, rng=rng)
        assert len(seq) == 4
        assert len(set(seq)) == 4
        assert all(1 <= s <= 6 for s in seq)


def test_blanks_within_range():
    rules = Ruleset.for_variant(False, True, True)
    rng = random.Random(3)
    seen = set()
    for _ in range(300):
        seq = generate_solution(rules, rng=rng)
        assert len(seq) == 5
        seen.update(seq)
    assert seen == set(range(0, 9))


def test_without_blanks_never_zero():
    rules = Ruleset.for_variant(True, False, True)
    rng = random.Random(11)
    for _ in range(200):
        assert 0 not in generate_solution(rules, rng=rng)


def test_tight_config_terminates():
    rules = Ruleset("tight", code_length=4, num_colors=4, allow_duplicates=False)
    seq = generate_solution(rules, rng=random.Random(0))
    assert sorted(seq) == [1, 2, 3, 4]


def test_seed_is_reproducible():
    rules = Ruleset.for_variant(False, False, True)
    assert generate_solution(rules, random.Random(42)) == generate_solution(rules, random.Random(42))


def test_validate_rejects_duplicates():
    rules = Ruleset.for_variant(True, False, False)
    with pytest.raises(ValueError, match="Duplicates"):
        Code([1, 1, 2, 3], rules=rules)
    assert Code([1, 2, 3, 4], rules=rules).is_valid


def test_compare_with_list():
    code = Code([1, 1, 2, 2])
    assert code.compare_with([1, 2, 1, 2]) == (2, 2)
    assert code == [1, 1, 2, 2]
    assert str(code) == "[1, 1, 2, 2]"

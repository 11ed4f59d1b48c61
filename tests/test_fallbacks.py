import random

from fallbacks import (
    CONSTRUCTIVE_FEEDBACK,
    FALLBACK_PROBLEMS,
    POSITIVE_FEEDBACK,
    pick_fallback_feedback,
    pick_fallback_problem,
)


def test_fallback_pool_shape():
    assert len(FALLBACK_PROBLEMS) == 5
    assert {p["correct_answer"] for p in FALLBACK_PROBLEMS} == {10.6, 7.67, 3.75, 16, 15}
    for p in FALLBACK_PROBLEMS:
        assert p["problem_text"].strip()
        assert p["correct_answer"] > 0


def test_pick_fallback_problem_uses_rng(rng):
    rng.index = 3
    p = pick_fallback_problem(rng)
    assert p["correct_answer"] == 16
    assert "40 students" in p["problem_text"]


def test_pick_fallback_problem_returns_copy(rng):
    p = pick_fallback_problem(rng)
    p["correct_answer"] = -1
    assert FALLBACK_PROBLEMS[0]["correct_answer"] == 10.6


def test_pick_fallback_problem_with_real_random():
    p = pick_fallback_problem(random.Random(7))
    assert p in FALLBACK_PROBLEMS


def test_positive_feedback(rng):
    rng.index = 2
    assert pick_fallback_feedback(rng, True, 10.6) == POSITIVE_FEEDBACK[2]


def test_constructive_feedback_mentions_clean_answer(rng):
    rng.index = 1
    msg = pick_fallback_feedback(rng, False, 16.0)
    assert msg == CONSTRUCTIVE_FEEDBACK[1].format(answer="16")
    assert "16.0" not in msg


def test_every_constructive_template_mentions_answer():
    for i in range(len(CONSTRUCTIVE_FEEDBACK)):
        class _Pick:
            def choice(self, seq, _i=i):
                return seq[_i]

        assert "7.67" in pick_fallback_feedback(_Pick(), False, 7.67)

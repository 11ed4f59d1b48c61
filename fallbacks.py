# Canned content used whenever the text generator errors or returns something unusable.

from __future__ import annotations

from typing import Any, Dict, List, Protocol, Sequence, TypeVar

from grading import num_to_clean_str

T = TypeVar("T")


class RandomSource(Protocol):
    def choice(self, seq: Sequence[T]) -> T: ...


FALLBACK_PROBLEMS: List[Dict[str, Any]] = [
    {
        "problem_text": (
            "At a hawker centre, a plate of chicken rice costs $3.50 and a cup of tea costs "
            "$1.20. If Sarah buys 2 plates of chicken rice and 3 cups of tea, how much does "
            "she pay in total?"
        ),
        "correct_answer": 10.6,
    },
    {
        "problem_text": (
            "The MRT train from Jurong East to Raffles Place takes 25 minutes. If the train "
            "leaves at 7:15 AM, at what time will it arrive at Raffles Place? Express your "
            "answer in hours and minutes as a decimal (e.g., 7.75 for 7:45 AM)."
        ),
        "correct_answer": 7.67,
    },
    {
        "problem_text": (
            "A recipe requires 3/4 cup of sugar. If Mei Ling wants to make 5 batches of the "
            "recipe, how many cups of sugar does she need?"
        ),
        "correct_answer": 3.75,
    },
    {
        "problem_text": (
            "In a class of 40 students, 60% are girls. How many boys are there in the class?"
        ),
        "correct_answer": 16,
    },
    {
        "problem_text": (
            "The ratio of red marbles to blue marbles in a bag is 3:5. If there are 24 blue "
            "marbles, how many red marbles are there?"
        ),
        "correct_answer": 15,
    },
]

POSITIVE_FEEDBACK: List[str] = [
    "Well done! You've applied the Singapore math concepts correctly.",
    "Excellent work! Your understanding of the problem shows good mathematical thinking.",
    "Very good! You've solved this Primary 5 problem perfectly.",
    "Great job! Your answer shows you understand the mathematical concept well.",
]

# {answer} is filled with the stored correct answer
CONSTRUCTIVE_FEEDBACK: List[str] = [
    "Good try! The correct answer is {answer}. Remember to read the problem carefully and "
    "identify the key information.",
    "Not quite right. The answer is {answer}. Think about the Singapore math concepts we've "
    "learned for this type of problem.",
    "Good effort! The correct answer is {answer}. Try using the bar model method to "
    "visualize the problem.",
    "You're on the right track! The answer is {answer}. Check if you've applied the correct "
    "mathematical operation.",
]


def pick_fallback_problem(rng: RandomSource) -> Dict[str, Any]:
    # copy so callers can't mutate the pool
    return dict(rng.choice(FALLBACK_PROBLEMS))


def pick_fallback_feedback(rng: RandomSource, is_correct: bool, correct_answer: float) -> str:
    if is_correct:
        return rng.choice(POSITIVE_FEEDBACK)
    template = rng.choice(CONSTRUCTIVE_FEEDBACK)
    return template.format(answer=num_to_clean_str(correct_answer))

from __future__ import annotations

# Generation parameters: low temperature for the problem (needs parseable JSON),
# higher for feedback (tone variety).
PROBLEM_TEMPERATURE = 0.3
PROBLEM_MAX_OUTPUT_TOKENS = 500
FEEDBACK_TEMPERATURE = 0.7
FEEDBACK_MAX_OUTPUT_TOKENS = 300

PROBLEM_PROMPT = """You are a Singapore-primary-math word-problem generator.

Rules
- Level: Primary 5 (11-year-olds)
- Syllabus: 2021 Singapore MOE
- Topic band: Number & Algebra -> Fractions, Decimals, Percentage, Ratio, Rate
- Numbers: friendly integers / decimals <= 2 dp, denominators <= 12
- Context: local (hawker centre, MRT, PSLE-style)
- Language: concise, single sentence, no ambiguity
- Cognitive demand: routine, 1- or 2-step solution
- Include unit inside sentence; answer field = numeric only
- Do NOT expose calculation steps inside problem string
- Ensure answer is unique and positive

Return ONLY a JSON object with the following keys:
{
  "problem_text": "the math word problem here",
  "correct_answer": 123.45
}
"""

_FEEDBACK_TEMPLATE = """You are a Singapore Primary 5 math tutor. Provide personalized feedback for this problem.

Problem: "{problem_text}"
Student's answer: {user_answer}
Correct answer: {correct_answer}
The student's answer is {verdict}.

Provide brief, encouraging feedback in Singapore teaching style:
- If correct: Praise specifically what they did well
- If incorrect: Give a gentle hint about the Singapore math concept involved
- Focus on building confidence and mathematical thinking
- Keep it to 2-3 sentences maximum
- Use encouraging language suitable for 11-year-olds
"""


def build_feedback_prompt(
    problem_text: str, user_answer: str, correct_answer: str, is_correct: bool
) -> str:
    """Answers are passed pre-formatted so 16 reads as "16", not "16.0"."""
    return _FEEDBACK_TEMPLATE.format(
        problem_text=problem_text,
        user_answer=user_answer,
        correct_answer=correct_answer,
        verdict="correct" if is_correct else "incorrect",
    )

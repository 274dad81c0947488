"""Assessment rules shared across the session engine and the UI."""

SESSION_DURATION_SECONDS: int = 600
QUESTION_COUNT: int = 10
OPTIONS_PER_QUESTION: int = 4
PASS_THRESHOLD: int = 7
TICK_INTERVAL_MS: int = 1000
TIME_WARNING_SECONDS: int = 120

GENERATION_MAX_ATTEMPTS: int = 3
GENERATION_RETRY_DELAY_SECONDS: float = 1.5
GENERATION_MAX_TOKENS: int = 4096

GENERATION_PROMPT: str = (
    f"Generate {QUESTION_COUNT} challenging multiple-choice questions based on the "
    "International Regulations for Preventing Collisions at Sea (COLREGs).\n"
    "Focus on practical scenarios involving lights, shapes, sound signals, and "
    "steering/sailing rules between vessels.\n"
    f"Each question must have exactly {OPTIONS_PER_QUESTION} options, with only 1 correct answer.\n"
    "Provide a brief explanation for the correct answer citing the relevant Rule if possible.\n\n"
    "Reply with ONLY a JSON array and nothing else. Each element must look like:\n"
    '{"question": "...", "options": ["...", "...", "...", "..."], '
    '"correctAnswerIndex": 0, "explanation": "..."}\n'
    "correctAnswerIndex is the zero-based index of the correct option (0, 1, 2, or 3)."
)

GENERATION_FAILED_MESSAGE: str = (
    "Failed to generate quiz. Please try again or check your connection."
)
PROFILE_INCOMPLETE_MESSAGE: str = "Please fill in all fields."

"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Trivia Quiz"
TIMER_INTERVAL_MS: int = 1000

HOME_HEADLINE: str = "Test Your Knowledge"
HOME_SUBTITLE: str = "Choose your difficulty level and dive into questions across multiple categories."
HOME_START_BUTTON: str = "Start Quiz"
HOME_NO_BEST_SCORE: str = "No best score yet"
HOME_BEST_SCORE_TEMPLATE: str = "Best: {percentage}%"

QUIZ_PROGRESS_TEMPLATE: str = "Question {number} of {total}"
QUIZ_TIMER_TEMPLATE: str = "{seconds}s"
QUIZ_PREVIOUS_BUTTON: str = "Previous"
QUIZ_SUBMIT_BUTTON: str = "Submit Answer"
QUIZ_FINISH_BUTTON: str = "Finish Quiz"
QUIZ_EXIT_BUTTON: str = "Exit Quiz"

RESULTS_TITLE: str = "Quiz Complete!"
RESULTS_NEW_HIGH_SCORE: str = "New High Score!"
RESULTS_SCORE_TEMPLATE: str = "{score}/{total}"
RESULTS_PERCENTAGE_TEMPLATE: str = "{percentage}% Correct"
RESULTS_DIFFICULTY_TEMPLATE: str = "{difficulty} DIFFICULTY"
RESULTS_RETAKE_BUTTON: str = "Retake Quiz"
RESULTS_HOME_BUTTON: str = "Back to Home"
RESULTS_EMPTY_MESSAGE: str = "No quiz results found."

NO_QUESTIONS_TITLE: str = "No questions"
NO_QUESTIONS_MESSAGE: str = (
    "Failed to load questions. Check your connection and pick a difficulty to try again."
)

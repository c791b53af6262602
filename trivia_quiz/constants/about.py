"""Static metadata describing Trivia Quiz."""

APP_NAME = "Trivia Quiz"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Trivia Quiz is a timed multiple-choice quiz built with Qt and FastAPI. "
    "Pick a difficulty, answer ten questions against the clock, and try to beat "
    "your best score. Questions are provided by the Open Trivia Database."
)

HELP_TEXT = (
    "Each question has a 30 second timer. When it runs out, your current choice "
    "(or no answer) is submitted automatically.\n\n"
    "Keyboard shortcuts:\n"
    "1-4: select an option\n"
    "Enter: submit the selected option\n"
    "Left arrow: go back to the previous question"
)

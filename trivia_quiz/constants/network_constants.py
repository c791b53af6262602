"""Network configuration constants for the quiz application."""

import os

DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 8000

TRIVIA_API_URL: str = os.environ.get("TRIVIA_QUIZ_API_URL", "https://opentdb.com/api.php")
FETCH_TIMEOUT_SECONDS: float = 10.0

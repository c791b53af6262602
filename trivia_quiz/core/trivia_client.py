"""HTTP client for the Open Trivia Database question provider.

API reference: ``GET https://opentdb.com/api.php?amount=10&difficulty=easy&type=multiple``
returns::

    {
      "response_code": 0,
      "results": [
        {
          "category": "Science &amp; Nature",
          "type": "multiple",
          "difficulty": "easy",
          "question": "What is the chemical symbol for gold?",
          "correct_answer": "Au",
          "incorrect_answers": ["Ag", "Gd", "Go"]
        }
      ]
    }

Text fields are HTML-entity encoded. The client decodes them and places the
correct answer at a random position among the options; validation of the
resulting records is left to the question loader.
"""

from __future__ import annotations

import html
import logging
import random

import httpx

from trivia_quiz.constants.network_constants import FETCH_TIMEOUT_SECONDS, TRIVIA_API_URL
from trivia_quiz.core.models import Difficulty

logger = logging.getLogger(__name__)

_RESPONSE_CODE_MESSAGES = {
    1: "Not enough questions available for this query.",
    2: "Invalid parameter sent to the trivia API.",
    3: "Session token not found.",
    4: "Session token has returned all possible questions.",
    5: "Rate limit exceeded.",
}


class TriviaApiError(Exception):
    """Raised when the trivia API returns an unusable response."""


class OpenTriviaClient:
    """Fetches raw multiple-choice records from the Open Trivia Database."""

    def __init__(
        self,
        base_url: str = TRIVIA_API_URL,
        *,
        timeout: float = FETCH_TIMEOUT_SECONDS,
        http_client: httpx.Client | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._http_client = http_client
        self._rng = rng or random.Random()

    def fetch_questions(self, difficulty: Difficulty, count: int) -> list[dict[str, object]]:
        params = {"amount": count, "difficulty": difficulty.value, "type": "multiple"}
        logger.info("Fetching %d %s questions from %s", count, difficulty.value, self._base_url)
        payload = self._get_json(params)

        response_code = payload.get("response_code")
        if response_code != 0:
            message = _RESPONSE_CODE_MESSAGES.get(response_code, f"Unexpected response code {response_code!r}.")
            raise TriviaApiError(message)

        results = payload.get("results")
        if not isinstance(results, list):
            raise TriviaApiError("Trivia API response is missing the results list.")
        return [self._normalize_record(item, difficulty) for item in results if isinstance(item, dict)]

    def _get_json(self, params: dict[str, object]) -> dict:
        try:
            if self._http_client is not None:
                response = self._http_client.get(self._base_url, params=params, timeout=self._timeout)
            else:
                with httpx.Client(timeout=self._timeout, follow_redirects=True) as client:
                    response = client.get(self._base_url, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as exc:
            raise TriviaApiError(f"Trivia API request failed: {exc}") from exc
        except ValueError as exc:
            raise TriviaApiError("Trivia API returned malformed JSON.") from exc
        if not isinstance(payload, dict):
            raise TriviaApiError("Trivia API returned an unexpected payload.")
        return payload

    def _normalize_record(self, item: dict, difficulty: Difficulty) -> dict[str, object]:
        correct = _decode(item.get("correct_answer", ""))
        incorrect = [_decode(answer) for answer in item.get("incorrect_answers") or []]
        insert_at = self._rng.randint(0, len(incorrect))
        options = incorrect[:insert_at] + [correct] + incorrect[insert_at:]
        return {
            "text": _decode(item.get("question", "")),
            "options": options,
            "correct_option_index": insert_at,
            "category": _decode(item.get("category", "")),
            "difficulty": item.get("difficulty") or difficulty.value,
        }


def _decode(value: object) -> str:
    return html.unescape(str(value))

from typing import Callable, Optional, Sequence

from errors import InvalidOperatorInput
from models.location import Candidate

YES_ANSWERS = frozenset(["y", "yes"])


class Console:
    """
    Line-oriented prompt/read primitives for the interactive shell.

    input_fn / output_fn default to the builtins and are swapped out in tests.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self._input = input_fn
        self._output = output_fn

    def show(self, line: str = "") -> None:
        self._output(line)

    def _read(self, prompt: str) -> str:
        return self._input(f"{prompt}: ").strip()

    @staticmethod
    def _require_text(raw: str) -> str:
        if not raw:
            raise InvalidOperatorInput("Input must not be empty.")
        return raw

    @staticmethod
    def _require_int(raw: str) -> int:
        try:
            return int(raw)
        except ValueError:
            raise InvalidOperatorInput("Invalid input. Please enter a number.") from None

    def read_text(self, prompt: str) -> str:
        while True:
            try:
                return self._require_text(self._read(prompt))
            except InvalidOperatorInput as e:
                self.show(str(e))

    def read_int(self, prompt: str) -> int:
        while True:
            try:
                return self._require_int(self._read(prompt))
            except InvalidOperatorInput as e:
                self.show(str(e))

    def confirm(self, prompt: str) -> bool:
        return self._read(f"{prompt} (y/n)").lower() in YES_ANSWERS

    def show_candidates(self, candidates: Sequence[Candidate]) -> None:
        for i, candidate in enumerate(candidates, start=1):
            self.show(f"{i}. {candidate.description}")

    def show_lines(self, lines: Sequence[str], title: Optional[str] = None) -> None:
        if title:
            self.show(f"\n{title}")
        for line in lines:
            self.show(line)

"""
This module contains the IOInterface abstract base class and its implementations.

Adapters talk to a person through an IOInterface so that the console, a test
script, and a transcript file are interchangeable.
"""

from abc import ABC, abstractmethod
from typing import List

import aiofiles

MAX_ATTEMPTS = 3


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines the interface for input/output operations in the game.
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""
        pass

    @abstractmethod
    def input(self, prompt: str) -> str:
        """Get input from the user with a prompt."""
        pass

    def check_numeric_response(self, ctx: str) -> int:
        """
        Prompt until the response is an integer.

        Raises:
            ValueError: After three responses that are not numbers
        """
        for _ in range(MAX_ATTEMPTS):
            response = self.input(ctx)
            try:
                return int(response)
            except ValueError:
                self.output("Invalid response, please enter a number.")
        raise ValueError("Too many invalid responses. Operation aborted.")


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface for interactive gameplay.
    """

    def output(self, message: str) -> None:
        print(message)

    def input(self, prompt: str) -> str:
        return input(prompt)


class TestIOInterface(IOInterface):
    """
    A test IO interface for testing purposes. Collects output messages and
    answers prompts from a queue.
    """

    __test__ = False

    def __init__(self, responses: List[str] = None):
        self.sent_messages = []
        self.prompts = []
        self.input_responses = list(responses or [])

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.input_responses:
            return self.input_responses.pop(0)
        raise EOFError("No more responses left in TestIOInterface queue.")

    def add_response(self, response: str) -> None:
        """Queue an answer for the next prompt."""
        self.input_responses.append(response)


class LoggingIOInterface(IOInterface):
    """
    Writes a transcript of the session to a file while passing everything
    through to another interface.
    """

    def __init__(self, log_file_path: str, inner: IOInterface = None):
        self.log_file_path = log_file_path
        self.inner = inner or ConsoleIOInterface()

    def output(self, message: str) -> None:
        """Write an output message to the transcript and the inner interface."""
        self.inner.output(message)
        with open(self.log_file_path, "a", encoding="utf-8") as log_file:
            log_file.write(message + "\n")

    def input(self, prompt: str) -> str:
        """Ask the inner interface and record both prompt and answer."""
        response = self.inner.input(prompt)
        with open(self.log_file_path, "a", encoding="utf-8") as log_file:
            log_file.write(f"{prompt}{response}\n")
        return response

    async def output_async(self, message: str) -> None:
        """Async version of output for use from the event loop."""
        self.inner.output(message)
        async with aiofiles.open(
            self.log_file_path, mode="a", encoding="utf-8"
        ) as log_file:
            await log_file.write(message + "\n")

"""Interactive text menu driving the weather console."""
import logging
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, TextIO

from presenters import show_current, show_forecast
from weather_provider import WeatherProviderError
from weather_service import WeatherService

MENU_TITLE = "=== Weather Information System ==="
MENU_OPTIONS = (
    "1. Check current weather",
    "2. View weather forecast",
    "3. Change city",
    "4. Exit",
)
CHOICE_PROMPT = "Please enter your choice (1-4): "
INITIAL_CITY_PROMPT = "Enter city name: "
RETRY_CITY_PROMPT = "Please enter a valid city name: "
NEW_CITY_PROMPT = "Enter new city name: "
INVALID_CHOICE_MESSAGE = "Invalid choice. Please try again."
FAREWELL_MESSAGE = "Thank you for using Weather Information System. Goodbye!"


def read_line(stream: Optional[TextIO] = None) -> str:
    """
    Read one line of user input with surrounding whitespace removed.

    Raises:
        EOFError: If the input stream is exhausted
    """
    stream = stream or sys.stdin
    line = stream.readline()
    if not line:
        raise EOFError("end of input")
    return line.strip()


class MenuAction(Enum):
    SHOW_CURRENT = "1"
    SHOW_FORECAST = "2"
    CHANGE_CITY = "3"
    EXIT = "4"
    INVALID = "invalid"


@dataclass(frozen=True)
class MenuChoice:
    """A parsed menu selection; raw keeps the typed text."""
    action: MenuAction
    raw: str


def parse_choice(line: str) -> MenuChoice:
    """Map a typed line onto a menu action; unknown input becomes INVALID."""
    try:
        action = MenuAction(line)
    except ValueError:
        action = MenuAction.INVALID
    return MenuChoice(action, line)


class MenuState(Enum):
    AWAITING_INITIAL_CITY = "awaiting_initial_city"
    READY = "ready"
    EXITED = "exited"


class WeatherMenu:
    """
    Menu loop over a WeatherService.

    Starts in AWAITING_INITIAL_CITY and keeps asking for a city until one
    lookup succeeds; there is no cap on attempts. In READY a failed city
    change is reported once and the previous forecast stays on display.
    """

    def __init__(
        self,
        service: WeatherService,
        reader: Optional[Callable[[], str]] = None,
        out: Optional[TextIO] = None
    ):
        """
        Args:
            service: Service that fetches and holds the weather data
            reader: Callable returning one trimmed input line (defaults to stdin)
            out: Stream for prompts and reports (defaults to stdout)
        """
        self.service = service
        self.reader = reader or read_line
        self.out = out or sys.stdout
        self.state = MenuState.AWAITING_INITIAL_CITY

    def _write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def _say(self, text: str) -> None:
        self._write(text + "\n")

    def _ask(self, prompt: str) -> str:
        self._write(prompt)
        return self.reader()

    def acquire_initial_city(self) -> None:
        """Prompt until a lookup succeeds, then move to READY."""
        city = self._ask(INITIAL_CITY_PROMPT)
        attempts = 1
        while True:
            try:
                self.service.load(city)
                break
            except WeatherProviderError as err:
                logging.error("Error getting forecast: %s", err)
                city = self._ask(RETRY_CITY_PROMPT)
                attempts += 1

        logging.info("Initial forecast loaded after %s attempt(s)", attempts)
        self.state = MenuState.READY

    def show_menu(self) -> None:
        self._say("")
        self._say(MENU_TITLE)
        for option in MENU_OPTIONS:
            self._say(option)
        self._write(CHOICE_PROMPT)

    def change_city(self) -> None:
        city = self._ask(NEW_CITY_PROMPT)
        try:
            self.service.load(city)
        except WeatherProviderError as err:
            logging.error("Error getting forecast: %s", err)
            return
        self._say(f"Changed to {city} successfully!")

    def handle(self, choice: MenuChoice) -> None:
        """Dispatch one parsed choice; only valid while READY."""
        if self.state is not MenuState.READY:
            raise RuntimeError(f"menu cannot handle input in state {self.state.value}")
        if not self.service.has_weather:
            raise RuntimeError("menu is READY without a forecast")

        weather = self.service.weather
        if choice.action is MenuAction.SHOW_CURRENT:
            show_current(weather, self.out)
        elif choice.action is MenuAction.SHOW_FORECAST:
            show_forecast(weather, self.out)
        elif choice.action is MenuAction.CHANGE_CITY:
            self.change_city()
        elif choice.action is MenuAction.EXIT:
            self._say(FAREWELL_MESSAGE)
            self.state = MenuState.EXITED
        elif choice.action is MenuAction.INVALID:
            logging.debug("Invalid menu choice: %r", choice.raw)
            self._say(INVALID_CHOICE_MESSAGE)
        else:  # pragma: no cover - every MenuAction is handled above
            raise ValueError(f"Unhandled menu action: {choice.action}")

    def run(self) -> None:
        """Run until the user picks Exit."""
        if self.state is MenuState.AWAITING_INITIAL_CITY:
            self.acquire_initial_city()

        while self.state is MenuState.READY:
            self.show_menu()
            self.handle(parse_choice(self.reader()))

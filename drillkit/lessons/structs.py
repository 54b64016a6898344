"""Structured data: colours, orders, packages and a message-driven state machine."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ColorClassic:
    """A named colour with its hex code."""

    name: str
    hex: str


@dataclass(frozen=True)
class Order:
    """A customer order and the channels it was placed through."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """The order that new orders are based on."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(frozen=True)
class Package:
    """A parcel sent between two countries; its weight must be positive."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError(f"negative weight {self.weight_in_grams}")

    def is_international(self) -> bool:
        """Whether sender and recipient are in different countries."""
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Transport fee in cents for the given rate."""
        return self.weight_in_grams * cents_per_gram


@dataclass(frozen=True)
class Point:
    """A position on the board."""

    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    """Message: switch to the given RGB colour."""

    color: tuple[int, int, int]


@dataclass(frozen=True)
class Echo:
    """Message: print the given text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Message: move to the given point."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Message: stop the machine."""


Message = ChangeColor | Echo | Move | Quit


@dataclass
class MachineState:
    """State changed by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(color=color):
                self.color = color
            case Echo(text=text):
                print(text)
            case Move(point=point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")
"""Small domain models: books, heroes, humans, animals."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class Book:
    """A book with a title and an author."""

    title: str = ""
    auth: str = ""


@dataclass
class Hero:
    """A game hero with a name, attack damage and level."""

    name: str = ""
    ad: int = 0
    level: int = 0

    def show(self) -> str:
        """Return the hero's attributes, one per line."""
        return "\n".join(
            [
                f"Name =  {self.name}",
                f"Ad =  {self.ad}",
                f"Level =  {self.level}",
            ]
        )


@dataclass
class Human:
    """A person who can eat and walk."""

    name: str = ""
    sex: str = ""

    def eat(self) -> str:
        return "Human.Eat()"

    def walk(self) -> str:
        return "Human.Walk()"


@dataclass
class SuperMan(Human):
    """A human with a level who eats differently and can fly."""

    level: int = 0

    def eat(self) -> str:
        return "SuperMan.Eat()"

    def fly(self) -> str:
        return "SuperMan.Fly()"

    def describe(self) -> str:
        """Return name, sex and level, one per line."""
        return "\n".join(
            [
                f"name =  {self.name}",
                f"sex =  {self.sex}",
                f"level =  {self.level}",
            ]
        )


class Animal(ABC):
    """An animal with a colour; its kind is the name of its class."""

    def __init__(self, color: str = "") -> None:
        self.color = color

    @property
    def kind(self) -> str:
        return type(self).__name__

    @abstractmethod
    def sleep(self) -> str:
        """Return what the animal does when it sleeps."""

    def __repr__(self) -> str:
        return f"{self.kind}(color={self.color!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.color == other.color  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((self.kind, self.color))


class Cat(Animal):
    def sleep(self) -> str:
        return "Cat is sleeping"


class Dog(Animal):
    def sleep(self) -> str:
        return "Dog is sleeping"


def show_animal(animal: Animal) -> list[str]:
    """Return the animal's sleep message, colour and kind."""
    return [animal.sleep(), animal.color, animal.kind]


def describe_value(arg: Any) -> list[str]:
    """Describe any value, noting whether it is a string."""
    lines = ["hello world", str(arg)]
    if isinstance(arg, str):
        lines.append(f"arg is a string, value =  {arg}")
    else:
        lines.append("arg is not a string")
    return lines


@dataclass
class Books:
    """A catalogued book."""

    title: str = ""
    author: str = ""
    subject: str = ""
    book_id: int = 0


def format_book(book: Books) -> str:
    """Return the book's fields as labelled lines."""
    return "\n".join(
        [
            f"Book title : {book.title}",
            f"Book author : {book.author}",
            f"Book subject : {book.subject}",
            f"Book book_id : {book.book_id}",
        ]
    )
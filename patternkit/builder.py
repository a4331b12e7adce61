"""Step-by-step construction of users with optional fields."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

_MAX_AGE = 2**32 - 1


@dataclass(frozen=True)
class User:
    """A user with a required name and optional e-mail and age."""

    name: str
    email: str | None = None
    age: int | None = None


class UserBuilder:
    """Fluent builder for :class:`User`."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._email: str | None = None
        self._age: int | None = None

    def email(self, email: str) -> UserBuilder:
        """Set the e-mail address."""
        self._email = email
        return self

    def age(self, age: int) -> UserBuilder:
        """Set the age, which must be a non-negative 32-bit value."""
        if not 0 <= age <= _MAX_AGE:
            raise ValueError(f"age out of range: {age}")
        self._age = age
        return self

    def build(self) -> User:
        """Create the user from the values set so far."""
        return User(name=self._name, email=self._email, age=self._age)


def main(argv: list[str] | None = None) -> int:
    """Build two users and print them."""
    argparse.ArgumentParser(description="Demonstrate the builder.").parse_args(argv)
    user1 = UserBuilder("Gabriel").email("gabriel@example.com").age(23).build()
    user2 = UserBuilder("Lucas").build()
    print(repr(user1))
    print(repr(user2))
    return 0
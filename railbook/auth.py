"""User accounts stored as name and password pairs."""

from __future__ import annotations

import os
from pathlib import Path


class UserStore:
    """Looks up accounts in a whitespace-separated users file."""

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = Path(path)

    def find_password(self, name: str) -> str | None:
        """The stored password of the first account with this name, or None.

        Raises OSError when the users file cannot be read.
        """
        with open(self.path, encoding="utf-8") as handle:
            tokens = handle.read().split()
        for user, stored in zip(tokens[0::2], tokens[1::2]):
            if user == name:
                return stored
        return None

    def verify(self, name: str, password: str) -> bool:
        """True if the account exists and the password matches."""
        stored = self.find_password(name)
        return stored is not None and stored == password
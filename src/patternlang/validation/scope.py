"""
Identifier scope used by the validator.

A scope collects the names declared by one list of sibling nodes. Scopes are
never chained: every container level starts with a fresh one.
"""


class IdentifierScope:
    """Set of names declared at one container level."""

    def __init__(self):
        self._names: set[str] = set()

    def declare(self, name: str) -> bool:
        """
        Register a name in this scope.

        Params:
            name: Identifier to register, the empty string included

        Returns:
            True if the name was new, False if it was already declared here
        """
        if name in self._names:
            return False
        self._names.add(name)
        return True

    def __contains__(self, name: str) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)

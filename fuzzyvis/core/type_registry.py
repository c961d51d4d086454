"""Generic named registry with case-insensitive lookup and aliases.

The Registry provides a single pattern for registering and looking up
entries by name. It supports:
- Case-insensitive lookup
- Aliases (multiple names resolving to the same entry)
- Collision detection
- Insertion-ordered listing of canonical names

Example usage:
    >>> from fuzzyvis.core.type_registry import Registry
    >>> registry = Registry[MembershipSpec]("membership function")
    >>> registry.register(spec, "triangular", aliases=["trimf"])
    >>> registry.get("TRIMF")  # Returns spec (case-insensitive)
"""

from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class Registry(Generic[T]):
    """Generic registry with case-insensitive lookup.

    Attributes:
        _name: Registry name used in error messages (e.g., "membership function")
        _entries: Maps lowercase names (both canonical and aliases) to entries
        _canonical: Maps lowercase names (canonical and aliases) to the
            canonical spelling, in registration order
    """

    def __init__(self, name: str) -> None:
        """Initialize the registry.

        Args:
            name: Name for this registry, used in error messages
        """
        self._name = name
        self._entries: dict[str, T] = {}
        self._canonical: dict[str, str] = {}

    @property
    def name(self) -> str:
        return self._name

    def register(
        self, entry: T, canonical: str, aliases: Optional[list[str]] = None
    ) -> None:
        """Register an entry with a canonical name and optional aliases.

        All names are stored in lowercase for case-insensitive lookup.

        Args:
            entry: The value to register
            canonical: The primary name for this entry
            aliases: Optional alternative names that also resolve to this entry

        Raises:
            ValueError: If any name (canonical or alias) is already registered
        """
        all_names = [canonical] + (aliases or [])
        # Check for collisions before registering anything
        for name in all_names:
            key = name.lower()
            if key in self._entries:
                raise ValueError(
                    f"Cannot register {self._name} as '{name}': "
                    f"name already registered"
                )

        self._entries[canonical.lower()] = entry
        self._canonical[canonical.lower()] = canonical

        for alias in aliases or []:
            self._entries[alias.lower()] = entry
            self._canonical[alias.lower()] = canonical

    def get(self, name: str) -> Optional[T]:
        """Look up an entry by name (case-insensitive).

        Args:
            name: The name to look up

        Returns:
            The registered entry, or None if not found
        """
        return self._entries.get(name.lower())

    def canonical_name(self, name: str) -> Optional[str]:
        """Resolve a name or alias to its canonical spelling."""
        return self._canonical.get(name.lower())

    def list_types(self) -> list[str]:
        """List all registered canonical names in registration order.

        Returns:
            Canonical names (excludes aliases)
        """
        return [
            canonical
            for key, canonical in self._canonical.items()
            if key == canonical.lower()
        ]

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def __iter__(self) -> Iterator[T]:
        return (self._entries[name.lower()] for name in self.list_types())

    def __len__(self) -> int:
        return len(self.list_types())

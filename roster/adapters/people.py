from collections.abc import Iterable, Iterator

from roster.domain.entities import Person


class InMemoryPeopleSource:
    """People source backed by a fixed list."""

    def __init__(self, people: Iterable[Person]) -> None:
        self._people = list(people)

    def get_all(self) -> Iterator[Person]:
        return iter(self._people)

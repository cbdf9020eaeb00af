from dataclasses import dataclass, field
from typing import Iterable, Iterator, Union

from seqcompare.engine.exceptions.reading import CapacityExceededException


@dataclass(frozen=True)
class NamedString:
    name: str
    sequence: str

@dataclass
class SequenceStore:
    """Ordered collection of sequences, indexed by input position."""
    max_sequences: Union[int, None] = None
    _named_strings: list[NamedString] = field(default_factory=list, init=False, repr=False)

    @classmethod
    def from_named_strings(cls, named_strings: Iterable[NamedString], max_sequences: Union[int, None] = None) -> "SequenceStore":
        store = cls(max_sequences)
        for named_string in named_strings:
            store.add(named_string)
        return store

    def add(self, named_string: NamedString):
        if self.max_sequences is not None and len(self._named_strings) >= self.max_sequences:
            raise CapacityExceededException("maximum sequence count", self.max_sequences)
        self._named_strings.append(named_string)

    def sequences(self) -> tuple[str, ...]:
        return tuple(named_string.sequence for named_string in self._named_strings)

    def __getitem__(self, index: int) -> NamedString:
        return self._named_strings[index]

    def __len__(self) -> int:
        return len(self._named_strings)

    def __iter__(self) -> Iterator[NamedString]:
        return iter(self._named_strings)

from typing import Hashable, Iterable, MutableSequence, Sequence, TypeVar, TypeAlias

# symbols are grouped by equality, so they must hash consistently with __eq__
SymbolT = TypeVar('SymbolT', bound=Hashable)

Elements: TypeAlias = Iterable[SymbolT]
Placement: TypeAlias = Sequence[SymbolT]
# output slots of an unrank in progress; None marks a slot nobody filled yet
Slots: TypeAlias = MutableSequence[SymbolT | None]
FilledMask: TypeAlias = MutableSequence[bool]

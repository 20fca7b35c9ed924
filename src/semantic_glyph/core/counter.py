"""Per-document DotId allocation.

A ``DotIdCounter`` is created by the caller for one document and thrown away
afterwards. It is not synchronized; share it across threads at your own risk.
"""

from collections.abc import Iterable

from semantic_glyph.core.annotations import extract_declarations, parse_annotations
from semantic_glyph.core.dotid import DOT_IDS, MAX_VALUE, dotid_for
from semantic_glyph.models import CounterSnapshot, Declaration, DensityReport, DotId

APPROACHING_CAPACITY = 7


class DotIdCounter:
    def __init__(self, declarations: Iterable[Declaration] = ()) -> None:
        self._used: set[int] = set()
        self._declarations: dict[int, Declaration] = {}
        for declaration in declarations:
            self.add_declaration(declaration)

    def add_declaration(self, declaration: Declaration) -> None:
        """Mark the value used. Only the first declaration per value is kept."""
        value = declaration.dotid.value
        self._used.add(value)
        self._declarations.setdefault(value, declaration)

    def reserve(self, value: int) -> None:
        """Mark a value used without a declaration, e.g. for a pending suggestion."""
        if dotid_for(value) is None:
            raise ValueError(f"DotId value must be between 1 and {MAX_VALUE}, got {value}.")
        self._used.add(value)

    def remove(self, value: int) -> None:
        self._used.discard(value)
        self._declarations.pop(value, None)

    def is_used(self, value: int) -> bool:
        return value in self._used

    def next_available(self) -> DotId | None:
        for dotid in DOT_IDS:
            if dotid.value not in self._used:
                return dotid
        return None

    def available(self) -> list[DotId]:
        return [d for d in DOT_IDS if d.value not in self._used]

    def used(self) -> list[DotId]:
        return [d for d in DOT_IDS if d.value in self._used]

    @property
    def used_count(self) -> int:
        return len(self._used)

    @property
    def available_count(self) -> int:
        return MAX_VALUE - len(self._used)

    def declaration_for(self, value: int) -> Declaration | None:
        return self._declarations.get(value)

    def declarations(self) -> list[Declaration]:
        return list(self._declarations.values())

    def approaching_capacity(self) -> bool:
        return len(self._used) >= APPROACHING_CAPACITY

    def at_capacity(self) -> bool:
        return len(self._used) >= MAX_VALUE

    def reset(self) -> None:
        self._used.clear()
        self._declarations.clear()

    def snapshot(self) -> CounterSnapshot:
        return CounterSnapshot(used=tuple(sorted(self._used)), declarations=tuple(self._declarations.values()))

    def restore(self, snapshot: CounterSnapshot) -> None:
        self.reset()
        self._used.update(snapshot.used)
        for declaration in snapshot.declarations:
            self.add_declaration(declaration)

    def __repr__(self) -> str:
        return f"DotIdCounter(used={sorted(self._used)})"


def counter_from_text(text: str) -> DotIdCounter:
    return DotIdCounter(extract_declarations(parse_annotations(text)))


def check_note_density(counter: DotIdCounter) -> DensityReport:
    if counter.at_capacity():
        return DensityReport(
            used=counter.used_count,
            should_split=True,
            reason=f"All {MAX_VALUE} DotIds are in use. Consider splitting this note into smaller pieces.",
        )
    if counter.approaching_capacity():
        return DensityReport(
            used=counter.used_count,
            should_split=False,
            reason=f"{counter.used_count} DotIds in use. The note is getting dense; consider splitting it.",
        )
    return DensityReport(used=counter.used_count, should_split=False)

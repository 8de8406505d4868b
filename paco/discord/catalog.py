from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TYPE_CHECKING

from .models import ApplicationCommand

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping


__all__ = (
    'CatalogEntry',
    'CommandCatalog',
)


type CommandSource = Iterable[ApplicationCommand | Mapping[str, Any]]


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    source: str
    """`<source name>[<index>]` of the declaration"""
    command: ApplicationCommand


@dataclass(frozen=True, slots=True)
class CommandCatalog:
    """Commands from every declaration source, in source-priority order.

    Built fresh for every registration run and never mutated afterwards;
    duplicates are kept so the validator can report both declarations.
    """
    entries: tuple[CatalogEntry, ...] = field(default=())

    @classmethod
    def from_sources(
        cls,
        *sources: tuple[str, CommandSource]
    ) -> CommandCatalog:
        return cls(tuple(
            CatalogEntry(
                f'{source}[{index}]',
                (
                    command.model_copy(deep=True)
                    if isinstance(command, ApplicationCommand) else
                    ApplicationCommand(**command)
                )
            )
            for source, commands in sources
            for index, command in enumerate(commands)
        ))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ApplicationCommand]:
        return (entry.command for entry in self.entries)

    @property
    def commands(self) -> list[ApplicationCommand]:
        return list(self)

    @property
    def names(self) -> list[str]:
        return [entry.command.name for entry in self.entries]

    def as_payload(self) -> list[dict[str, Any]]:
        return [
            command.as_payload()
            for command in self
        ]

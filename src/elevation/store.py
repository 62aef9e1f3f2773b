"""Save-file shaped key-value storage.

SaveNode is an ordered list of name/value string pairs, the shape of a game
save-file node. ScenarioFile keeps one such node as a TOML table inside a save
file and leaves every other table of the file untouched.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

import tomlkit
from tomlkit.exceptions import TOMLKitError

from shared.constants import SCENARIO_NODE_NAME

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Read/write surface the persistence codec works against."""

    def get_value(self, name: str) -> str | None: ...

    def values(self) -> Iterator[tuple[str, str]]: ...

    def add_value(self, name: str, value: object) -> None: ...


class SaveNode:
    """Ordered name/value pairs; names may repeat, the first one wins on lookup."""

    def __init__(self, values: list[tuple[str, str]] | None = None) -> None:
        self._values: list[tuple[str, str]] = list(values or [])

    def __len__(self) -> int:
        return len(self._values)

    def get_value(self, name: str) -> str | None:
        for key, value in self._values:
            if key == name:
                return value
        return None

    def values(self) -> Iterator[tuple[str, str]]:
        return iter(list(self._values))

    def add_value(self, name: str, value: object) -> None:
        self._values.append((name, str(value)))

    def to_dict(self) -> dict[str, str]:
        result: dict[str, str] = {}
        for key, value in self._values:
            result.setdefault(key, value)
        return result


class ScenarioFile:
    """TOML save file holding the scanner node under SCENARIO_NODE_NAME.

    Usage:
        save = ScenarioFile('persistent.toml')
        node = save.load_node()
        ...
        save.save_node(node)
    """

    def __init__(self, path: str | Path, node_name: str = SCENARIO_NODE_NAME) -> None:
        self.path = Path(path)
        self.node_name = node_name

    def _read_document(self) -> tomlkit.TOMLDocument:
        """Parse the save file; a missing or unparsable file gives an empty document."""
        if not self.path.exists():
            return tomlkit.document()
        try:
            return tomlkit.parse(self.path.read_text(encoding='utf-8'))
        except TOMLKitError as e:
            logger.warning(
                'Unreadable save file %s, its content will be replaced on save: %s',
                self.path,
                e,
            )
            return tomlkit.document()

    def load_node(self) -> SaveNode:
        """Read the scanner node; an absent file or table yields an empty node."""
        doc = self._read_document()
        table = doc.get(self.node_name)
        if table is None:
            logger.info('No %s node in %s', self.node_name, self.path)
            return SaveNode()
        if not isinstance(table, dict):
            logger.warning('Ignoring %s in %s: not a table', self.node_name, self.path)
            return SaveNode()
        return SaveNode([(str(k), str(v)) for k, v in table.unwrap().items()])

    def save_node(self, node: SaveNode) -> Path:
        """Replace the scanner node in the file, creating the file if needed."""
        doc = self._read_document()
        table = tomlkit.table()
        for key, value in node.to_dict().items():
            table.add(key, value)
        if self.node_name in doc:
            doc[self.node_name] = table
        else:
            doc.add(self.node_name, table)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(tomlkit.dumps(doc), encoding='utf-8')
        logger.info('Wrote %d values to %s [%s]', len(table), self.path, self.node_name)
        return self.path

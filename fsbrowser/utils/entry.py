import datetime
import os
import stat
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class MetadataNode:
    name: str
    size: int
    is_directory: bool
    last_modified: datetime.datetime
    children: Optional[list['MetadataNode']] = None

    @classmethod
    def from_stat(cls, path: str, stat_result: os.stat_result) -> 'MetadataNode':
        """Creates node without children from stat result.

        Parameters
        ----------
        path : str
            Entry path.
        stat_result : os.stat_result
            Entry stat result.

        Returns
        -------
        MetadataNode
            Class instance.
        """
        name = os.path.basename(os.path.normpath(path)) or path
        last_modified = datetime.datetime.fromtimestamp(stat_result.st_mtime).astimezone()
        is_directory = stat.S_ISDIR(stat_result.st_mode)
        return cls(name, stat_result.st_size, is_directory, last_modified)

    def to_dict(self) -> dict[str, Any]:
        """Converts node to JSON-serializable dict.

        Returns
        -------
        dict[str, Any]
            Node fields under their wire names.
        """
        result: dict[str, Any] = {
            'name': self.name,
            'size': self.size,
            'isDirectory': self.is_directory,
            'lastModified': self.last_modified.isoformat(),
        }
        if self.is_directory and self.children is not None:
            result['children'] = [child.to_dict() for child in self.children]
        return result

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass
class Writer:
    root: str = "."

    def path(self, name: str) -> Path:
        return Path(self.root) / name

    @staticmethod
    def serialize(data: Any) -> str:
        """The exact text committed to the repository"""
        return json.dumps(data, indent=2)

    # create the parent directories of the output file if they don't exist
    def _create_dir(self, name: str) -> None:
        self.path(name).parent.mkdir(parents=True, exist_ok=True)

    # write to a json file
    def to_json(self, data: Any, name: str) -> Path:
        self._create_dir(name)
        path = self.path(name)
        with open(path, "w") as f:
            f.write(self.serialize(data))
        return path

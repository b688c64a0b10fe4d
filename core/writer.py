import os
from dataclasses import asdict, dataclass, is_dataclass
from typing import Any

import yaml

from core.logger import Logger
from core.utils import file_exists

logger = Logger("writer")


@dataclass
class Document:
    file_name: str
    content: str


def to_yaml(records: list[Any]) -> str:
    """Serializes a list of records (dataclasses or dicts) as one YAML sequence"""
    rows = [asdict(r) if is_dataclass(r) else dict(r) for r in records]
    return yaml.safe_dump(
        rows,
        explicit_start=True,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def load(*args) -> list[dict[str, Any]]:
    """Reads back a YAML fixture file written by Writer"""
    file_path = file_exists(*args)
    with open(file_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # an empty fixture set serializes to `--- []`
    if not isinstance(data, list):
        raise ValueError(f"Expected a list in {file_path}, got {type(data).__name__}")
    return data


class Writer:
    def __init__(self, output: str):
        self.output = output
        self.logger = logger

    def write(self, files: list[Document]) -> list[str]:
        """writes each document under the output directory, returns the paths"""
        os.makedirs(self.output, exist_ok=True)

        paths = []
        for item in files:
            full_path = os.path.join(self.output, item.file_name)
            self.logger.debug(f"writing {full_path}")
            with open(full_path, "w", encoding="utf-8") as f:
                f.write(item.content)
            paths.append(full_path)

        return paths

"""Build-task wrapper around the converter.

The task reads `appdef.xml` from a data directory, converts it, and returns
the generated module file for the caller to persist.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..io.document import AppDefDocument
from ..models.datatypes import AppConfig
from ..telemetry.logger import RunLogger
from .converter import ConfigConverter
from .serialization import render_module

DEFAULT_APPDEF_NAME = "appdef.xml"
DEFAULT_MODULE_PATH = "src/config.js"


@dataclass(frozen=True, slots=True)
class OutputFile:
    """One generated file, relative to the output root."""

    path: str
    content: str


@dataclass(frozen=True, slots=True)
class TaskOutput:
    """Result of one task run."""

    task_name: str
    data: AppConfig
    files: tuple[OutputFile, ...] = field(default_factory=tuple)


class ConvertConfigTask:
    """Convert `appdef.xml` into a config object and its `config.js` module."""

    task_name = "ConvertConfig"

    def __init__(
        self,
        data_dir: Path,
        *,
        appdef_name: str = DEFAULT_APPDEF_NAME,
        module_path: str = DEFAULT_MODULE_PATH,
        run_logger: RunLogger | None = None,
    ) -> None:
        self.data_dir = data_dir
        self.appdef_name = appdef_name
        self.module_path = module_path
        self._run_logger = run_logger

    @property
    def trigger_files(self) -> tuple[str, ...]:
        """Source files whose change should rerun this task."""

        return (self.appdef_name,)

    def run(self, verbose: bool = False) -> TaskOutput:
        """Convert the application definition and render the config module."""

        root = AppDefDocument.load(self.data_dir / self.appdef_name)
        data = ConfigConverter(self._run_logger, verbose=verbose).convert(root)
        return TaskOutput(
            task_name=self.task_name,
            data=data,
            files=(OutputFile(path=self.module_path, content=render_module(data)),),
        )

"""Conversion pipeline package.

This package contains the section aggregator, its result builder, output
serialization, and the build-task wrapper.
"""

from .converter import ConfigConverter, convert
from .serialization import config_payload, render_json, render_module
from .task import ConvertConfigTask, OutputFile, TaskOutput

__all__ = [
    "ConfigConverter",
    "ConvertConfigTask",
    "OutputFile",
    "TaskOutput",
    "config_payload",
    "convert",
    "render_json",
    "render_module",
]

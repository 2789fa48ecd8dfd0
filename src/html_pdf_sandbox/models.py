from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class TextDirection(str, Enum):
    LTR = "ltr"
    RTL = "rtl"


class DiagnosticLevel(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    SEVERE = "severe"

    @classmethod
    def from_logging_level(cls, levelno: int) -> "DiagnosticLevel":
        if levelno >= logging.ERROR:
            return cls.SEVERE
        if levelno >= logging.WARNING:
            return cls.WARNING
        if levelno >= logging.INFO:
            return cls.INFO
        return cls.DEBUG


REPORTED_LEVELS = frozenset({DiagnosticLevel.INFO, DiagnosticLevel.WARNING, DiagnosticLevel.SEVERE})


class Diagnostic(BaseModel):
    level: DiagnosticLevel
    message: str

    @property
    def reported(self) -> bool:
        return self.level in REPORTED_LEVELS


class FontSource(BaseModel):
    """A font family made available to every rendered document.

    ``path`` is a font file, relative paths resolving against the package's
    ``fonts`` directory. ``local`` is an installed font name, tried after the
    file. At least one of them must be given.
    """

    family: str
    local: Optional[str] = None
    path: Optional[str] = None

    @model_validator(mode="after")
    def _check_source(self) -> "FontSource":
        if self.local is None and self.path is None:
            raise ValueError(f"font {self.family!r} needs 'local' or 'path'")
        return self


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "info"


class ExampleSettings(BaseModel):
    default_file: str = "hello-world.htm"


class RendererSettings(BaseModel):
    text_direction: TextDirection = TextDirection.LTR
    fast_mode: bool = True
    diagnostic_level: str = "info"
    fonts: List[FontSource] = Field(default_factory=list)


class Settings(BaseModel):
    server: ServerSettings = Field(default_factory=ServerSettings)
    examples: ExampleSettings = Field(default_factory=ExampleSettings)
    renderer: RendererSettings = Field(default_factory=RendererSettings)

"""Data models for the configuration document assembled by a session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .values import Value

Variables = Dict[str, Value]


@dataclass
class FileSpec:
    """A template-to-output mapping with its local variables."""

    name: str
    path: str
    template: str
    local: Optional[Variables] = None


@dataclass
class Command:
    """A post-generation hook: executable name plus arguments."""

    name: str
    args: List[str] = field(default_factory=list)


@dataclass
class Document:
    """The complete output of a genconf session."""

    global_vars: Optional[Variables] = None
    files: List[FileSpec] = field(default_factory=list)
    commands: List[Command] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-shaped payload; empty file and command lists are omitted."""
        payload: Dict[str, Any] = {"global": _copy_variables(self.global_vars)}
        if self.files:
            payload["files"] = [_file_to_dict(item) for item in self.files]
        if self.commands:
            payload["commands"] = [_command_to_dict(item) for item in self.commands]
        return payload

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Document":
        """Rebuild a document from a payload produced by ``to_dict``."""
        files = payload.get("files") or []
        commands = payload.get("commands") or []
        return cls(
            global_vars=_copy_variables(payload.get("global")),
            files=[_file_from_dict(item) for item in files],
            commands=[_command_from_dict(item) for item in commands],
        )


def _copy_variables(values: Optional[Mapping[str, Value]]) -> Optional[Variables]:
    if values is None:
        return None
    return dict(values)


def _file_to_dict(spec: FileSpec) -> Dict[str, Any]:
    return {
        "name": spec.name,
        "path": spec.path,
        "template": spec.template,
        "local": _copy_variables(spec.local),
    }


def _file_from_dict(payload: Mapping[str, Any]) -> FileSpec:
    return FileSpec(
        name=str(payload["name"]),
        path=str(payload["path"]),
        template=str(payload["template"]),
        local=_copy_variables(payload.get("local")),
    )


def _command_to_dict(command: Command) -> Dict[str, Any]:
    return {"name": command.name, "args": list(command.args)}


def _command_from_dict(payload: Mapping[str, Any]) -> Command:
    args = payload.get("args") or []
    return Command(name=str(payload["name"]), args=[str(arg) for arg in args])


__all__ = ["Command", "Document", "FileSpec", "Variables"]

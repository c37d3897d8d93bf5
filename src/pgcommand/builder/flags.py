"""Argument model conventions.

A tool's options are declared as fields on an ArgumentModel. Each field is
annotated with the flag shape that decides how it renders:

    class PgIsReadyArguments(ArgumentModel):
        dbname: Annotated[str | None, ValueFlag("--dbname")] = None
        quiet: Annotated[bool, PresenceFlag("--quiet")] = False

Fields render in declaration order and unset fields render nothing.
"""

import os
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.fields import FieldInfo


def to_token(value: Any) -> str:
    """Render a single argument value verbatim.

    Paths go through os.fspath, everything else through str(), which gives
    the canonical decimal form for ints.
    """
    if isinstance(value, os.PathLike):
        return os.fspath(value)
    return str(value)


@dataclass(frozen=True)
class Flag:
    """Base for the three flag shapes."""

    name: str

    def render(self, value: Any) -> list[str]:
        raise NotImplementedError


@dataclass(frozen=True)
class PresenceFlag(Flag):
    """Boolean flag: ``--quiet``."""

    def render(self, value: Any) -> list[str]:
        return [self.name] if value else []


@dataclass(frozen=True)
class ValueFlag(Flag):
    """Flag followed by one value: ``--host localhost``."""

    def render(self, value: Any) -> list[str]:
        if value is None:
            return []
        return [self.name, to_token(value)]


@dataclass(frozen=True)
class PairFlag(Flag):
    """Flag followed by a ``key=value`` token: ``--variable ON_ERROR_STOP=1``."""

    def render(self, value: Any) -> list[str]:
        if value is None:
            return []
        key, item = value
        return [self.name, f"{to_token(key)}={to_token(item)}"]


def flag_for(field: FieldInfo) -> Flag | None:
    """Return the flag annotation attached to a model field, if any."""
    for meta in field.metadata:
        if isinstance(meta, Flag):
            return meta
    return None


class ArgumentModel(BaseModel):
    """Typed, immutable set of optional command-line options.

    Frozen because builders derive new argument sets with model_copy()
    instead of mutating in place. model_copy() skips validation, so setting
    a field never fails; validated() checks the whole model at once.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    def to_args(self) -> list[str]:
        """Render all set fields to argument tokens, in declaration order."""
        args: list[str] = []
        for name, field in type(self).model_fields.items():
            flag = flag_for(field)
            if flag is None:
                continue
            args.extend(flag.render(getattr(self, name)))
        return args

    def validated(self) -> "ArgumentModel":
        """Return a validated copy of this model.

        Runs field validation plus any model validators declared by
        subclasses. Raises pydantic.ValidationError on failure.
        """
        values = {name: getattr(self, name) for name in type(self).model_fields}
        return type(self).model_validate(values)

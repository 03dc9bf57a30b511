# Copyright 2019-2025 SURF.
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
from collections.abc import Mapping, Set
from typing import Any

from pydantic import BaseModel, ConfigDict


class Scalar(BaseModel):
    """A single request value, e.g. `?name=Jo`."""

    model_config = ConfigDict(frozen=True)

    value: str

    @property
    def filled(self) -> bool:
        return self.value.strip() != ""


class ValueList(BaseModel):
    """An ordered collection of request values, e.g. `?status[]=active&status[]=pending`."""

    model_config = ConfigDict(frozen=True)

    values: tuple[str, ...]

    @property
    def filled(self) -> bool:
        return len(self.values) > 0


RequestValue = Scalar | ValueList


def _to_str(value: Any) -> str:
    if isinstance(value, bool):
        return str(int(value))
    return str(value)


def to_request_value(value: Any) -> RequestValue:
    """Normalize a raw value from a request into a `RequestValue`.

    Lists, tuples, sets and mappings (PHP style `{"0": "a", "1": "b"}` arrays) become a `ValueList` (None items are
    dropped), None becomes an empty `Scalar` and anything else is stringified into a `Scalar`.
    """
    match value:
        case Scalar() | ValueList():
            return value
        case None:
            return Scalar(value="")
        case str():
            return Scalar(value=value)
        case Mapping():
            return ValueList(values=tuple(_to_str(v) for v in value.values() if v is not None))
        case list() | tuple():
            return ValueList(values=tuple(_to_str(v) for v in value if v is not None))
        case Set():
            return ValueList(values=tuple(sorted(_to_str(v) for v in value if v is not None)))
        case _:
            return Scalar(value=_to_str(value))

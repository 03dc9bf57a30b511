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
import re
from collections import defaultdict
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any
from urllib.parse import parse_qsl

from granular_search.types import RequestValue, Scalar, ValueList, to_request_value

ARRAY_KEY = re.compile(r"(.+)\[[^\]]*\]")


class RequestParameters(Mapping[str, RequestValue]):
    """Read-only view on the key/value parameters of one request.

    Values are normalized into `Scalar` or `ValueList` on construction, so consumers never have to probe
    whether a value is a collection.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        normalized = {key: to_request_value(value) for key, value in (values or {}).items()}
        self._values: Mapping[str, RequestValue] = MappingProxyType(normalized)

    @classmethod
    def from_mapping(cls, values: "Mapping[str, Any] | RequestParameters") -> "RequestParameters":
        if isinstance(values, RequestParameters):
            return values
        return cls(values)

    @classmethod
    def from_multi_items(cls, items: Iterable[tuple[str, str]]) -> "RequestParameters":
        """Build parameters from (key, value) pairs as found in a query string or form.

        A key that is repeated or written as `key[]` or `key[0]` becomes a `ValueList`, other keys a `Scalar`.
        """
        grouped: dict[str, list[str]] = defaultdict(list)
        array_keys: set[str] = set()
        for raw_key, value in items:
            key = raw_key
            if array_match := ARRAY_KEY.fullmatch(raw_key):
                key = array_match.group(1)
                array_keys.add(key)
            grouped[key].append(value)

        values: dict[str, RequestValue] = {}
        for key, collected in grouped.items():
            if key in array_keys or len(collected) > 1:
                values[key] = ValueList(values=tuple(collected))
            else:
                values[key] = Scalar(value=collected[0])
        return cls(values)

    @classmethod
    def from_query_string(cls, query_string: str) -> "RequestParameters":
        return cls.from_multi_items(parse_qsl(query_string, keep_blank_values=True))

    def __getitem__(self, key: str) -> RequestValue:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict(self._values)!r})"

    def has(self, key: str) -> bool:
        return key in self._values

    def filled(self, key: str) -> bool:
        """Return True when the key is present with a non-empty value."""
        value = self._values.get(key)
        return value is not None and value.filled

    def except_(self, keys: Iterable[str] | None) -> "RequestParameters":
        """Return a copy without the given keys."""
        excluded = set(keys or ())
        return RequestParameters({key: value for key, value in self._values.items() if key not in excluded})

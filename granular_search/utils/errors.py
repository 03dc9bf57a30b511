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


class GranularSearchError(Exception):
    """Base class for errors raised by granular_search."""


class InvalidQueryError(GranularSearchError, TypeError):
    """The statement to filter is missing or is not a SQLAlchemy `Select`."""

    def __init__(self, query: object) -> None:
        super().__init__(f"Expected a sqlalchemy Select to filter, got {type(query).__name__}")
        self.query = query

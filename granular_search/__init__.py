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

"""Turn request parameters into filters and sorting on a SQLAlchemy select, using the table columns as whitelist."""

__version__ = "1.0.0"

from granular_search.db.schema import DatabaseSchema, MetadataSchema, SchemaInspector
from granular_search.request import RequestParameters
from granular_search.search import granular_search, granular_search_for
from granular_search.settings import app_settings
from granular_search.types import RequestValue, Scalar, ValueList

__all__ = [
    "DatabaseSchema",
    "MetadataSchema",
    "RequestParameters",
    "RequestValue",
    "Scalar",
    "SchemaInspector",
    "ValueList",
    "app_settings",
    "granular_search",
    "granular_search_for",
]

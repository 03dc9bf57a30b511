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
from collections.abc import Iterable, Sequence

import structlog
from pydantic import BaseModel, ConfigDict

logger = structlog.get_logger(__name__)


class KeyClassification(BaseModel):
    """Partition of the request keys and table columns used to build a filter.

    All fields keep the order of the table columns, which determines the order of the generated clauses.
    """

    model_config = ConfigDict(frozen=True)

    like_keys: tuple[str, ...]
    equality_keys: tuple[str, ...]
    like_diff_columns: tuple[str, ...]
    like_intersect_columns: tuple[str, ...]


def classify_keys(
    request_keys: Iterable[str],
    table_columns: Sequence[str],
    excluded_keys: Iterable[str] | None = None,
    like_keys: Iterable[str] | None = None,
) -> KeyClassification:
    """Split request keys into columns filtered with LIKE and columns filtered by equality.

    Excluded keys are removed before anything else, so they never take part in filtering, not even when they
    are also listed as like keys. Keys that are not columns of the table are ignored.

    Args:
        request_keys: The keys present in the request.
        table_columns: The ordered column names of the table.
        excluded_keys: Columns that may never be searched.
        like_keys: Columns that are matched on substring instead of equality.

    Returns the `KeyClassification`.
    """
    excluded = set(excluded_keys or ())
    like = set(like_keys or ())
    requested = set(request_keys) - excluded

    common_keys = [column for column in table_columns if column in requested]
    like_diff_columns = tuple(column for column in table_columns if column not in like and column not in excluded)
    resolved_like_keys = tuple(column for column in common_keys if column in like)
    equality_keys = tuple(column for column in common_keys if column not in like)
    like_intersect_columns = tuple(column for column in table_columns if column in like and column not in excluded)

    classification = KeyClassification(
        like_keys=resolved_like_keys,
        equality_keys=equality_keys,
        like_diff_columns=like_diff_columns,
        like_intersect_columns=like_intersect_columns,
    )
    logger.debug("Classified request keys", **classification.model_dump())
    return classification

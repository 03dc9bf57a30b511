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

from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    GLOBAL_SEARCH_PARAM: str = "q"
    SORT_ASC_PARAM: str = "sortBy"
    SORT_DESC_PARAM: str = "sortByDesc"
    CASE_INSENSITIVE_LIKE: bool = False
    DATABASE_URI: str = "sqlite://"
    LOG_LEVEL: str = "INFO"

    @property
    def control_params(self) -> frozenset[str]:
        """Request keys that steer searching and sorting and are never used as column filters."""
        return frozenset({self.GLOBAL_SEARCH_PARAM, self.SORT_ASC_PARAM, self.SORT_DESC_PARAM})


app_settings = AppSettings()

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
import os

from granular_search.settings import app_settings


def logger_config(name: str, default_level: str = "INFO") -> tuple[str, dict]:
    """Create config for the given logger with the given loglevel.

    A logger's level can be overruled at deploy time by setting an env-var, for example:
     - Level of logger "granular_search" is controlled by LOG_LEVEL_GRANULAR_SEARCH
     - Level of logger "sqlalchemy.engine" is controlled by LOG_LEVEL_SQLALCHEMY_ENGINE
    """
    name_upper = name.upper().replace(".", "_")
    env_var_name = f"LOG_LEVEL_{name_upper}"
    effective_level = os.environ.get(env_var_name, default_level).upper()

    return name, {"level": effective_level, "propagate": True}


LOGGER_OVERRIDES = dict(
    [
        logger_config("granular_search", default_level=app_settings.LOG_LEVEL),
        logger_config("sqlalchemy.engine", default_level="WARNING"),
    ]
)

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

import typer
from nwastdlib.logging import initialise_logging

from granular_search.cli import preview
from granular_search.log_config import LOGGER_OVERRIDES

app = typer.Typer()


@app.callback()
def main() -> None:
    initialise_logging(additional_loggers=LOGGER_OVERRIDES)


app.command(name="preview", help="Print the SQL that request parameters produce for a table")(preview.preview)


if __name__ == "__main__":
    app()

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
from fastapi import Request

from granular_search.request import RequestParameters


def request_parameters(request: Request) -> RequestParameters:
    """FastAPI dependency that exposes the query parameters of the request as `RequestParameters`.

    Example:
        @router.get("/users")
        def list_users(params: RequestParameters = Depends(request_parameters)) -> list[User]:
            return db.session.scalars(search_users(select(UserTable), params)).all()
    """
    return RequestParameters.from_multi_items(request.query_params.multi_items())

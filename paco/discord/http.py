# The MIT License (MIT)

# Copyright (c) 2015-2021 Rapptz
# Copyright (c) 2021-present Pycord Development

# Permission is hereby granted, free of charge, to any person obtaining a
# copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:

# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.

# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS
# OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
# FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER
# DEALINGS IN THE SOFTWARE.
from __future__ import annotations
from paco.errors import HTTPException, BadRequest, Forbidden, NotFound, ServerError, Unauthorized, RateLimited
from aiohttp import __version__ as aiohttp_version, ClientError, ClientResponse, ClientSession
from typing import Any, Literal
from paco.version import VERSION
from orjson import dumps, loads
from urllib.parse import quote
from sys import version_info

from .models import RateLimitResponse


BASE_URL = 'https://discord.com/api/v10'
USER_AGENT = ' '.join([
    f'DiscordBot (https://github.com/paco-commands, {VERSION})',
    f'Python/{'.'.join([str(i) for i in version_info])}',
    f'aiohttp/{aiohttp_version}'
])


class Route:
    def __init__(
        self,
        method: str,
        path: str,
        base_url: str = BASE_URL,
        **params  # noqa: ANN003
    ) -> None:
        self.method = method
        self.path = path
        url = base_url.rstrip('/') + path

        self.url = url.format(**{
            k: quote(v) if isinstance(v, str) else v
            for k, v in params.items()
        }) if params else url

    def __repr__(self) -> str:
        return f'<Route {self.method} {self.url}>'


async def json_or_text(response: ClientResponse) -> dict[str, Any] | list[Any] | str:
    text = await response.text(encoding='utf-8')

    if response.content_type == 'application/json' and text:
        return loads(text)

    return text


def _raise_for_status(
    status: int,
    data: dict[str, Any] | list[Any] | str
) -> None:
    if status == 429:
        if not isinstance(data, dict) or 'retry_after' not in data:
            raise HTTPException(data, status)

        raise RateLimited(RateLimitResponse(**data))

    match status:
        case 400:
            raise BadRequest(data)
        case 401:
            raise Unauthorized(data)
        case 403:
            raise Forbidden(data)
        case 404:
            raise NotFound(data)
        case _ if status >= 500:
            raise ServerError(data, status)
        case _:
            raise HTTPException(data, status)


async def request(
    route: Route,
    *,
    token: str,
    token_type: Literal['Bot', 'Bearer'] = 'Bot',
    json: dict[str, Any] | list[Any] | None = None,
    session: ClientSession | None = None
) -> Any:  # noqa: ANN401
    # ? no retries here; a failed request is surfaced as-is to the caller
    if session is None:
        async with ClientSession() as owned_session:
            return await request(
                route,
                token=token,
                token_type=token_type,
                json=json,
                session=owned_session
            )

    headers: dict[str, str] = {
        'User-Agent': USER_AGENT,
        'Authorization': f'{token_type} {token}'
    }

    data: bytes | None = None

    if json is not None:
        headers['Content-Type'] = 'application/json'
        data = dumps(json)

    try:
        async with session.request(
            route.method,
            route.url,
            data=data,
            headers=headers
        ) as response:
            resp_data = await json_or_text(response)

            if 300 > response.status >= 200:
                return resp_data

            _raise_for_status(response.status, resp_data)
    except (ClientError, OSError) as e:
        raise HTTPException(f'{e.__class__.__name__}: {e}') from e

    raise RuntimeError('unreachable code in http handling')

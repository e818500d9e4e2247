"""fedicodec - fetch an entity from a Mastodon server and print it."""

import asyncio
import json
import logging
import sys
from argparse import Namespace
from typing import Any

from fedicodec.api.mastodon import Mastodon, login
from fedicodec.api.mastodon.api_mastodon import normalize_server
from fedicodec.api.mastodon.api_mastodon_errors import MastodonError
from fedicodec.api.mastodon.request import Request
from fedicodec.api.mastodon.types.encode_decode import encode_entity, encode_string
from fedicodec.argparser import parse_arguments
from fedicodec.helpers import cache_manager, helpers


def build_request(api: Mastodon, arguments: Namespace) -> Request[Any]:
    """Turn the `request` argument into a Request."""
    name = arguments.request
    argument = arguments.argument
    if name in ("account", "status", "context", "search") and not argument:
        logging.critical(f"The {name} request needs an argument")
        sys.exit(1)
    builders = {
        "verify_credentials": api.account_verify_credentials,
        "account": lambda: api.account(argument),
        "status": lambda: api.status(argument),
        "context": lambda: api.status_context(argument),
        "notifications": lambda: api.notifications(limit=arguments.limit),
        "home": lambda: api.timelines_home(limit=arguments.limit),
        "public": lambda: api.timelines_public(limit=arguments.limit),
        "instance": api.instance,
        "search": lambda: api.search_v2(argument, limit=arguments.limit),
    }
    return builders[name]()


def to_json(result: Any) -> str:
    """Encode a decoded response, which may be a list of entities."""
    if isinstance(result, list):
        return json.dumps(
            [encode_entity(item) for item in result], indent=2, ensure_ascii=False)
    return encode_string(result, indent=2)


async def register(
    api: Mastodon,
    arguments: Namespace,
    store: cache_manager.AuthorizationStore,
) -> None:
    """Create an app on the server, unless there is one, and print its URL."""
    app = store.load_app(api.server)
    if app is None:
        app = await login.create_app(api, arguments.client_name)
        store.save_app(api.server, app)
    print(login.authorization_url(api.server, app))


async def log_in(
    api: Mastodon,
    arguments: Namespace,
    store: cache_manager.AuthorizationStore,
) -> None:
    """Exchange the authorization code for a token and store it."""
    app = store.load_app(api.server)
    if app is None or not arguments.argument:
        logging.critical("Run `register` first, then `login <code>`")
        sys.exit(1)
    authorization = await login.login(api, app, arguments.argument)
    store.save_authorization(authorization)
    print(f"Logged in to {authorization.server}")


async def main(arguments: Namespace) -> None:
    """Run fedicodec."""
    helpers.setup_logging(arguments.log_level)

    store = cache_manager.AuthorizationStore(arguments.state_dir)
    authorization = store.load_authorization()

    server = arguments.server or (authorization.server if authorization else None)
    if server is None:
        logging.critical("You must supply a server name")
        sys.exit(1)
    token = arguments.access_token
    if token is None and authorization is not None \
            and authorization.server == normalize_server(server):
        token = authorization.token

    async with Mastodon(server, token, timeout=arguments.http_timeout) as api:
        try:
            if arguments.request == "register":
                await register(api, arguments, store)
                return
            if arguments.request == "login":
                await log_in(api, arguments, store)
                return
            result = await api.send(build_request(api, arguments))
        except MastodonError:
            logging.exception(f"Error fetching {arguments.request} from {api.server}")
            sys.exit(1)
    print(to_json(result))


def run() -> None:
    """Console script entry point."""
    asyncio.run(main(parse_arguments()))

"""argparser.py - Parses command line arguments."""
import argparse
import json
import logging
import sys
from pathlib import Path

REQUESTS = (
    "register",
    "login",
    "verify_credentials",
    "account",
    "status",
    "context",
    "notifications",
    "home",
    "public",
    "instance",
    "search",
)

argparser=argparse.ArgumentParser(
    description="Fetch one entity from a Mastodon server and print it as JSON.")

argparser.add_argument("request", choices=REQUESTS, help="What to fetch. \
    `register` creates an app on the server and prints the URL to authorize it; \
    `login` exchanges the code that page shows for a token and stores it.")
argparser.add_argument("argument", nargs="?", default=None, help="The id of the \
    account or status, the search query, or the authorization code for `login`.")
argparser.add_argument("-c","--config", required=False, type=str, help="Optionally \
    provide a path to a JSON file containing configuration options. If not provided, \
    options must be supplied using command line flags.")
argparser.add_argument("--server", required=False, help="The name of \
    your server (e.g. `mastodon.social`). Defaults to the server you last logged \
    in to.")
argparser.add_argument("--access-token", required=False, help="The access token \
    to use. Defaults to the token stored by `login`.")
argparser.add_argument("--client-name", required=False, default="fedicodec",
    help="The application name shown to the user when registering.")
argparser.add_argument("--limit", required = False, type=int, default=None,
    help="The maximum number of entities to fetch for list requests.")
argparser.add_argument("--http-timeout", required = False, type=int, default=60,
    help="The timeout for any HTTP requests to the server.")
argparser.add_argument("--state-dir", required = False, default="artifacts",
    help="Directory to store the registered apps and the authorization")
argparser.add_argument("--log-level", required = False, type=int, default=20,
    help="Set the log level. 10=DEBUG, 20=INFO, 30=WARNING, 40=ERROR, 50=CRITICAL")


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the command line, then apply the config file if one is given.

    Keys of the config file override command line flags; dashes in keys are
    read as underscores.
    """
    arguments = argparser.parse_args(argv)
    if arguments.config:
        if not Path(arguments.config).exists():
            logging.critical(f"Config file {arguments.config} doesn't exist")
            sys.exit(1)
        with Path(arguments.config).open(encoding="utf-8") as file:
            config = json.load(file)
        for key in config:
            setattr(arguments, key.lower().replace("-","_"), config[key])
    return arguments

"""Command line client for the portal."""

import argparse
import asyncio
import sys

import httpx
import pydantic

from query_portal import seed
from query_portal.adapters.file_local_storage import build_local_storage
from query_portal.adapters.portal_api_client import HttpxPortalClient, PortalResponse
from query_portal.app_logging import configure_logging
from query_portal.config import Settings
from query_portal.domain.models import PublicProfile
from query_portal.services.session_cache import SessionCache


def build_parser() -> argparse.ArgumentParser:
    """Return the CLI argument parser."""
    parser = argparse.ArgumentParser(prog="query-portal", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    login = commands.add_parser("login", help="Log in and remember the user")
    login.add_argument("email")
    login.add_argument("password")

    signup = commands.add_parser("signup", help="Create an account and log in")
    signup.add_argument("name")
    signup.add_argument("email")
    signup.add_argument("password")

    commands.add_parser("logout", help="Forget the remembered user")
    commands.add_parser("whoami", help="Show the remembered user")

    seed_parser = commands.add_parser("seed", help="Load a sample dataset")
    seed_parser.add_argument("dataset", choices=[*seed.DATASETS, "all"])
    return parser


async def _submit(settings: Settings, args: argparse.Namespace) -> PortalResponse:
    client = HttpxPortalClient.create(settings.api_base_url)
    try:
        if args.command == "login":
            return await client.login(args.email, args.password)
        return await client.signup(args.name, args.email, args.password)
    finally:
        await client.close()


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the exit code."""
    args = build_parser().parse_args(argv)
    try:
        settings = Settings()
    except pydantic.ValidationError as exc:
        print(f"Error: invalid configuration: {exc}", file=sys.stderr)
        return 1
    configure_logging(settings.log_level)

    if args.command == "seed":
        if args.dataset == "all":
            return seed.seed_all()
        return seed.run_job([args.dataset])

    cache = SessionCache(build_local_storage(settings.session_cache_path))
    if args.command == "logout":
        cache.clear()
        print("Logged out")
        return 0
    if args.command == "whoami":
        profile = cache.load()
        if profile is None:
            print("Not logged in")
            return 1
        print(f"{profile.name or profile.email} <{profile.email}>")
        return 0

    try:
        response = asyncio.run(_submit(settings, args))
    except httpx.HTTPError as exc:
        print(f"Error: could not reach {settings.api_base_url}: {exc}", file=sys.stderr)
        return 1
    if not response.ok:
        print(f"Error: {response.error}", file=sys.stderr)
        return 1

    user = response.payload.get("user")
    try:
        profile = PublicProfile.from_dict(user if isinstance(user, dict) else {})
    except (KeyError, ValueError):
        print("Error: server returned no user", file=sys.stderr)
        return 1
    cache.save(profile)
    print(f"Logged in as {profile.email}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

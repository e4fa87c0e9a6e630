#!/usr/bin/env python3
"""Check a user's password, and optionally a group membership, against Crowd.

Settings come from CROWD_* environment variables and/or an INI file with a
[crowd] section (BASE_URL, APP_NAME, APP_PASSWORD, TIMEOUT, VERIFY).

Usage:
    python scripts/crowd_check.py alice
    python scripts/crowd_check.py alice --group jira-users --config crowd.ini
"""

import argparse
import getpass
import logging
import sys


def main() -> None:
    from crowdcontrol import ConfigError, from_config, load_config
    from crowdcontrol.config import describe

    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("username")
    parser.add_argument("--group", help="also check direct membership of this group")
    parser.add_argument("--config", help="path to an INI file with a [crowd] section")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(2)

    if args.verbose:
        for key, value in describe(config).items():
            print(f"  {key} = {value}")

    auth, groups = from_config(config)
    password = getpass.getpass(prompt=f"Enter password for {args.username}: ")

    result = auth.execute(args.username, password)
    if result.is_error():
        error = result.get_error()
        print(f"Failed to authenticate: {error.reason} - {error.message}")
        sys.exit(1)

    user = result.get_value()
    print(f"Authenticated {user.username} ({user.display_name}, {user.email})")
    if not user.active:
        print("  note: account is marked inactive")

    if args.group:
        membership = groups.execute(args.username, args.group)
        if membership.is_error():
            error = membership.get_error()
            print(f"Not a direct member of {args.group}: {error.reason} - {error.message}")
            sys.exit(1)
        print(f"Direct member of {membership.get_value().name}")


if __name__ == "__main__":
    main()

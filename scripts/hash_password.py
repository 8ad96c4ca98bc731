#!/usr/bin/env python3
"""Print a bcrypt hash of the admin password for AUTH__ADMIN_PASSWORD."""

import getpass
import sys

import bcrypt


def main() -> int:
    """Read the password twice and print its hash."""
    password = getpass.getpass("Admin password: ")
    if not password:
        print("Password must not be empty", file=sys.stderr)
        return 1
    if getpass.getpass("Repeat: ") != password:
        print("Passwords do not match", file=sys.stderr)
        return 1

    print(bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode())
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""CLI tool to store a GitHub API token in the system keyring."""

import getpass
import sys

from .config import SERVICE_NAME, load_token, save_token
from .github import TOKEN_ENV_VAR


def main():
    print("gqlhttp - Token Setup")
    print("=" * 40)

    if load_token(TOKEN_ENV_VAR):
        choice = input("A token is already configured. Overwrite? [y/N]: ").strip().lower()
        if choice != "y":
            print("Keeping existing token.")
            return

    token = getpass.getpass("GitHub token: ").strip()
    if not token:
        print("Token cannot be empty.", file=sys.stderr)
        sys.exit(1)

    if save_token(TOKEN_ENV_VAR, token):
        print(f"Token saved to system keyring (service: {SERVICE_NAME})")
    else:
        print("Failed to save token.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

"""Runs a repository search against the GitHub GraphQL API.

See https://docs.github.com/en/graphql/overview/explorer to learn more about
the GitHub schema.
"""

import logging
import sys

from pydantic import BaseModel

from .client import GraphQLClient
from .config import ClientOptions, bearer, load_token
from .errors import RequestError
from .models import DataResult, Request

logger = logging.getLogger(__name__)

GITHUB_ENDPOINT = "https://api.github.com/graphql"
TOKEN_ENV_VAR = "GH_TOKEN"

SEARCH_QUERY = """query test {
  search(first: 100, type: REPOSITORY, query: "topic:zig") {
      repositoryCount
  }
}"""


class Search(BaseModel):
    repositoryCount: int


class SearchData(BaseModel):
    search: Search


def main():
    token = load_token(TOKEN_ENV_VAR)
    if not token:
        print(
            f"ERROR: Required {TOKEN_ENV_VAR} containing a GitHub API token - "
            "https://github.com/settings/tokens\n"
            "Configure it via one of:\n"
            f"  1. Set the {TOKEN_ENV_VAR} environment variable\n"
            "  2. Run: gqlhttp-setup (system keyring)",
            file=sys.stderr,
        )
        sys.exit(1)

    options = ClientOptions(endpoint=GITHUB_ENDPOINT, authorization=bearer(token))
    with GraphQLClient.from_options(options) as github:
        try:
            owned = github.send(Request(query=SEARCH_QUERY, operationName="test"), SearchData)
        except RequestError as e:
            logger.error(f"Request failed with {type(e).__name__}: {e}")
            sys.exit(1)

        with owned as response:
            result = response.result()
            if isinstance(result, DataResult):
                print(f"zig repo count {result.data.search.repositoryCount}")
            else:
                for err in result.errors:
                    print(f"Error: {err}")


if __name__ == "__main__":
    main()

"""
Social Graph Explorer CLI - browse friend lists and connections interactively.

Usage:
    social-graph data/network.txt
    social-graph                      # prompts for the file path
    social-graph data/network.txt --raw-scan --verbose

Menu:
    1. Display friend list   - direct friends of one account
    2. Display connections   - a chain of friendships between two accounts
    3. Exit
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from typing import TextIO

from social_graph.config import DEFAULT_NETWORK_PATH, LOG_LEVEL, MENU_RULE_WIDTH
from social_graph.data import NetworkData, NetworkFileError, load_network
from social_graph.graph import (
    AccountNotFoundError,
    ConnectionStatus,
    SocialGraph,
    find_connection,
    friends_of,
)

logger = logging.getLogger(__name__)

RULE = "=" * MENU_RULE_WIDTH


class Explorer:
    """
    Interactive menu over a loaded social graph.

    Reads choices through `input_fn` and writes everything to `output`,
    so the menu can be driven from tests as well as a terminal.
    """

    def __init__(
        self,
        graph: SocialGraph,
        network: NetworkData,
        raw_scan: bool = False,
        input_fn: Callable[[str], str] | None = None,
        output: TextIO | None = None,
    ) -> None:
        """
        Initialize the explorer.

        Args:
            graph: Graph to query
            network: Parsed network the graph was built from
            raw_scan: List friends by re-scanning the raw edge list
            input_fn: Prompt function (defaults to builtin input)
            output: Stream for results (defaults to stdout)
        """
        self._graph = graph
        self._network = network
        self._raw_scan = raw_scan
        self._input = input_fn if input_fn is not None else input
        self._output = output if output is not None else sys.stdout

    def _print(self, text: str = "") -> None:
        print(text, file=self._output)

    def _ask(self, prompt: str) -> str:
        self._output.flush()
        return self._input(prompt).strip()

    def _read_id(self, prompt: str) -> int | None:
        """Prompt for an account id; None if the input is not a whole number."""
        answer = self._ask(prompt)
        try:
            return int(answer)
        except ValueError:
            self._print("\nInvalid ID. Please enter a whole number.")
            return None

    def run(self) -> None:
        """Show the main menu until the user exits or input ends."""
        while True:
            self._print("\nMAIN MENU")
            self._print("1. Display friend list")
            self._print("2. Display connections")
            self._print("3. Exit")

            try:
                choice = self._ask("\nPlease select an option: ")
                if choice == "1":
                    self.show_friend_list()
                elif choice == "2":
                    self.show_connection()
                elif choice == "3":
                    self._print("\nExiting the program...")
                    return
                else:
                    self._print("\nInvalid input. Please try again.")
            except EOFError:
                self._print("\nExiting the program...")
                return

    def show_friend_list(self) -> None:
        """Prompt for an account and print its friends."""
        account = self._read_id("Enter ID Number: ")
        if account is None:
            return

        edges = self._network.edges if self._raw_scan else None
        try:
            friends = friends_of(self._graph, account, edges)
        except AccountNotFoundError:
            self._print(f"\n{RULE}")
            self._print("\nID does not exist.. Returning to Main Menu..")
            self._print(f"\n{RULE}")
            return

        self._print(f"\n{RULE}")
        self._print("Number of Friends".center(MENU_RULE_WIDTH))
        self._print(f"\nUser {account} has {len(friends)} friend/s")
        self._print(f"\n{RULE}")
        self._print("Friend List".center(MENU_RULE_WIDTH))
        self._print(f"\nUser {account}'s Friend List:")
        for friend in friends:
            self._print(str(friend))
        self._print(f"\n{RULE}")
        self._print("Friend list successfully displayed!")

    def show_connection(self) -> None:
        """Prompt for two accounts and print how they are connected."""
        source = self._read_id("Enter ID of first person: ")
        if source is None:
            return
        target = self._read_id("Enter ID of second person: ")
        if target is None:
            return

        result = find_connection(self._graph, source, target)

        if result.status is ConnectionStatus.NOT_FOUND:
            self._print(f"\n{RULE}")
            self._print("\nOne or both of the inputted IDs do not exist in the dataset.")
            self._print(f"\n{RULE}")
        elif result.status is ConnectionStatus.SAME_ACCOUNT:
            self._print(f"\n{RULE}")
            self._print("\nThe two IDs inputted are the same.")
            self._print(f"\n{RULE}")
        elif result.status is ConnectionStatus.NO_PATH:
            self._print(f"\nCannot find a connection between {source} and {target}")
        else:
            self._print(f"\n{RULE}")
            self._print("Friend Connection".center(MENU_RULE_WIDTH))
            self._print(f"\nThere is a connection from {source} to {target}!")
            for account, friend in result.friendships():
                self._print(f"\n{account} is friends with {friend}")
            self._print(f"\n{RULE}")
            self._print("Friend connection successfully displayed!")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Explore friend lists and connections in a social network",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Network file to load (prompted for if omitted)",
    )
    parser.add_argument(
        "--raw-scan",
        action="store_true",
        help="Build friend lists by re-scanning the raw friendship list",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    path = args.file
    if path is None:
        try:
            path = input(f"Please enter the file path [{DEFAULT_NETWORK_PATH}]: ").strip()
        except EOFError:
            print()
            return 1
        except KeyboardInterrupt:
            print("\n\nInterrupted by user")
            return 130  # Standard exit code for Ctrl+C
        path = path or str(DEFAULT_NETWORK_PATH)

    print("\nLoading data...")
    try:
        graph, network = load_network(path)
    except NetworkFileError as e:
        logger.error(str(e))
        print("Failed to open and read the file!")
        return 1
    print("\nFile successfully loaded!")

    explorer = Explorer(graph, network, raw_scan=args.raw_scan)
    try:
        explorer.run()
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        return 130  # Standard exit code for Ctrl+C

    return 0


if __name__ == "__main__":
    sys.exit(main())

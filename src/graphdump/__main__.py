"""
Entry point for running graphdump as a module

Prints a small sample graph, then a graph with a reference cycle.

Copyright (c) 2026 graphdump contributors

MIT License
"""

import sys
from graphdump.logger import set_global_logging
from graphdump import print_object, __version__


class NestedExample:
    def __init__(self):
        self.value = 3.14
        self.name = "Nested"


class Example:
    def __init__(self):
        self.number = 42
        self.text = "Hello"
        self.nested = NestedExample()
        self.nested_list = None
        self.nested_map = None


class Node:
    def __init__(self, name, next_node=None):
        self.name = name
        self.next_node = next_node


def build_example() -> Example:
    """Sample graph with a nested object, a list and a dict."""
    example = Example()
    example.nested_list = ["one", "two", "three"]
    example.nested_map = {"key1": "value1", "key2": "value2"}
    return example


def build_cycle() -> Node:
    """Two nodes pointing at each other."""
    first = Node("first")
    first.next_node = Node("second", first)
    return first


def main():
    """Main entry point"""
    level = sys.argv[1] if len(sys.argv) > 1 else "WARNING"
    logger = set_global_logging(level=level)
    logger.info(f"graphdump v{__version__} starting...")

    print_object(build_example())
    print_object(build_cycle())

    logger.info("Application completed successfully")


if __name__ == "__main__":
    main()

"""Minimal example rendering a few keys in both target languages."""

from propkeys.key_tree import build_tree, sorted_keys
from propkeys.properties import parse_properties
from propkeys.renderers import render


_PROPERTIES = """\
web.port = 8080
web.host = localhost
realm.ldap.server = ldap://example
name = demo
"""


def main() -> None:
    """Print the generated Python and Java sources for a small key set."""
    keys = sorted_keys(parse_properties(_PROPERTIES))
    root = build_tree(keys)
    print("keys:", keys)
    print(render(root, "com.acme.Keys"))
    print(render(root, "com.acme.Keys", language="java"))


if __name__ == "__main__":
    main()

"""Command line entry point that runs the pattern demonstrations."""

from __future__ import annotations

import argparse
from typing import Callable, Sequence

from patternkit import (
    adapter,
    aggregation,
    bridge,
    decorator,
    deep_copy,
    dip,
    email_builder,
    facade,
    facets,
    factory,
    function_builder,
    geometric,
    html_builder,
    lsp,
    neural,
    ocp,
    office,
    singleton,
    text_format,
    user_names,
)

DEMOS: dict[str, Callable[[], None]] = {
    "adapter": adapter.demo,
    "bridge": bridge.demo,
    "builder": function_builder.demo,
    "composite": geometric.demo,
    "decorator": decorator.demo,
    "facade": facade.demo,
    "factory": factory.demo,
    "flyweight": user_names.demo,
    "prototype": office.demo,
    "singleton": singleton.demo,
    "solid": dip.demo,
    "aggregation": aggregation.demo,
    "deep-copy": deep_copy.demo,
    "email-builder": email_builder.demo,
    "facets": facets.demo,
    "html-builder": html_builder.demo,
    "lsp": lsp.demo,
    "neural": neural.demo,
    "ocp": ocp.demo,
    "text-format": text_format.demo,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the named demonstrations, or list them when none is named."""
    parser = argparse.ArgumentParser(
        prog="patternkit", description="Run design pattern demonstrations."
    )
    parser.add_argument("demos", nargs="*", choices=sorted(DEMOS), metavar="DEMO")
    args = parser.parse_args(argv)

    if not args.demos:
        print("Available demos:")
        for name in sorted(DEMOS):
            print(f"  {name}")
        return 0

    for name in args.demos:
        DEMOS[name]()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
#!/usr/bin/env python3
"""
Demo script for package autocomplete.

Runs completion and hover against the live NuGet feed for a few sample
directive lines.
"""

import asyncio
import time

from package_autocomplete.repositories import MemoryQueryCache, NuGetClient
from package_autocomplete.services import CompletionService, HoverService, PackageService


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


async def demo_completion(completions: CompletionService) -> None:
    """Demonstrate completion for each directive form."""
    print_section("Completion")

    lines = [
        "#:",
        "#:package Humani",
        "#:package Newtonsoft.Json@13",
        "#:sdk Web",
        "#:property Lang",
        "#:property Nullable=",
    ]

    for line in lines:
        result = await completions.complete(line)
        kind = result.context.kind.value if result.context else "none"
        print(f"\n  {line!r}  ({kind})")
        for item in sorted(result.items, key=lambda i: i.sort_text or "")[:5]:
            print(f"    → {item.insert_text:<40} {item.detail or ''}")


async def demo_cache(packages: PackageService) -> None:
    """Show that repeated searches are served from the cache."""
    print_section("Search cache")

    for attempt in range(2):
        start_time = time.time()
        results = await packages.search_packages("json")
        elapsed_ms = (time.time() - start_time) * 1000
        print(f"  Attempt {attempt + 1}: {len(results)} packages in {elapsed_ms:.1f}ms")

    print(f"  Stats: {packages.get_stats()}")


async def demo_hover(hovers: HoverService) -> None:
    """Demonstrate hover documentation."""
    print_section("Hover")

    for line, character in [("#:package Humanizer@2.14.1", 12), ("#:sdk Microsoft.NET.Sdk.Web", 8)]:
        info = await hovers.hover(line, character)
        print(f"\n  {line!r} @ {character}")
        print("    " + (info.contents.replace("\n\n", "\n    ") if info else "(nothing)"))


async def main() -> None:
    client = NuGetClient.create()
    packages = PackageService.create(source=client, cache=MemoryQueryCache.create())
    try:
        await demo_completion(CompletionService(package_service=packages))
        await demo_cache(packages)
        await demo_hover(HoverService(package_service=packages))
    finally:
        await client.close()


if __name__ == "__main__":
    asyncio.run(main())

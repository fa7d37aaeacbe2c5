"""Render packages, versions and registry entries as suggestions and hovers."""

from package_autocomplete.config import settings
from package_autocomplete.dto import SuggestionItem, SuggestionKind
from package_autocomplete.entities import PackageRecord
from package_autocomplete.registries import PropertyInfo, SdkInfo

# Download counts above this all share the top rank.
_MAX_RANK = 10**15 - 1
_UNRANKED = "~"  # sorts after every digit


def format_downloads(count: int) -> str:
    """Format a download count with thousands separators."""
    return f"{count:,}"


def download_sort_key(total_downloads: int | None, position: int = 0) -> str:
    """Sort key putting more downloads first.

    Packages without a download count sort last. ``position`` (the feed's
    relevance order) breaks ties.
    """
    if total_downloads is None:
        return f"{_UNRANKED}{position:04d}"
    rank = _MAX_RANK - min(max(total_downloads, 0), _MAX_RANK)
    return f"{rank:015d}-{position:04d}"


def package_url(package_id: str) -> str:
    return f"{settings.nuget_gallery_url.rstrip('/')}/{package_id}"


def package_markdown(package: PackageRecord) -> str:
    """Markdown shown next to a package suggestion."""
    parts = [f"**{package.id}**"]
    if package.description:
        parts.append(package.description)
    parts.append(f"Version: `{package.latest_version}`")
    if package.total_downloads:
        parts.append(f"Downloads: {format_downloads(package.total_downloads)}")
    parts.append(f"[View on NuGet]({package_url(package.id)})")
    return "\n\n".join(parts)


def package_hover_markdown(package: PackageRecord, pinned_version: str | None = None) -> str:
    """Markdown shown when hovering a package id."""
    parts = [f"**{package.id}**"]
    if package.description:
        parts.append(package.description)
    if pinned_version:
        parts.append(f"Referenced Version: `{pinned_version}`")
    parts.append(f"Current Version: `{package.latest_version}`")
    if package.total_downloads:
        parts.append(f"Total Downloads: {format_downloads(package.total_downloads)}")
    parts.append(f"[View on NuGet]({package_url(package.id)})")
    return "\n\n".join(parts)


def package_item(package: PackageRecord, replace_start: int, position: int = 0) -> SuggestionItem:
    """Suggestion inserting ``id@latestVersion``."""
    detail = f"v{package.latest_version}"
    if package.total_downloads:
        detail += f" • {format_downloads(package.total_downloads)} downloads"
    return SuggestionItem(
        label=package.id,
        kind=SuggestionKind.MODULE,
        insert_text=f"{package.id}@{package.latest_version}",
        replace_start=replace_start,
        detail=detail,
        documentation=package_markdown(package),
        sort_text=download_sort_key(package.total_downloads, position),
    )


def version_items(versions: list[str], replace_start: int) -> list[SuggestionItem]:
    """Suggestions for versions already sorted newest first."""
    return [
        SuggestionItem(
            label=version,
            kind=SuggestionKind.VALUE,
            insert_text=version,
            replace_start=replace_start,
            detail=f"Version {version}",
            sort_text=f"{index:04d}",
        )
        for index, version in enumerate(versions)
    ]


def sdk_markdown(sdk: SdkInfo) -> str:
    parts = [f"**{sdk.name}**", sdk.description]
    if sdk.docs_url:
        parts.append(f"[Documentation]({sdk.docs_url})")
    return "\n\n".join(parts)


def sdk_item(sdk: SdkInfo, replace_start: int, position: int = 0) -> SuggestionItem:
    return SuggestionItem(
        label=sdk.name,
        kind=SuggestionKind.MODULE,
        insert_text=sdk.name,
        replace_start=replace_start,
        detail="MSBuild SDK",
        documentation=sdk_markdown(sdk),
        sort_text=f"{position:04d}",
    )


def property_markdown(prop: PropertyInfo) -> str:
    parts = [f"**{prop.name}**", prop.description]
    if prop.values:
        parts.append("Common values: " + ", ".join(f"`{v}`" for v in prop.values))
    if prop.default:
        parts.append(f"Example: `#:property {prop.name}={prop.default}`")
    return "\n\n".join(parts)


def property_item(prop: PropertyInfo, replace_start: int, position: int = 0) -> SuggestionItem:
    return SuggestionItem(
        label=prop.name,
        kind=SuggestionKind.PROPERTY,
        insert_text=prop.name,
        replace_start=replace_start,
        detail="MSBuild property",
        documentation=property_markdown(prop),
        sort_text=f"{position:04d}",
    )


def property_value_items(prop_name: str, values: list[str], replace_start: int) -> list[SuggestionItem]:
    return [
        SuggestionItem(
            label=value,
            kind=SuggestionKind.ENUM_MEMBER,
            insert_text=value,
            replace_start=replace_start,
            detail=f"{prop_name} value",
            sort_text=f"{index:04d}",
        )
        for index, value in enumerate(values)
    ]


def directive_markdown(keyword: str, description: str) -> str:
    return f"**#:{keyword}**\n\n{description}"


def directive_item(keyword: str, description: str, position: int = 0) -> SuggestionItem:
    """Suggestion replacing the whole ``#...`` stub with ``#:<keyword> ``."""
    return SuggestionItem(
        label=keyword,
        kind=SuggestionKind.KEYWORD,
        insert_text=f"#:{keyword} ",
        replace_start=0,
        detail=f"#:{keyword} directive",
        documentation=directive_markdown(keyword, description),
        sort_text=f"{position:04d}",
    )

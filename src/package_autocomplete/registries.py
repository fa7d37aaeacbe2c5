"""Reference data for the ``#:sdk`` and ``#:property`` directives.

Each table is defined once and shared by completion and hover, so both
always describe the same SDKs and properties.
"""

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class SdkInfo:
    """An MSBuild project SDK usable with ``#:sdk``."""

    name: str
    description: str
    docs_url: str | None = None


@dataclass(frozen=True)
class PropertyInfo:
    """An MSBuild property settable with ``#:property``.

    ``values`` lists the common values offered for completion; it is not
    an exhaustive set of legal values.
    """

    name: str
    description: str
    values: tuple[str, ...] = ()
    default: str | None = None


_BOOLEAN = ("true", "false")

_SDKS = (
    SdkInfo(
        "Microsoft.NET.Sdk",
        "The default SDK for console apps and class libraries.",
        "https://learn.microsoft.com/dotnet/core/project-sdk/overview",
    ),
    SdkInfo(
        "Microsoft.NET.Sdk.Web",
        "ASP.NET Core SDK for web apps and APIs. Adds the ASP.NET Core shared framework.",
        "https://learn.microsoft.com/aspnet/core/razor-pages/web-sdk",
    ),
    SdkInfo(
        "Microsoft.NET.Sdk.Worker",
        "SDK for long-running worker services and background processing.",
        "https://learn.microsoft.com/dotnet/core/extensions/workers",
    ),
    SdkInfo(
        "Microsoft.NET.Sdk.Razor",
        "SDK for Razor class libraries and components.",
        "https://learn.microsoft.com/aspnet/core/razor-pages/sdk",
    ),
    SdkInfo(
        "Microsoft.NET.Sdk.BlazorWebAssembly",
        "SDK for Blazor WebAssembly apps.",
        "https://learn.microsoft.com/aspnet/core/blazor/",
    ),
    SdkInfo(
        "Microsoft.NET.Sdk.WindowsDesktop",
        "SDK for Windows Forms and WPF apps (Windows only).",
        "https://learn.microsoft.com/dotnet/core/project-sdk/msbuild-props-desktop",
    ),
    SdkInfo(
        "Aspire.AppHost.Sdk",
        "SDK for .NET Aspire app host projects. Usually pinned with a version, e.g. @9.3.0.",
        "https://learn.microsoft.com/dotnet/aspire/fundamentals/app-host-overview",
    ),
    SdkInfo(
        "MSTest.Sdk",
        "SDK for MSTest test projects.",
        "https://learn.microsoft.com/dotnet/core/testing/unit-testing-mstest-sdk",
    ),
)

_PROPERTIES = (
    PropertyInfo(
        "TargetFramework",
        "The target framework moniker the program is built for.",
        ("net10.0", "net9.0", "net8.0"),
    ),
    PropertyInfo(
        "LangVersion",
        "The C# language version used by the compiler.",
        ("latest", "preview", "default", "latestMajor", "14", "13", "12"),
        "latest",
    ),
    PropertyInfo(
        "Nullable",
        "Controls the nullable reference types context.",
        ("enable", "disable", "warnings", "annotations"),
        "enable",
    ),
    PropertyInfo(
        "ImplicitUsings",
        "Adds global using directives for the SDK's common namespaces.",
        ("enable", "disable"),
        "enable",
    ),
    PropertyInfo(
        "OutputType",
        "The kind of output the build produces.",
        ("Exe", "WinExe", "Library"),
        "Exe",
    ),
    PropertyInfo(
        "PublishAot",
        "Publishes the program as a native ahead-of-time compiled executable.",
        _BOOLEAN,
        "true",
    ),
    PropertyInfo("PublishTrimmed", "Trims unused code when publishing.", _BOOLEAN, "false"),
    PropertyInfo("SelfContained", "Bundles the .NET runtime with the published output.", _BOOLEAN),
    PropertyInfo(
        "RuntimeIdentifier",
        "The runtime the program is built and published for.",
        ("win-x64", "win-arm64", "linux-x64", "linux-arm64", "osx-x64", "osx-arm64"),
    ),
    PropertyInfo("AllowUnsafeBlocks", "Allows code that uses the unsafe keyword.", _BOOLEAN, "false"),
    PropertyInfo("InvariantGlobalization", "Runs without culture-specific data.", _BOOLEAN, "false"),
    PropertyInfo("TreatWarningsAsErrors", "Reports all compiler warnings as errors.", _BOOLEAN, "false"),
    PropertyInfo(
        "EnablePreviewFeatures",
        "Enables preview runtime and library features.",
        _BOOLEAN,
        "false",
    ),
    PropertyInfo("UserSecretsId", "Identifier of the user secrets store used by the program."),
    PropertyInfo("AssemblyName", "Name of the output assembly."),
    PropertyInfo("RootNamespace", "Default namespace for generated code."),
    PropertyInfo("Version", "The program's version number.", ("1.0.0",)),
    PropertyInfo("WarningLevel", "The compiler warning level.", ("0", "1", "2", "3", "4", "9999")),
)

SDK_REGISTRY: MappingProxyType[str, SdkInfo] = MappingProxyType({s.name.lower(): s for s in _SDKS})
PROPERTY_REGISTRY: MappingProxyType[str, PropertyInfo] = MappingProxyType(
    {p.name.lower(): p for p in _PROPERTIES}
)

# Directive keywords offered after "#:".
DIRECTIVES: MappingProxyType[str, str] = MappingProxyType(
    {
        "package": "Reference a NuGet package: `#:package Name@Version`",
        "sdk": "Use an MSBuild project SDK: `#:sdk Microsoft.NET.Sdk.Web`",
        "property": "Set an MSBuild property: `#:property Name=Value`",
    }
)


def get_sdk(name: str) -> SdkInfo | None:
    """Look up an SDK by name (case-insensitive)."""
    return SDK_REGISTRY.get(name.lower())


def get_property(name: str) -> PropertyInfo | None:
    """Look up a property by name (case-insensitive)."""
    return PROPERTY_REGISTRY.get(name.lower())


def match_sdks(query: str) -> list[SdkInfo]:
    """SDKs whose name contains ``query`` (case-insensitive), in table order."""
    needle = query.lower()
    return [sdk for key, sdk in SDK_REGISTRY.items() if needle in key]


def match_properties(query: str) -> list[PropertyInfo]:
    """Properties whose name matches ``query``: prefix matches first, then substring."""
    needle = query.lower()
    prefixed = [p for key, p in PROPERTY_REGISTRY.items() if key.startswith(needle)]
    contained = [p for key, p in PROPERTY_REGISTRY.items() if needle in key and not key.startswith(needle)]
    return prefixed + contained


def match_property_values(name: str, prefix: str) -> list[str]:
    """Known values of property ``name`` starting with ``prefix`` (case-insensitive)."""
    info = get_property(name)
    if info is None:
        return []
    needle = prefix.lower()
    return [v for v in info.values if v.lower().startswith(needle)]

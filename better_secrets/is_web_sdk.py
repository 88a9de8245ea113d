"""Predicate for web-platform SDK markers."""

WEB_SDK_PREFIX = "Microsoft.NET.Sdk.Web"


def is_web_sdk(sdk: str, prefix: str = WEB_SDK_PREFIX) -> bool:
    """Check if the SDK marker names a web SDK (case-insensitive prefix match)."""
    return sdk.lower().startswith(prefix.lower())

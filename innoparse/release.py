"""Program name, version and the range of supported Inno Setup versions."""

NAME = "innoparse"

VERSION = "1.9"

INNOSETUP_VERSIONS = "Inno Setup 1.2.10 to 6.2.1"


def version_string() -> str:
    """Program name followed by its version."""
    return f"{NAME} {VERSION}"
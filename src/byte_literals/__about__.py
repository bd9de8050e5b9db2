# byte_literals/__about__.py

APP_NAME        = "Byte Literals"
APP_TITLE       = "Byte-array literal parser (hex, \\x, 0x, 0b, decimal)"


__version__ = "0.1.0"

__all__ = [
    "__version__",
    "APP_NAME", "APP_TITLE",
]

def about_text() -> str:
    return (
        f"{APP_NAME}: {APP_TITLE}\n"
        f"Version {__version__}"
    )

# gitup/banner.py
import sys

# --- color constants ---
END = "\033[0m"
LIGHT_BLUE = 117                     # 256-color light blue

def _color(s: str) -> str:
    """Wrap a whole string in a single light-blue ANSI color."""
    return f"\033[38;5;{LIGHT_BLUE}m{s}{END}"

def print_banner(title: str = "GitUp Configuration", stream=None) -> None:
    """Print ``=== title ===``, colored only when the stream is a terminal."""
    stream = stream or sys.stdout
    line = f"=== {title} ==="
    isatty = getattr(stream, "isatty", None)
    if isatty is not None and isatty():
        line = _color(line)
    print(line, file=stream)

def ok(msg: str) -> str:
    return f"✓ {msg}"

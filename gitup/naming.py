# gitup/naming.py
import re

RAW_BASE_URL = "https://raw.githubusercontent.com"
DEFAULT_FOLDER = "files"
PLACEHOLDER_NAME = "file"

TRANSLITERATION = {
    "ä": "ae",
    "ö": "o",
    "ü": "ue",
    "ß": "ss",
    "á": "a", "à": "a", "â": "a", "ã": "a", "å": "a", "ā": "a",
    "é": "e", "è": "e", "ê": "e", "ë": "e",
    "ī": "i", "í": "i", "ì": "i", "î": "i",
    "ñ": "n",
    "ó": "o", "ò": "o", "ô": "o", "õ": "o", "ø": "o",
    "ū": "u", "ú": "u", "ù": "u", "û": "u",
    "ç": "c",
    "ý": "y", "ÿ": "y",
}

FOLDERS = {
    # images
    ".png": "img", ".jpg": "img", ".jpeg": "img", ".gif": "img",
    ".svg": "img", ".webp": "img", ".ico": "img",
    # data
    ".json": "data", ".xml": "data", ".csv": "data",
    ".yaml": "data", ".yml": "data", ".toml": "data",
    # documents
    ".pdf": "docs", ".md": "docs", ".txt": "docs", ".doc": "docs", ".docx": "docs",
    # video
    ".mp4": "video", ".mov": "video", ".avi": "video", ".webm": "video",
    # audio
    ".mp3": "audio", ".wav": "audio", ".ogg": "audio", ".flac": "audio",
    # archives
    ".zip": "archives", ".tar": "archives", ".gz": "archives", ".rar": "archives",
}

# .ico is stored under img/ but linked, not embedded
IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".svg", ".webp"}

_INVALID_RE = re.compile(r"[^a-z0-9-]")


def split_extension(name: str) -> tuple[str, str]:
    """
    Split ``name`` at the last dot of its final path element.

    Unlike os.path.splitext a leading dot counts, so ``.bashrc`` is all
    extension and has an empty base.
    """
    tail = name.replace("\\", "/").rsplit("/", 1)[-1]
    idx = tail.rfind(".")
    if idx < 0:
        return name, ""
    ext = tail[idx:]
    return name[: len(name) - len(ext)], ext


def transliterate(text: str) -> str:
    """Map known accented characters to ASCII, drop any other non-ASCII."""
    out = []
    for ch in text:
        if ord(ch) <= 127:
            out.append(ch)
        elif ch in TRANSLITERATION:
            out.append(TRANSLITERATION[ch])
    return "".join(out)


def sanitize_filename(name: str) -> str:
    base, ext = split_extension(name)
    base = transliterate(base.lower()).replace(" ", "-")
    base = _INVALID_RE.sub("", base)
    return (base or PLACEHOLDER_NAME) + ext.lower()


def upload_folder(filename: str) -> str:
    ext = split_extension(filename)[1].lower()
    return FOLDERS.get(ext, DEFAULT_FOLDER)


def is_image(filename: str) -> bool:
    return split_extension(filename)[1].lower() in IMAGE_EXTENSIONS


def format_output(filename: str, url: str) -> str:
    if is_image(filename):
        return f"![{filename}]({url})"
    return f"[{filename}]({url})"


def raw_url(owner: str, repo: str, branch: str, path: str) -> str:
    return f"{RAW_BASE_URL}/{owner}/{repo}/{branch}/{path}"

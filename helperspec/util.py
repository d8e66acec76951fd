utf8_bom = b"\xef\xbb\xbf"

def strip_utf8_bom(data: bytes) -> bytes:
    # removes the utf-8 byte order mark from byte data if present.
    if data.startswith(utf8_bom):
        return data[len(utf8_bom):]
    return data

def read_text_file(path, encoding: str = "utf-8") -> str:
    # reads a template or data file, tolerating a leading bom.
    return strip_utf8_bom(path.read_bytes()).decode(encoding)

_FENCE_LANGUAGES = {
    "py": "python", "js": "javascript", "ts": "typescript", "rs": "rust",
    "sh": "bash", "md": "markdown", "yml": "yaml",
    "hbs": "handlebars", "handlebars": "handlebars",
}

def get_language_hint(extension: str | None) -> str:
    # fence language for a file extension; unknown extensions pass through.
    if not extension:
        return ""
    ext = extension.lower().strip(".")
    return _FENCE_LANGUAGES.get(ext, ext)

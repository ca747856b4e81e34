import re
from typing import Callable, Tuple

STYLE_BLOCK_PATTERN = re.compile(r'<style[^>]*>(.*?)</style>', re.IGNORECASE | re.DOTALL)


def detect_line_ending(text: str) -> str:
    """Returns the document's line ending: CRLF if any line uses it, else LF."""
    return "\r\n" if "\r\n" in text else "\n"


def split_line_ending(line: str) -> Tuple[str, str]:
    if line.endswith("\r\n"):
        return line[:-2], "\r\n"
    if line.endswith("\n"):
        return line[:-1], "\n"
    return line, ""


def split_indent(line: str) -> Tuple[str, str]:
    content = line.lstrip(" \t")
    return line[:len(line) - len(content)], content


def format_style_blocks(html: str, transform: Callable[[str], str]) -> str:
    """Applies a text transformation to the body of every <style> element.

    The opening tag is rewritten as a bare ``<style>``; any attributes it
    carried are dropped.
    """
    return STYLE_BLOCK_PATTERN.sub(lambda m: "<style>" + transform(m.group(1)) + "</style>", html)

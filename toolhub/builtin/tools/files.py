"""
File Tools
"""

from datetime import datetime, timezone
from pathlib import Path

from toolhub.api.decorators import mcp_tool


class FileService:
    """Read-only file system helpers. Missing paths are reported as text, not errors."""

    @mcp_tool(
        "Read the contents of a text file",
        name="read_file",
        category="file",
        tags=("file", "read", "io"),
        timeout_ms=5000,
        cacheable=True,
        cache_ttl_seconds=60,
    )
    def read_file(self, file_path: str) -> str:
        path = Path(file_path)
        if not path.exists():
            return f"File not found: {file_path}"
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            return f"Error reading file: {e}"

    @mcp_tool(
        "List files and directories in the specified path",
        name="list_directory",
        category="file",
        tags=("file", "directory", "list", "io"),
        timeout_ms=3000,
        cacheable=True,
        cache_ttl_seconds=30,
    )
    def list_directory(self, directory_path: str) -> list[str]:
        path = Path(directory_path)
        if not path.exists():
            return [f"Directory not found: {directory_path}"]
        if not path.is_dir():
            return [f"Path is not a directory: {directory_path}"]
        try:
            return sorted(p.name for p in path.iterdir())
        except OSError as e:
            return [f"Error listing directory: {e}"]

    @mcp_tool(
        "Get information about a file or directory (size, last modified, etc.)",
        name="get_file_info",
        category="file",
        tags=("file", "info", "metadata", "io"),
        priority=1,
        cacheable=True,
        cache_ttl_seconds=120,
    )
    def get_file_info(self, file_path: str) -> str:
        path = Path(file_path)
        if not path.exists():
            return f"File or directory not found: {file_path}"
        stat = path.stat()
        modified = datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc).isoformat()
        lines = [
            f"Path: {file_path}",
            f"Type: {'Directory' if path.is_dir() else 'File'}",
            f"Size: {stat.st_size} bytes",
            f"Last Modified: {modified}",
        ]
        return "\n".join(lines) + "\n"

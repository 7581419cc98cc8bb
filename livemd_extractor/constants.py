"""livemd-extractor constants and version information."""

__version__ = "0.1.0"
__app_name__ = "livemd-extractor"

DEFAULT_LANGUAGE = "elixir"

# Fence and marker tokens
FENCE = "```"
COMMENT_OPEN = "<!--"
FORCE_MARKDOWN_KEY = "force_markdown"

CELL_SEPARATOR = "\n\n"

# Extensions of files holding Livebook cells
LIVEBOOK_EXTENSIONS = ('.livemd', '.md', '.markdown')


def is_livebook_file(file_path: str) -> bool:
    """Check whether a path has a Livebook or markdown extension."""
    return file_path.lower().endswith(LIVEBOOK_EXTENSIONS)

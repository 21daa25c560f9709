"""Names and defaults shared across the generate_feed stage."""

TOOL_NAME = "book-rss"
TOOL_VERSION = "0.1.0"

# Section name under [preprocessor] in book.toml
PREPROCESSOR_NAME = "rss"

# mdBook release line this preprocessor is written against (major.minor)
SUPPORTED_MDBOOK_VERSION = "0.4"

SUPPORTED_RENDERERS = ("html",)

RSS_FILE_NAME = "rss.xml"
DEFAULT_BOOK_SRC = "src"
DEFAULT_DATE_PATTERN = r"\d{4}-\d{2}-\d{2}"

# Extension of rendered chapters, used when building links
RENDERED_EXTENSION = ".html"

from .validator import validate_word_pool, pretty_summary
from .io import DEFAULT_POOL_PATH, clean_pool, load_word_pool, read_lines, write_lines

__all__ = ["validate_word_pool", "pretty_summary", "load_word_pool", "clean_pool",
           "read_lines", "write_lines", "DEFAULT_POOL_PATH"]

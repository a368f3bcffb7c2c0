from .normalize import normalize_word, iter_words
from .dictionary import BUILTIN_WORDS, builtin_dictionary, build_dictionary, merge_words
from .io import read_lines, load_word_file, load_word_files
from .report import report_wordlist, pretty_summary

__all__ = [
    "normalize_word", "iter_words",
    "BUILTIN_WORDS", "builtin_dictionary", "build_dictionary", "merge_words",
    "read_lines", "load_word_file", "load_word_files",
    "report_wordlist", "pretty_summary",
]

"""Language specifications with sorts, sublanguages, a word-level parser and patterns."""

__version__ = "0.1.0"

__all__ = [
    "core",
    "parsing",
    "sublang",
    "flat",
    "human",
    "transparent",
    "std_langs",
    "cstfy",
    "cursor",
    "pattern_dyn",
    "pattern_specialized",
    "pattern_tmf",
    "pattern_parse",
    "pattern_unparse",
    "pattern_visit",
]
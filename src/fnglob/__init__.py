from .pattern import PatternSet, translate, get_matcher, matches, filter
from ._types import Options, Literal, Regex, GLOBSTAR
from ._brace import expand_braces, parse_brace_list
from ._glob import make, convert_segment, match_segment
from ._match import match_pattern, split_path
from ._exclude import ExcludeFilter
from .exceptions import PatternTypeError

__all__ = [
    "PatternSet", "translate", "get_matcher", "matches", "filter",
    "Options", "Literal", "Regex", "GLOBSTAR",
    "expand_braces", "parse_brace_list",
    "make", "convert_segment", "match_segment",
    "match_pattern", "split_path",
    "ExcludeFilter", "PatternTypeError",
]

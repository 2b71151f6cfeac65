"""Name Segmenter library initialization."""

from .arbitration import AcceptAllArbitrator, ArbitrationResult, Arbitrator, GivenNameArbitrator
from .dictionary import CompoundDictionary, GivenNameReference
from .formatting import FormattedName, OutputFormat, format_name, title_case, to_full_hyphen, to_natural, to_standard
from .normalization import normalize_name, tokenize
from .runner import RunnerConfig, SegmentationResult, SegmentationStats, segment_dataframe, segment_file
from .segmenter import NameSegmenter, SegmentedName, SegmenterConfig
from .sources import load_word_list, merge_word_lists

__all__ = [
    "AcceptAllArbitrator",
    "ArbitrationResult",
    "Arbitrator",
    "GivenNameArbitrator",
    "CompoundDictionary",
    "GivenNameReference",
    "FormattedName",
    "OutputFormat",
    "format_name",
    "title_case",
    "to_full_hyphen",
    "to_natural",
    "to_standard",
    "normalize_name",
    "tokenize",
    "RunnerConfig",
    "SegmentationResult",
    "SegmentationStats",
    "segment_dataframe",
    "segment_file",
    "NameSegmenter",
    "SegmentedName",
    "SegmenterConfig",
    "load_word_list",
    "merge_word_lists",
]
